"""Secret value object returned by secret stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class Secret:
    """A named secret and its current value."""

    name: str
    value: Optional[str]
    version: Optional[str] = None
    content_type: Optional[str] = None
    enabled: bool = True
    tags: Dict[str, str] = field(default_factory=dict)
