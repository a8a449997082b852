"""Domain ports for local configuration lookups."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol


class IConfigurationProvider(Protocol):
    """Synchronous key/value configuration source."""

    def get(self, key: str) -> Optional[str]:
        """Return the configured value, or ``None`` when the key is absent."""
        ...


class IConfigurationStore(IConfigurationProvider, Protocol):
    """Configuration source that accepts values resolved at startup."""

    def load(self, values: Mapping[str, str]) -> None:
        """Merge values into the configuration, taking precedence over others."""
        ...
