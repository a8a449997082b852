"""Domain service for checking secret content."""

from typing import Optional

from src.shared.consts import DEFAULT_SECRET_MARKER


class SecretValidator:
    """Accept secret values that carry a known marker token."""

    def __init__(self, marker: str = DEFAULT_SECRET_MARKER) -> None:
        if not marker:
            raise ValueError("marker must not be empty")
        self._marker = marker

    @property
    def marker(self) -> str:
        return self._marker

    def is_valid(self, value: Optional[str]) -> bool:
        return bool(value) and self._marker in value
