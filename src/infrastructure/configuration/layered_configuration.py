"""Configuration provider layering startup values over the environment."""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from src.domain.ports.configuration import IConfigurationStore


class LayeredConfigurationProvider(IConfigurationStore):
    """
    Resolve configuration keys from two layers.

    Values loaded at startup (secrets copied from the vault) win over the
    process environment. Environment lookups try the key as given, then
    upper-cased, so ``appInsightsConnectionString`` also matches
    ``APPINSIGHTSCONNECTIONSTRING``.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        if key in self._values:
            return self._values[key]
        value = self._environ.get(key)
        if value is None:
            value = self._environ.get(key.upper())
        return value

    def load(self, values: Mapping[str, str]) -> None:
        self._values.update({key: value for key, value in values.items() if value})
