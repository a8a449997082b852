"""
Telemetry tagging - Shared Layer

Every telemetry record leaving the process is a structlog event dict.
``RoleNameTagger`` stamps each one with the logical role name of the
service so that records from several services can be told apart once
they are aggregated.
"""

from __future__ import annotations

from typing import Any, MutableMapping

from structlog.types import EventDict, WrappedLogger

ROLE_NAME_FIELD = "cloud_role_name"


class RoleNameTagger:
    """Attach a fixed role name to telemetry records."""

    def __init__(self, role_name: str) -> None:
        self._role_name = role_name

    @property
    def role_name(self) -> str:
        return self._role_name

    def tag(self, record: MutableMapping[str, Any]) -> None:
        """Overwrite the record's role name field."""
        record[ROLE_NAME_FIELD] = self._role_name

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        self.tag(event_dict)
        return event_dict
