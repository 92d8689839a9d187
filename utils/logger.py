"""
Audit Logger utility.

Responsibility boundaries:
- Handles structured event logging for demo and experiment runs.
- Writes immutable records; the fill core never logs.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class AuditRecord:
    """
    A single immutable log entry.
    """
    sequence_number: int
    event_type: str
    data: Mapping[str, Any]


class AuditLogger:
    """
    A centralized logger for audit and replay purposes.
    """

    def __init__(self) -> None:
        self._records: List[AuditRecord] = []

    def log_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """
        Log a specific event.

        Args:
            event_type: The category of the event.
            data: The event payload. Copied, so later edits by the caller
                do not leak into the record.
        """
        record = AuditRecord(
            sequence_number=len(self._records),
            event_type=event_type,
            data=MappingProxyType(dict(data)),
        )
        self._records.append(record)

    @property
    def records(self) -> Tuple[AuditRecord, ...]:
        return tuple(self._records)

    def events_of(self, event_type: str) -> Tuple[AuditRecord, ...]:
        """Return every record of the given category, in logging order."""
        return tuple(r for r in self._records if r.event_type == event_type)

    def __len__(self) -> int:
        return len(self._records)
