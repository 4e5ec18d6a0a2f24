"""
memsh Audit Log

Append-only CSV record of every shell command: when it ran, who ran it,
what was typed and what it printed.
"""

import csv
import logging
import os
from typing import Any, Callable, Dict, List, Optional

from . import clock
from .exceptions import AuditLogError

logger = logging.getLogger('memsh.audit')

FIELDS = ('timestamp', 'user', 'action', 'output')

class AuditRecord:
    """One row of the audit log"""

    def __init__(self, timestamp: str, user: str, action: str, output: str = ''):
        self.timestamp = timestamp
        self.user = user
        self.action = action
        self.output = output

    def to_row(self) -> List[str]:
        return [self.timestamp, self.user, self.action, self.output]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary

        Returns:
            Dictionary representation
        """
        return dict(zip(FIELDS, self.to_row()))

    @classmethod
    def from_row(cls, row: List[str]) -> 'AuditRecord':
        """
        Create from a CSV row

        Args:
            row: Fields in log column order

        Returns:
            AuditRecord instance
        """
        if len(row) != len(FIELDS):
            raise ValueError(f"Expected {len(FIELDS)} fields, got {len(row)}")
        return cls(*row)

    def __eq__(self, other) -> bool:
        return isinstance(other, AuditRecord) and self.to_row() == other.to_row()

    def __repr__(self) -> str:
        return f"AuditRecord({self.timestamp!r}, {self.user!r}, {self.action!r}, {self.output!r})"

class AuditLog:
    """Append-only CSV audit log, flushed after every record"""

    def __init__(self, path: str, timestamp: Callable[[], str] = clock.now_audit):
        self.path = path
        self._timestamp = timestamp
        self._file = None
        self._writer = None

    def open(self) -> 'AuditLog':
        if self._file is not None:
            return self
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            self._file = open(self.path, 'a', encoding='utf-8', newline='')
        except OSError as e:
            raise AuditLogError(f"Error opening audit log {self.path}: {e}") from e
        self._writer = csv.writer(self._file, quoting=csv.QUOTE_ALL, lineterminator='\n')
        logger.debug(f"Audit log opened: {self.path}")
        return self

    def close(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None
        self._writer = None
        logger.debug(f"Audit log closed: {self.path}")

    @property
    def closed(self) -> bool:
        return self._file is None

    def record(self, user: str, action: str, output: str = '') -> AuditRecord:
        """Append one record and flush it to disk"""
        if self._file is None:
            raise AuditLogError(f"Audit log {self.path} is not open")

        entry = AuditRecord(self._timestamp(), user, action, output)
        self._writer.writerow(entry.to_row())
        self._file.flush()
        return entry

    def __enter__(self) -> 'AuditLog':
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

def read_records(path: str, user: Optional[str] = None) -> List[AuditRecord]:
    """Load every record of an audit log, optionally only those of one user"""
    if not os.path.exists(path):
        return []

    with open(path, 'r', encoding='utf-8', newline='') as f:
        records = [AuditRecord.from_row(row) for row in csv.reader(f) if row]

    if user is not None:
        records = [r for r in records if r.user == user]
    return records
