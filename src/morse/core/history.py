"""
Session translation log.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Mode(str, Enum):
    ENCODE = "ENCODE"
    DECODE = "DECODE"


@dataclass(frozen=True)
class Translation:
    timestamp: datetime
    mode: Mode
    input: str
    output: str

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "mode": self.mode.value,
            "input": self.input,
            "output": self.output,
        }


class HistoryLog:
    """Append-only list of translations, cleared only as a whole."""

    def __init__(self):
        self._records: list[Translation] = []

    def append(self, record: Translation):
        self._records.append(record)

    def all(self) -> tuple[Translation, ...]:
        return tuple(self._records)

    def clear(self) -> int:
        count = len(self._records)
        self._records.clear()
        return count

    def __len__(self) -> int:
        return len(self._records)
