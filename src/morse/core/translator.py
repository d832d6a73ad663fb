"""
Translator session: encode/decode over a symbol table, with history.

One Translator owns one SymbolTable and one HistoryLog. All public methods
hold the session lock, so a single instance can be shared by request
handlers.
"""

import logging
from datetime import datetime, timezone
from threading import RLock
from typing import Callable

from morse.core.history import HistoryLog, Mode, Translation
from morse.core.symbols import SymbolTable, WORD_SEPARATOR, SPACE


logger = logging.getLogger(__name__)

UNKNOWN = "?"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Translator:

    def __init__(
        self,
        table: SymbolTable | None = None,
        history: HistoryLog | None = None,
        clock: Clock = utc_now,
    ):
        self._table = table if table is not None else SymbolTable()
        self._history = history if history is not None else HistoryLog()
        self._clock = clock
        self._lock = RLock()

    # === Translation ===

    def encode(self, text: str) -> str:
        """Text -> space-separated sequences. Unmapped characters become '?'."""
        with self._lock:
            output = " ".join(
                self._table.get(ch) or UNKNOWN
                for ch in text.upper()
            )
            self._record(Mode.ENCODE, text, output)
            return output

    def decode(self, text: str) -> str:
        """Whitespace-separated sequences -> text. '/' is a word break."""
        with self._lock:
            chars = []
            for token in text.split():
                if token == WORD_SEPARATOR:
                    chars.append(SPACE)
                else:
                    chars.append(self._table.lookup_sequence(token) or UNKNOWN)
            output = "".join(chars)
            self._record(Mode.DECODE, text, output)
            return output

    def _record(self, mode: Mode, text: str, output: str):
        self._history.append(Translation(
            timestamp=self._clock(),
            mode=mode,
            input=text,
            output=output,
        ))
        logger.debug("%s %r -> %r", mode.value, text, output)

    # === Mappings ===

    def put_mapping(self, char: str, sequence: str):
        with self._lock:
            self._table.put(char, sequence)

    def remove_mapping(self, char: str) -> bool:
        with self._lock:
            return self._table.remove(char)

    def list_mappings(self) -> tuple[tuple[str, str], ...]:
        with self._lock:
            return self._table.snapshot()

    def mapping_count(self) -> int:
        with self._lock:
            return len(self._table)

    # === History ===

    def list_history(self) -> tuple[Translation, ...]:
        with self._lock:
            return self._history.all()

    def clear_history(self) -> int:
        with self._lock:
            return self._history.clear()
