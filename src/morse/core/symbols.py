"""
Symbol table: character -> Morse sequence, with a derived inverse index.

The inverse index is rebuilt in full after every write, so it can never
drift from the table. If two characters end up sharing a sequence, the
one written most recently wins on decode.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from morse.core.errors import MorseError, InvalidFormat, ProtectedMapping


logger = logging.getLogger(__name__)

WORD_SEPARATOR = "/"
SPACE = " "

SEQUENCE_RE = re.compile(r"[.-]+")

DEFAULT_SYMBOLS: dict[str, str] = {
    # Letters
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",

    # Digits
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",

    # Punctuation
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.", "!": "-.-.--",
    "/": "-..-.", "(": "-.--.", ")": "-.--.-", "&": ".-...", ":": "---...",
    ";": "-.-.-.", "=": "-...-", "+": ".-.-.", "-": "-....-", "_": "..--.-",
    '"': ".-..-.", "$": "...-..-", "@": ".--.-.",

    # Word separator
    SPACE: WORD_SEPARATOR,
}


def normalize_char(char: str) -> str:
    """Upper-case a single-character key."""
    if not isinstance(char, str) or len(char) != 1:
        raise MorseError("Provide exactly one character.")
    upper = char.upper()
    if len(upper) != 1:
        # "ß" -> "SS": no single uppercase key exists.
        raise MorseError(f"{char!r} has no single-character uppercase form.")
    return upper


def expands_on_upper(char: str) -> bool:
    return len(char) == 1 and len(char.upper()) != 1


def validate_sequence(sequence: str) -> str:
    if not isinstance(sequence, str) or not SEQUENCE_RE.fullmatch(sequence):
        raise InvalidFormat("Morse sequence can only contain '.' and '-'")
    return sequence


@dataclass(frozen=True)
class InverseIndex:
    """Read-only sequence -> character lookup."""

    _by_sequence: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def rebuild(cls, entries: Iterable[tuple[str, str]]) -> "InverseIndex":
        """
        Invert (char, sequence) pairs given in write order.

        Later pairs overwrite earlier ones that share a sequence.
        """
        by_sequence = {}
        for char, sequence in entries:
            by_sequence[sequence] = char
        return cls(by_sequence)

    def get(self, sequence: str) -> str | None:
        return self._by_sequence.get(sequence)

    def __len__(self) -> int:
        return len(self._by_sequence)

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._by_sequence


class SymbolTable:
    """Editable character -> sequence mapping."""

    def __init__(self, symbols: Mapping[str, str] | None = None):
        self._entries: dict[str, str] = {}
        for char, sequence in (DEFAULT_SYMBOLS if symbols is None else symbols).items():
            key = normalize_char(char)
            if key != SPACE:
                self._entries[key] = validate_sequence(sequence)
        self._entries[SPACE] = WORD_SEPARATOR
        self._inverse = InverseIndex()
        self._rebuild()

    def _rebuild(self):
        # Dict order is write order: put() re-inserts overwritten keys.
        self._inverse = InverseIndex.rebuild(self._entries.items())
        logger.debug("Rebuilt inverse index: %d sequences", len(self._inverse))

    def get(self, char: str) -> str | None:
        if expands_on_upper(char):
            return None
        return self._entries.get(normalize_char(char))

    def lookup_sequence(self, sequence: str) -> str | None:
        return self._inverse.get(sequence)

    def put(self, char: str, sequence: str):
        key = normalize_char(char)
        validate_sequence(sequence)
        if key == SPACE:
            raise ProtectedMapping("The space mapping is fixed to the word separator.")

        previous = self._entries.pop(key, None)
        self._entries[key] = sequence
        self._rebuild()
        logger.info("Mapping %r: %s -> %s", key, previous, sequence)

    def remove(self, char: str) -> bool:
        if expands_on_upper(char):
            return False
        key = normalize_char(char)
        if key == SPACE:
            return False
        if key not in self._entries:
            return False

        del self._entries[key]
        self._rebuild()
        logger.info("Removed mapping %r", key)
        return True

    def snapshot(self) -> tuple[tuple[str, str], ...]:
        """All entries, sorted by character."""
        return tuple(sorted(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        if expands_on_upper(char):
            return False
        return normalize_char(char) in self._entries
