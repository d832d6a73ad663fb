"""
Errors raised by the symbol table.
"""


class MorseError(ValueError):
    """Base class for rejected symbol-table input."""


class InvalidFormat(MorseError):
    """Sequence is empty or holds something other than '.' and '-'."""


class ProtectedMapping(MorseError):
    """The space -> word separator mapping cannot be changed."""
