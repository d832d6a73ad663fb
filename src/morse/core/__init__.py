from morse.core.errors import MorseError, InvalidFormat, ProtectedMapping
from morse.core.history import HistoryLog, Mode, Translation
from morse.core.symbols import SymbolTable, InverseIndex, DEFAULT_SYMBOLS, WORD_SEPARATOR
from morse.core.translator import Translator, UNKNOWN
