"""
Morse code translator with an editable symbol table.
"""

from morse.config import APP_VERSION as __version__
