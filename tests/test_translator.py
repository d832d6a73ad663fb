# tests/test_translator.py
"""Tests for encode/decode and the translator session."""

import threading
from datetime import datetime, timezone

import pytest

from morse.core.errors import InvalidFormat
from morse.core.history import Mode
from morse.core.symbols import DEFAULT_SYMBOLS, SymbolTable
from morse.core.translator import Translator


@pytest.fixture
def translator():
    return Translator()


def test_encode_sos(translator):
    assert translator.encode("SOS") == "... --- ..."


def test_decode_sos(translator):
    assert translator.decode("... --- ...") == "SOS"


def test_encode_lowercase(translator):
    assert translator.encode("sos") == "... --- ..."


def test_encode_words(translator):
    assert translator.encode("HI YOU") == ".... .. / -.-- --- ..-"


def test_decode_words(translator):
    assert translator.decode(".... .. / -.-- --- ..-") == "HI YOU"


@pytest.mark.parametrize("char", sorted(DEFAULT_SYMBOLS))
def test_round_trip_default_chars(translator, char):
    assert translator.decode(translator.encode(char)) == char


def test_round_trip_lowercase(translator):
    assert translator.decode(translator.encode("hello, world!")) == "HELLO, WORLD!"


def test_space_encodes_to_separator(translator):
    assert translator.encode(" ") == "/"


def test_separator_decodes_to_space(translator):
    assert translator.decode("/") == " "


def test_empty_inputs(translator):
    assert translator.encode("") == ""
    assert translator.decode("") == ""
    assert translator.decode("   ") == ""
    assert translator.decode("\t\n") == ""


def test_decode_collapses_whitespace(translator):
    assert translator.decode("  ...   ---\t... \n") == "SOS"


def test_encode_unmapped(translator):
    assert translator.encode("A#B") == ".- ? -..."


def test_decode_unknown_token(translator):
    assert translator.decode(".- ........ -...") == "A?B"


def test_encode_removed_char(translator):
    assert translator.remove_mapping("S") is True
    assert translator.encode("SOS") == "? --- ?"


def test_put_mapping_invalid_leaves_state(translator):
    before = translator.list_mappings()
    
    with pytest.raises(InvalidFormat):
        translator.put_mapping("A", "abc")
    
    assert translator.list_mappings() == before
    assert translator.decode(".-") == "A"
    assert translator.encode("A") == ".-"


def test_remove_space_always_false(translator):
    assert translator.remove_mapping(" ") is False
    translator.remove_mapping("A")
    translator.put_mapping("#", "..--")
    assert translator.remove_mapping(" ") is False
    assert translator.encode(" ") == "/"


def test_overwrite_wins_decode(translator):
    translator.put_mapping("E", "--")
    
    assert translator.decode("--") == "E"
    assert translator.decode(".") == "?"
    assert translator.encode("E") == "--"


def test_new_mapping_decodes(translator):
    translator.put_mapping("#", ".-.-")
    
    assert translator.encode("#") == ".-.-"
    assert translator.decode(".-.-") == "#"


def test_list_mappings_sorted(translator):
    chars = [c for c, _ in translator.list_mappings()]
    
    assert chars == sorted(chars)
    assert translator.mapping_count() == len(DEFAULT_SYMBOLS)


def test_custom_table():
    translator = Translator(table=SymbolTable({"A": ".-", "B": "-..."}))
    
    assert translator.encode("ABC") == ".- -... ?"
    assert translator.decode(".- / -...") == "A B"


# === History ===

def test_history_records_calls(translator):
    translator.encode("SOS")
    translator.decode("... --- ...")
    
    history = translator.list_history()
    
    assert len(history) == 2
    assert history[0].mode == Mode.ENCODE
    assert history[0].input == "SOS"
    assert history[0].output == "... --- ..."
    assert history[1].mode == Mode.DECODE
    assert history[1].input == "... --- ..."
    assert history[1].output == "SOS"


def test_history_keeps_raw_input(translator):
    translator.encode("sos")
    assert translator.list_history()[0].input == "sos"


def test_history_clear(translator):
    translator.encode("A")
    translator.decode(".-")
    
    assert translator.clear_history() == 2
    assert translator.list_history() == ()


def test_history_empty_translations_recorded(translator):
    translator.encode("")
    translator.decode("   ")
    
    assert len(translator.list_history()) == 2


def test_mapping_changes_not_recorded(translator):
    translator.put_mapping("#", ".-.-")
    translator.remove_mapping("#")
    
    assert translator.list_history() == ()


def test_history_uses_clock():
    stamp = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    translator = Translator(clock=lambda: stamp)
    
    translator.encode("E")
    
    assert translator.list_history()[0].timestamp == stamp


def test_default_timestamp_is_utc(translator):
    translator.encode("E")
    
    ts = translator.list_history()[0].timestamp
    assert ts.tzinfo is not None
    assert ts.utcoffset().total_seconds() == 0


def test_shared_session_across_threads(translator):
    threads_n, loops = 8, 300
    errors = []
    
    def worker(n):
        char = "#$%&*<>[]"[n]
        try:
            for i in range(loops):
                translator.put_mapping(char, "." * (n + 8) + "-" * (i % 3 + 1))
                translator.decode("... --- ...")
                translator.encode("SOS")
        except Exception as e:
            errors.append(e)
    
    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    
    assert errors == []
    history = translator.list_history()
    assert len(history) == threads_n * loops * 2
    assert all(t.output in ("SOS", "... --- ...") for t in history)
