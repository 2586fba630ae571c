"""Tests for key decoding."""

import pytest

from datetime_select.keys import Key, KeyEvent, decode, from_textual


class TestDecode:
    """Tests for raw terminal decoding."""

    @pytest.mark.parametrize("seq", ["\r", "\n"])
    def test_enter(self, seq):
        assert decode(seq) == KeyEvent(Key.ENTER)

    @pytest.mark.parametrize(
        "seq,key",
        [
            ("\x1b[A", Key.ARROW_UP),
            ("\x1b[B", Key.ARROW_DOWN),
            ("\x1b[C", Key.ARROW_RIGHT),
            ("\x1b[D", Key.ARROW_LEFT),
            ("\x1bOA", Key.ARROW_UP),
        ],
    )
    def test_arrows(self, seq, key):
        assert decode(seq) == KeyEvent(key)

    def test_backspace(self):
        assert decode("\x7f") == KeyEvent(Key.BACKSPACE)

    def test_printable(self):
        assert decode("7") == KeyEvent(Key.CHAR, "7")

    def test_unknown_escape(self):
        assert decode("\x1b").key is Key.UNKNOWN

    def test_ctrl_c_interrupts(self):
        with pytest.raises(KeyboardInterrupt):
            decode("\x03")


class TestFromTextual:
    """Tests for Textual key translation."""

    def test_named_keys(self):
        assert from_textual("enter", "\r") == KeyEvent(Key.ENTER)
        assert from_textual("left", None) == KeyEvent(Key.ARROW_LEFT)
        assert from_textual("backspace", "\x08") == KeyEvent(Key.BACKSPACE)

    def test_digit(self):
        assert from_textual("5", "5") == KeyEvent(Key.CHAR, "5")

    def test_punctuation_uses_character(self):
        assert from_textual("full_stop", ".") == KeyEvent(Key.CHAR, ".")

    def test_tab_is_unknown(self):
        assert from_textual("tab", "\t").key is Key.UNKNOWN
