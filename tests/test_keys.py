import unittest

from repo_cli.editor import KeyKind, KeyParser
from repo_cli.editor import keys
from repo_cli.editor.keys import KeyEvent, decode_char


class TestKeyParser(unittest.TestCase):
    def setUp(self):
        self.parser = KeyParser()

    def test_printable_characters(self):
        self.assertEqual(
            self.parser.feed("a Zé"),
            [KeyEvent.of_char(c) for c in "a Zé"],
        )

    def test_control_keys(self):
        self.assertEqual(self.parser.feed("\r"), [keys.ENTER])
        self.assertEqual(self.parser.feed("\n"), [keys.ENTER])
        self.assertEqual(self.parser.feed("\x7f"), [keys.BACKSPACE])
        self.assertEqual(self.parser.feed("\x08"), [keys.BACKSPACE])
        self.assertEqual(self.parser.feed("\x03"), [keys.INTERRUPT])

    def test_emacs_aliases(self):
        self.assertEqual(
            self.parser.feed("\x01\x05\x02\x06\x04"),
            [keys.HOME, keys.END, keys.LEFT, keys.RIGHT, keys.DELETE],
        )

    def test_unmapped_control_characters_are_ignored(self):
        self.assertEqual(self.parser.feed("\t\x00\x1a"), [keys.OTHER] * 3)

    def test_escape_sequences(self):
        cases = {
            "\x1b[D": keys.LEFT,
            "\x1b[C": keys.RIGHT,
            "\x1bOD": keys.LEFT,
            "\x1b[H": keys.HOME,
            "\x1b[1~": keys.HOME,
            "\x1b[7~": keys.HOME,
            "\x1b[F": keys.END,
            "\x1b[4~": keys.END,
            "\x1bOF": keys.END,
            "\x1b[3~": keys.DELETE,
            "\x1b[A": keys.OTHER,
        }
        for seq, expected in cases.items():
            with self.subTest(seq=seq):
                self.assertEqual(self.parser.feed(seq), [expected])
                self.assertFalse(self.parser.pending)

    def test_sequence_split_across_reads(self):
        self.assertEqual(self.parser.feed("\x1b"), [])
        self.assertTrue(self.parser.pending)
        self.assertEqual(self.parser.feed("["), [])
        self.assertEqual(self.parser.feed("D"), [keys.LEFT])

    def test_unknown_csi_sequence_is_swallowed(self):
        """Insert and Ctrl+Right must not leak parameter bytes as text"""
        self.assertEqual(self.parser.feed("\x1b[2~x"), [keys.OTHER, KeyEvent.of_char("x")])
        self.assertEqual(self.parser.feed("\x1b[1;5Cy"), [keys.OTHER, KeyEvent.of_char("y")])

    def test_alt_combination_is_ignored(self):
        self.assertEqual(self.parser.feed("\x1bb"), [keys.OTHER])

    def test_lone_escape_resolves_on_flush(self):
        self.assertEqual(self.parser.feed("\x1b"), [])
        self.assertEqual(self.parser.flush(), [keys.OTHER])
        self.assertFalse(self.parser.pending)
        self.assertEqual(self.parser.flush(), [])

    def test_escape_restarting_a_sequence(self):
        self.assertEqual(self.parser.feed("\x1b\x1b[C"), [keys.OTHER, keys.RIGHT])

    def test_mixed_stream(self):
        events = self.parser.feed("ab\x1b[Dc\r")
        self.assertEqual(
            [e.kind for e in events],
            [KeyKind.CHAR, KeyKind.CHAR, KeyKind.LEFT, KeyKind.CHAR, KeyKind.ENTER],
        )


class TestKeyEvent(unittest.TestCase):
    def test_of_char_requires_single_character(self):
        with self.assertRaises(ValueError):
            KeyEvent.of_char("ab")

    def test_decode_char(self):
        self.assertEqual(decode_char("q"), KeyEvent(KeyKind.CHAR, "q"))
        self.assertEqual(decode_char("\x1f"), keys.OTHER)

    def test_repr(self):
        self.assertEqual(repr(KeyEvent.of_char("a")), "KeyEvent.Char('a')")
        self.assertEqual(repr(keys.ENTER), "KeyEvent.ENTER")


if __name__ == "__main__":
    unittest.main()
