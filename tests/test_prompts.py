import unittest

from connectfour.errors import InvalidMove
from connectfour.types import Move
from connectfour.ui.prompts import parse_command


class TestParseCommand(unittest.TestCase):
    def test_columns_are_one_indexed(self):
        self.assertEqual(parse_command("1", 7), ("drop", Move(0)))
        self.assertEqual(parse_command(" 7 ", 7), ("drop", Move(6)))

    def test_commands(self):
        self.assertEqual(parse_command("q", 7), ("quit", None))
        self.assertEqual(parse_command("Undo", 7), ("undo", None))
        self.assertEqual(parse_command("r", 7), ("restart", None))

    def test_bad_input(self):
        with self.assertRaises(ValueError):
            parse_command("left", 7)
        with self.assertRaises(InvalidMove):
            parse_command("8", 7)
        with self.assertRaises(InvalidMove):
            parse_command("0", 7)


if __name__ == "__main__":
    unittest.main()
