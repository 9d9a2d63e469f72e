import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from sokoban_core.cli import main


def _run(argv, commands):
    out = io.StringIO()
    with patch("builtins.input", side_effect=list(commands) + [EOFError()]), redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue()


class TestCli(unittest.TestCase):
    def test_given_list_flag_when_run_then_level_names_printed(self):
        code, text = _run(["--list"], [])
        self.assertEqual(code, 0)
        self.assertIn("tutorial", text.split())
        self.assertIn("corridor", text.split())

    def test_given_corridor_when_pushing_right_then_solved_message(self):
        code, text = _run(["--level", "corridor"], ["d", "l", "right", "q"])
        self.assertEqual(code, 0)
        self.assertIn("#   iO#", text)
        self.assertIn("Solved in 3 moves!", text)

    def test_given_blocked_and_undo_commands_when_run_then_feedback_printed(self):
        code, text = _run(["--level", "tutorial"], ["w", "u", "d", "undo", "x", "r"])
        self.assertEqual(code, 0)  # EOF after the last command
        self.assertIn("Blocked.", text)
        self.assertIn("Nothing to undo.", text)
        self.assertIn("Commands:", text)

    def test_given_unknown_level_when_run_then_error_code(self):
        code, text = _run(["--level", "nope"], [])
        self.assertEqual(code, 1)
        self.assertIn("error:", text)

    def test_given_level_file_when_run_then_loaded_from_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "one.txt")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("iox\n")
            code, text = _run(["--file", path], ["d"])
        self.assertEqual(code, 0)
        self.assertIn(" iO", text)
        self.assertIn("Solved in 1 moves!", text)

    def test_given_undecodable_level_file_when_run_then_error_code(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "bad.txt")
            with open(path, "wb") as fh:
                fh.write(b"#i\xff#\n")
            code, text = _run(["--file", path], [])
        self.assertEqual(code, 1)
        self.assertIn("error:", text)


if __name__ == "__main__":
    unittest.main(verbosity=2)
