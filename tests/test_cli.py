import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from tictactoe_core.cli import main, replay


class TestCli(unittest.TestCase):
    def _run(self, argv, inputs=None):
        buf = io.StringIO()
        with redirect_stdout(buf):
            if inputs is None:
                main(argv)
            else:
                with patch("builtins.input", side_effect=list(inputs) + [EOFError()]):
                    main(argv)
        return buf.getvalue()

    def test_given_winning_moves_when_replayed_then_winner_printed(self):
        out = self._run(["--moves", "0,4,1,5,2"])
        self.assertIn("X | X | X", out)
        self.assertIn("X is the winner!", out)

    def test_given_repeated_cell_when_replayed_then_rejection_reported(self):
        out = self._run(["--moves", "4 4 0"])
        self.assertIn("Move at cell 4 rejected.", out)
        self.assertIn("Turn 3 for X.", out)

    def test_given_sequence_when_replay_then_session_holds_history(self):
        with redirect_stdout(io.StringIO()):
            session = replay([0, 1, 2, 4, 3, 6, 7, 5, 8])
        self.assertEqual(session.status, "It's a draw!")
        self.assertEqual(session.position, 9)

    def test_given_bad_moves_argument_when_run_then_exits_with_error(self):
        with self.assertRaises(SystemExit):
            with patch("sys.stderr", new_callable=io.StringIO):
                main(["--moves", "a,b"])

    def test_given_interactive_jump_then_play_when_run_then_history_branches(self):
        out = self._run([], ["0", "4", "j 1", "8", "h", "q"])
        self.assertIn("Turn 2 for O.", out)
        self.assertIn("> 2: Jump to turn 3", out)
        self.assertNotIn("3: Jump to turn 4", out)

    def test_given_bad_input_when_interactive_then_messages_and_loop_continues(self):
        out = self._run([], ["x", "9", "4", "4", "j 5", ""])
        self.assertIn("Could not parse. Try again.", out)
        self.assertIn("Cells are numbered 0 to 8.", out)
        self.assertIn("Illegal move. Try again.", out)
        self.assertIn("No history entry 5.", out)


    def test_given_out_of_range_cell_when_replayed_then_rejected_and_skipped(self):
        out = self._run(["--moves", "0,9"])
        self.assertIn("Move at cell 9 rejected.", out)
        self.assertIn("Turn 2 for O.", out)

    def test_given_unknown_log_level_when_run_then_exits_with_error(self):
        with self.assertRaises(SystemExit):
            with patch("sys.stderr", new_callable=io.StringIO):
                main(["--log-level", "chatty", "--moves", "0"])
        with patch.dict(os.environ, {"TICTACTOE_LOG_LEVEL": "chatty"}):
            with self.assertRaises(SystemExit):
                with patch("sys.stderr", new_callable=io.StringIO):
                    main(["--moves", "0"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
