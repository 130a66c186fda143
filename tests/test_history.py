import unittest

from game import Board, History, X, O, append_snapshot, jump_to


def grow(history, position, cells_and_marks):
    for cell, mark in cells_and_marks:
        board = history[position].with_mark(cell, mark)
        history, position = append_snapshot(history, position, board)
    return history, position


class TestHistory(unittest.TestCase):
    def test_given_new_history_when_created_then_single_empty_snapshot(self):
        history = History.initial()
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0], Board.empty())

    def test_given_empty_tuple_when_building_history_then_value_error(self):
        with self.assertRaises(ValueError):
            History(snapshots=tuple())

    def test_given_filled_first_snapshot_when_building_history_then_value_error(self):
        with self.assertRaises(ValueError):
            History(snapshots=(Board.from_rows(["XXX", "...", "..."]),))
        with self.assertRaises(ValueError):
            History(snapshots=(Board.empty().with_mark(4, X), Board.empty()))

    def test_given_latest_position_when_appending_then_history_grows_by_one(self):
        history = History.initial()
        board = Board.empty().with_mark(0, X)
        new_history, position = append_snapshot(history, 0, board)
        self.assertEqual(len(new_history), 2)
        self.assertEqual(position, 1)
        self.assertEqual(new_history[1], board)
        # The old history value is not modified
        self.assertEqual(len(history), 1)

    def test_given_rewind_when_appending_then_future_snapshots_discarded(self):
        history, position = grow(History.initial(), 0, [(0, X), (4, O), (1, X), (5, O)])
        self.assertEqual((len(history), position), (5, 4))

        position = jump_to(history, 1)
        self.assertEqual(position, 1)
        self.assertEqual(len(history), 5)

        branch = history[1].with_mark(8, O)
        history, position = append_snapshot(history, position, branch)
        self.assertEqual(len(history), 3)
        self.assertEqual(position, 2)
        self.assertEqual(history[2], branch)
        self.assertEqual(history[1], Board.empty().with_mark(0, X))

    def test_given_rewind_to_start_when_appending_then_only_initial_kept(self):
        history, position = grow(History.initial(), 0, [(0, X), (4, O)])
        position = jump_to(history, 0)
        history, position = append_snapshot(history, position, Board.empty().with_mark(8, X))
        self.assertEqual(len(history), 2)
        self.assertEqual(position, 1)
        self.assertEqual(history[0], Board.empty())

    def test_given_out_of_range_target_when_jumping_then_value_error(self):
        history, _ = grow(History.initial(), 0, [(0, X)])
        self.assertEqual(jump_to(history, 0), 0)
        self.assertEqual(jump_to(history, 1), 1)
        with self.assertRaises(ValueError):
            jump_to(history, 2)
        with self.assertRaises(ValueError):
            jump_to(history, -1)

    def test_given_position_outside_history_when_appending_then_value_error(self):
        with self.assertRaises(ValueError):
            append_snapshot(History.initial(), 3, Board.empty())


if __name__ == "__main__":
    unittest.main(verbosity=2)
