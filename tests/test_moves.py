import unittest

from game import (
    Axis,
    Board,
    IndexOutOfRangeError,
    Move,
    ZeroAmountError,
    apply_move,
    format_move,
    make_rng,
    move_sequence_shuffle,
)


class TestRotation(unittest.TestCase):
    def test_given_solved_3x3_when_row_zero_forward_then_last_value_wraps_to_front(self):
        board = Board(3, 3)
        steps = apply_move(board, Move(Axis.ROW, 0, 1))
        self.assertEqual(steps, 1)
        self.assertEqual(board.row(0), [3, 1, 2])
        self.assertEqual(board.row(1), [4, 5, 6])
        self.assertEqual(board.row(2), [7, 8, 9])

    def test_given_solved_3x3_when_row_backward_then_first_value_wraps_to_end(self):
        board = Board(3, 3)
        apply_move(board, Move(Axis.ROW, 1, -1))
        self.assertEqual(board.row(1), [5, 6, 4])

    def test_given_solved_5x5_when_column_zero_forward_twice_then_bottom_values_move_to_top(self):
        board = Board(5, 5)
        self.assertEqual(board.column(0), [1, 6, 11, 16, 21])
        steps = apply_move(board, Move(Axis.COLUMN, 0, 2))
        self.assertEqual(steps, 2)
        self.assertEqual(board.column(0), [16, 21, 1, 6, 11])
        self.assertEqual(board.column(1), [2, 7, 12, 17, 22])

    def test_given_column_backward_when_applied_then_top_value_wraps_to_bottom(self):
        board = Board(2, 3)
        apply_move(board, Move(Axis.COLUMN, 1, -1))
        self.assertEqual(board.column(1), [4, 6, 2])

    def test_given_move_when_inverse_applied_then_board_restored(self):
        for seed in range(5):
            board = Board(4, 3)
            move_sequence_shuffle(board, 12, make_rng(seed))
            before = board.copy()
            for move in (Move(Axis.ROW, 2, 3), Move(Axis.COLUMN, 3, -2), Move(Axis.ROW, 0, -7)):
                apply_move(board, move)
                apply_move(board, move.inverse())
                self.assertEqual(board, before)

    def test_given_total_shift_multiple_of_dimension_when_applied_then_board_restored(self):
        board = Board(4, 3)
        move_sequence_shuffle(board, 0, make_rng(42))
        before = board.copy()
        apply_move(board, Move(Axis.ROW, 1, 4))
        self.assertEqual(board, before)
        apply_move(board, Move(Axis.COLUMN, 2, -6))
        self.assertEqual(board, before)
        for _ in range(3):
            apply_move(board, Move(Axis.COLUMN, 0, 3))
        self.assertEqual(board, before)

    def test_given_amount_above_dimension_when_applied_then_every_unit_step_counted(self):
        board = Board(3, 3)
        reference = Board(3, 3)
        steps = apply_move(board, Move(Axis.ROW, 0, 7))
        apply_move(reference, Move(Axis.ROW, 0, 1))
        self.assertEqual(steps, 7)
        self.assertEqual(board, reference)

    def test_given_rotations_when_applied_then_values_stay_a_permutation(self):
        board = Board(5, 4)
        move_sequence_shuffle(board, 50, make_rng(3))
        self.assertEqual(sorted(board.cells), list(range(1, 21)))


class TestMove(unittest.TestCase):
    def test_given_move_when_formatted_then_canonical_notation(self):
        self.assertEqual(format_move(Move(Axis.ROW, 0, 1)), '1R0')
        self.assertEqual(format_move(Move(Axis.COLUMN, 4, -2)), '-2C4')

    def test_given_move_when_querying_helpers_then_expected_values(self):
        board = Board(4, 3)
        m = Move(Axis.COLUMN, 1, -3)
        self.assertEqual(m.steps, 3)
        self.assertFalse(m.forward)
        self.assertEqual(m.dimension(board), 3)
        self.assertEqual(Move(Axis.ROW, 0, 1).dimension(board), 4)
        self.assertEqual(m.inverse(), Move(Axis.COLUMN, 1, 3))

    def test_given_move_when_mutated_then_frozen(self):
        m = Move(Axis.ROW, 0, 1)
        with self.assertRaises(Exception):
            m.amount = 2  # type: ignore[misc]

    def test_given_checked_move_when_out_of_bounds_or_zero_then_rejected(self):
        board = Board(4, 3)
        self.assertEqual(Move.checked(board, Axis.ROW, 2, 5), Move(Axis.ROW, 2, 5))
        self.assertEqual(Move.checked(board, Axis.COLUMN, 3, -1), Move(Axis.COLUMN, 3, -1))
        with self.assertRaises(IndexOutOfRangeError) as ctx:
            Move.checked(board, Axis.ROW, 3, 1)
        self.assertEqual(ctx.exception.limit, 3)
        with self.assertRaises(IndexOutOfRangeError):
            Move.checked(board, Axis.COLUMN, -1, 1)
        with self.assertRaises(ZeroAmountError):
            Move.checked(board, Axis.COLUMN, 0, 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
