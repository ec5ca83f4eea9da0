import unittest

from game import Board, BoardSizeError, BoardStateError, LoopoverError


class TestBoard(unittest.TestCase):
    def test_given_any_size_above_one_when_created_then_board_is_solved(self):
        for w in range(2, 7):
            for h in range(2, 7):
                board = Board(w, h)
                self.assertTrue(board.is_solved(), f"{w}x{h}")
                self.assertEqual(sorted(board.cells), list(range(1, w * h + 1)))

    def test_given_solved_board_when_reading_cells_then_values_follow_row_major_order(self):
        board = Board(4, 3)
        self.assertEqual(board.at(0, 0), 1)
        self.assertEqual(board.at(3, 0), 4)
        self.assertEqual(board.at(0, 1), 5)
        self.assertEqual(board.at(3, 2), 12)
        self.assertEqual(board.solved_value(2, 1), 7)
        self.assertEqual(board.row(1), [5, 6, 7, 8])
        self.assertEqual(board.column(1), [2, 6, 10])
        self.assertEqual(board.rows(), [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
        self.assertEqual(list(board.coords())[:5], [(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)])

    def test_given_too_small_dimension_when_created_then_size_error_names_it(self):
        with self.assertRaises(BoardSizeError) as ctx:
            Board(1, 5)
        self.assertEqual(ctx.exception.name, 'width')
        self.assertEqual(ctx.exception.value, 1)

        with self.assertRaises(BoardSizeError) as ctx:
            Board(5, 1)
        self.assertEqual(ctx.exception.name, 'height')

        # Construction errors are ValueErrors too
        with self.assertRaises(ValueError):
            Board(0, 0)
        with self.assertRaises(LoopoverError):
            Board(-3, 4)

    def test_given_scrambled_board_when_reset_then_solved_again(self):
        board = Board(3, 3)
        board.cells[0], board.cells[8] = board.cells[8], board.cells[0]
        self.assertFalse(board.is_solved())
        board.reset()
        self.assertTrue(board.is_solved())
        self.assertEqual((board.width, board.height), (3, 3))

    def test_given_rows_when_from_rows_then_board_rebuilt_or_rejected(self):
        board = Board.from_rows([[2, 1], [3, 4]])
        self.assertEqual(board.rows(), [[2, 1], [3, 4]])
        self.assertFalse(board.is_solved())

        with self.assertRaises(BoardStateError):
            Board.from_rows([[1, 1], [3, 4]])  # duplicate
        with self.assertRaises(BoardStateError):
            Board.from_rows([[1, 2, 3], [4, 5]])  # ragged
        with self.assertRaises(BoardStateError):
            Board.from_rows([[1, 2], [3, 5]])  # out of range
        with self.assertRaises(BoardSizeError):
            Board.from_rows([[1, 2]])

    def test_given_board_when_copied_then_independent_and_equal(self):
        board = Board(3, 2)
        other = board.copy()
        self.assertEqual(board, other)
        other.cells[0], other.cells[1] = other.cells[1], other.cells[0]
        self.assertNotEqual(board, other)
        self.assertTrue(board.is_solved())

    def test_given_board_when_pretty_then_numbers_right_aligned(self):
        self.assertEqual(Board(3, 3).pretty(), " 1 2 3\n 4 5 6\n 7 8 9")
        lines = Board(4, 3).pretty().split("\n")
        self.assertEqual(lines[0], "  1  2  3  4")
        self.assertEqual(lines[2], "  9 10 11 12")


if __name__ == '__main__':
    unittest.main(verbosity=2)
