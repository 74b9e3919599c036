from django.test import SimpleTestCase

from apps.bingo.choices import LineType, SquareKind
from apps.bingo.evaluator import (
    Board, BingoKey, InvalidBoardError, SquareState, evaluate, find_bingos, iter_lines,
)

ROW, COLUMN, DIAGONAL = LineType.ROW.value, LineType.COLUMN.value, LineType.DIAGONAL.value


def make_board(size, completed=(), free=()):
    squares = []
    for position in range(size * size):
        if position in free:
            squares.append(SquareState(kind=SquareKind.FREE_SPACE, content="FREE SPACE"))
        else:
            squares.append(SquareState(completed=position in completed, content=f"Task {position}"))
    return Board(size=size, squares=squares)


class LineLayoutTest(SimpleTestCase):
    def test_three_by_three_lines(self):
        lines = dict(iter_lines(3))
        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[BingoKey(ROW, 1)], (3, 4, 5))
        self.assertEqual(lines[BingoKey(COLUMN, 2)], (2, 5, 8))
        self.assertEqual(lines[BingoKey(DIAGONAL, 0)], (0, 4, 8))
        self.assertEqual(lines[BingoKey(DIAGONAL, 1)], (2, 4, 6))

    def test_reporting_order(self):
        keys = [key for key, _ in iter_lines(2)]
        self.assertEqual(keys, [
            (ROW, 0), (ROW, 1), (COLUMN, 0), (COLUMN, 1), (DIAGONAL, 0), (DIAGONAL, 1),
        ])


class FindBingosTest(SimpleTestCase):
    def test_all_satisfied_reports_every_line(self):
        for size in (1, 2, 3, 4, 5):
            board = make_board(size, completed=range(size * size))
            bingos = find_bingos(board)
            self.assertEqual(len(set(bingos)), 2 * size + 2)

    def test_nothing_satisfied_reports_nothing(self):
        self.assertEqual(find_bingos(make_board(3)), [])
        self.assertEqual(find_bingos(make_board(5)), [])

    def test_top_row(self):
        board = make_board(3, completed={0, 1, 2})
        self.assertEqual(find_bingos(board), [BingoKey(ROW, 0)])

    def test_main_diagonal(self):
        board = make_board(3, completed={0, 4, 8})
        self.assertEqual(find_bingos(board), [BingoKey(DIAGONAL, 0)])

    def test_anti_diagonal_through_free_space(self):
        board = make_board(3, completed={2, 6}, free={4})
        self.assertEqual(find_bingos(board), [BingoKey(DIAGONAL, 1)])

    def test_free_space_satisfied_regardless_of_flag(self):
        squares = list(make_board(3, completed={3, 5}).squares)
        squares[4] = SquareState(kind=SquareKind.FREE_SPACE, completed=False)
        self.assertEqual(find_bingos(Board(size=3, squares=squares)), [BingoKey(ROW, 1)])

        squares[4] = SquareState(kind=SquareKind.FREE_SPACE, completed=True)
        self.assertEqual(find_bingos(Board(size=3, squares=squares)), [BingoKey(ROW, 1)])

    def test_free_space_alone_wins_nothing(self):
        self.assertEqual(find_bingos(make_board(3, free={4})), [])

    def test_multiple_free_spaces_accepted(self):
        board = make_board(3, completed={1}, free={0, 2})
        self.assertEqual(find_bingos(board), [BingoKey(ROW, 0)])

    def test_single_square_board(self):
        self.assertEqual(find_bingos(make_board(1)), [])
        self.assertEqual(find_bingos(make_board(1, completed={0})), [
            BingoKey(ROW, 0), BingoKey(COLUMN, 0), BingoKey(DIAGONAL, 0), BingoKey(DIAGONAL, 1),
        ])

    def test_full_board_order(self):
        bingos = find_bingos(make_board(3, completed=range(9)))
        self.assertEqual(bingos, [
            (ROW, 0), (ROW, 1), (ROW, 2),
            (COLUMN, 0), (COLUMN, 1), (COLUMN, 2),
            (DIAGONAL, 0), (DIAGONAL, 1),
        ])

    def test_wrong_square_count_raises(self):
        board = Board(size=3, squares=[SquareState(completed=True)] * 8)
        with self.assertRaises(InvalidBoardError):
            find_bingos(board)
        # Still a ValueError for callers that only know the builtin
        with self.assertRaises(ValueError):
            evaluate(board)

    def test_non_positive_size_raises(self):
        with self.assertRaises(InvalidBoardError):
            find_bingos(Board(size=0, squares=[]))


class EvaluateTest(SimpleTestCase):
    def test_new_excludes_previous(self):
        board = make_board(3, completed={0, 1, 2, 3, 6})
        result = evaluate(board, previous={BingoKey(ROW, 0)})
        self.assertEqual(result.current, (BingoKey(ROW, 0), BingoKey(COLUMN, 0)))
        self.assertEqual(result.new, (BingoKey(COLUMN, 0),))
        self.assertTrue(result.has_new)

    def test_idempotent(self):
        board = make_board(4, completed={0, 5, 10, 15, 1, 2, 3})
        first = evaluate(board)
        second = evaluate(board, previous=first.current)
        self.assertEqual(first.current, second.current)
        self.assertEqual(second.new, ())
        self.assertFalse(second.has_new)

    def test_previous_accepts_plain_tuples(self):
        board = make_board(3, completed={0, 1, 2})
        result = evaluate(board, previous=[("ROW", 0)])
        self.assertEqual(result.new, ())

    def test_uncompleting_drops_line_but_not_history(self):
        won = make_board(3, completed={0, 1, 2})
        known = set(evaluate(won).current)

        broken = make_board(3, completed={0, 1})
        result = evaluate(broken, previous=known)
        self.assertEqual(result.current, ())
        self.assertEqual(result.new, ())

        # Re-completing a line already recorded is not new
        result = evaluate(won, previous=known)
        self.assertEqual(result.current, (BingoKey(ROW, 0),))
        self.assertEqual(result.new, ())

    def test_stale_previous_is_ignored(self):
        board = make_board(3, completed={0, 4, 8})
        result = evaluate(board, previous={BingoKey(ROW, 2)})
        self.assertEqual(result.current, (BingoKey(DIAGONAL, 0),))
        self.assertEqual(result.new, (BingoKey(DIAGONAL, 0),))
