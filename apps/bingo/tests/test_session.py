from django.test import SimpleTestCase

from apps.bingo.choices import LineType, SquareKind
from apps.bingo.evaluator import BingoKey, InvalidBoardError, SquareState
from apps.bingo.session import BingoSession

TOP_ROW = BingoKey(LineType.ROW.value, 0)
LEFT_COLUMN = BingoKey(LineType.COLUMN.value, 0)
ANTI_DIAGONAL = BingoKey(LineType.DIAGONAL.value, 1)


def squares(size=3, completed=(), free=(4,)):
    return [
        SquareState(kind=SquareKind.FREE_SPACE) if p in free else SquareState(completed=p in completed)
        for p in range(size * size)
    ]


class BingoSessionTest(SimpleTestCase):
    def test_completing_a_line_reports_it_once(self):
        session = BingoSession(3, squares())
        session.set_completed(0, True)
        session.set_completed(1, True)
        result = session.set_completed(2, True)

        self.assertEqual(result.new, (TOP_ROW,))
        self.assertIn(TOP_ROW, session.known_bingos)

        # Re-asserting the same state reports nothing new
        self.assertEqual(session.set_completed(2, True).new, ())

    def test_lines_won_at_load_are_known(self):
        session = BingoSession(3, squares(completed={0, 1, 2}))
        self.assertEqual(session.known_bingos, frozenset({TOP_ROW}))

        result = session.set_completed(3, True)
        self.assertEqual(result.current, (TOP_ROW,))
        self.assertEqual(result.new, ())

    def test_recompleting_broken_line_does_not_celebrate_again(self):
        session = BingoSession(3, squares(completed={0, 1}))
        self.assertEqual(session.toggle(2).new, (TOP_ROW,))

        broken = session.toggle(2)
        self.assertEqual(broken.current, ())
        self.assertIn(TOP_ROW, session.known_bingos)

        self.assertEqual(session.toggle(2).new, ())

    def test_explicit_known_seed(self):
        session = BingoSession(3, squares(completed={0, 1, 2, 3}), known=[])
        result = session.set_completed(6, True)
        # Position 6 also closes the anti-diagonal through the free space
        self.assertEqual(result.new, (TOP_ROW, LEFT_COLUMN, ANTI_DIAGONAL))

    def test_board_snapshot_reflects_toggles(self):
        session = BingoSession(3, squares())
        session.toggle(8)
        self.assertTrue(session.board.squares[8].completed)
        session.toggle(8)
        self.assertFalse(session.board.squares[8].completed)

    def test_out_of_range_position(self):
        session = BingoSession(3, squares())
        with self.assertRaises(IndexError):
            session.set_completed(9, True)
        with self.assertRaises(IndexError):
            session.toggle(-1)

    def test_malformed_board_rejected(self):
        with self.assertRaises(InvalidBoardError):
            BingoSession(3, squares()[:8])
        with self.assertRaises(InvalidBoardError):
            BingoSession(3, squares()[:8], known=[])
