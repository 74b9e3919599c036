"""
In-memory bingo tracking for an interactive client session.

Nothing here is persisted. The set of known bingos is rebuilt once when
the session is opened and then grows with every toggle, so a line that
is broken and re-completed does not celebrate twice.
"""
import logging
from dataclasses import replace
from typing import FrozenSet, Iterable, List, Optional, Sequence

from .evaluator import Board, BingoKey, Evaluation, SquareState, evaluate, normalize_keys

logger = logging.getLogger(__name__)


class BingoSession:
    """
    Holds one board's squares plus the bingos already seen this session.

    Pass `known` to seed the seen-set explicitly (e.g. from stored
    records); otherwise every line already won at load time counts as seen.
    """

    def __init__(
        self,
        size: int,
        squares: Sequence[SquareState],
        known: Optional[Iterable[Sequence]] = None,
    ):
        self._size = size
        self._squares: List[SquareState] = list(squares)
        if known is None:
            self._known = set(evaluate(self.board).current)
        else:
            self.board.validate()
            self._known = normalize_keys(known)

    @property
    def board(self) -> Board:
        return Board(size=self._size, squares=self._squares)

    @property
    def known_bingos(self) -> FrozenSet[BingoKey]:
        return frozenset(self._known)

    def set_completed(self, position: int, completed: bool) -> Evaluation:
        """Set a square's flag and report the lines won for the first time."""
        if not 0 <= position < len(self._squares):
            raise IndexError(f"No square at position {position}")

        self._squares[position] = replace(self._squares[position], completed=completed)
        evaluation = evaluate(self.board, self._known)
        self._known.update(evaluation.new)

        if evaluation.new:
            logger.debug(f"Session bingos at position {position}: {list(evaluation.new)}")
        return evaluation

    def toggle(self, position: int) -> Evaluation:
        if not 0 <= position < len(self._squares):
            raise IndexError(f"No square at position {position}")
        return self.set_completed(position, not self._squares[position].completed)
