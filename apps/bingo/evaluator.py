"""
Bingo evaluator - line detection over an N x N board.

Pure logic with no ORM access: the in-memory BingoSession and the
persisted completion service both call evaluate() with a plain Board.

Usage:
    from apps.bingo.evaluator import Board, SquareState, evaluate

    board = Board(size=3, squares=[SquareState(completed=True)] * 9)
    result = evaluate(board, previous={("ROW", 0)})
    result.current   # every won line, recomputed from scratch
    result.new       # won lines not in `previous`
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Sequence, Tuple

from .choices import ANTI_DIAGONAL, MAIN_DIAGONAL, LineType, SquareKind


class InvalidBoardError(ValueError):
    """Board does not hold exactly size * size squares."""


class BingoKey(NamedTuple):
    """Stable identity of a line: (line_type, line_index)."""
    line_type: str
    line_index: int


@dataclass(frozen=True)
class SquareState:
    kind: str = SquareKind.TASK
    completed: bool = False
    content: str = ""

    @property
    def is_satisfied(self) -> bool:
        # Free spaces count whatever their completed flag says
        return self.completed or self.kind == SquareKind.FREE_SPACE


@dataclass(frozen=True)
class Board:
    """
    Row-major grid snapshot: position i sits at row i // size, col i % size.
    """
    size: int
    squares: Tuple[SquareState, ...]

    def __post_init__(self):
        object.__setattr__(self, 'squares', tuple(self.squares))

    def validate(self) -> None:
        if self.size < 1:
            raise InvalidBoardError(f"Board size must be positive, got {self.size}")
        expected = self.size * self.size
        if len(self.squares) != expected:
            raise InvalidBoardError(
                f"Board of size {self.size} needs {expected} squares, got {len(self.squares)}"
            )


@dataclass(frozen=True)
class Evaluation:
    current: Tuple[BingoKey, ...]
    new: Tuple[BingoKey, ...]

    @property
    def has_new(self) -> bool:
        return bool(self.new)


def iter_lines(size: int) -> Iterator[Tuple[BingoKey, Tuple[int, ...]]]:
    """
    Yield (key, positions) for every line in reporting order:
    rows 0..N-1, columns 0..N-1, main diagonal, anti-diagonal.
    """
    for row in range(size):
        yield BingoKey(LineType.ROW.value, row), tuple(range(row * size, (row + 1) * size))
    for col in range(size):
        yield BingoKey(LineType.COLUMN.value, col), tuple(range(col, size * size, size))
    yield (
        BingoKey(LineType.DIAGONAL.value, MAIN_DIAGONAL),
        tuple(i * size + i for i in range(size)),
    )
    yield (
        BingoKey(LineType.DIAGONAL.value, ANTI_DIAGONAL),
        tuple(i * size + (size - 1 - i) for i in range(size)),
    )


def find_bingos(board: Board) -> List[BingoKey]:
    """Every won line on the board, in reporting order."""
    board.validate()
    squares = board.squares
    return [
        key
        for key, positions in iter_lines(board.size)
        if all(squares[p].is_satisfied for p in positions)
    ]


def normalize_keys(keys: Iterable[Sequence]) -> set:
    """Accept BingoKeys, plain tuples or TextChoices members."""
    return {BingoKey(str(line_type), int(line_index)) for line_type, line_index in keys}


def evaluate(board: Board, previous: Iterable[Sequence] = ()) -> Evaluation:
    """
    Compute the current bingos and the subset not already in `previous`.

    Raises InvalidBoardError before touching the squares if the board is
    malformed.
    """
    current = find_bingos(board)
    known = normalize_keys(previous)
    new = [key for key in current if key not in known]
    return Evaluation(current=tuple(current), new=tuple(new))
