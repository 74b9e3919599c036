"""
Board generation from a user's tolerations and tasks.

The free space goes in the middle of odd boards and at a random index on
even boards. Remaining squares are filled with tolerations first, then
tasks, cycling through the list when it is longer than needed.
"""
import random
from typing import List, Optional, Sequence

from .choices import SquareKind
from .evaluator import SquareState

BOARD_SIZES = (3, 4, 5)
FREE_SPACE_CONTENT = "FREE SPACE"


def required_items(size: int) -> int:
    """Tolerations + tasks needed to fill a board (all but the free space)."""
    return size * size - 1


def free_space_index(size: int, rng: Optional[random.Random] = None) -> int:
    total = size * size
    if size % 2 == 1:
        return total // 2
    rng = rng or random.Random()
    return rng.randrange(total)


def validate_board_request(size: int, tolerations: Sequence[str], tasks: Sequence[str]) -> None:
    if size not in BOARD_SIZES:
        raise ValueError(f"Board size must be one of {', '.join(str(s) for s in BOARD_SIZES)}")

    needed = required_items(size)
    have = len(tolerations) + len(tasks)
    if have < needed:
        raise ValueError(
            f"You need at least {needed} total items (tolerations + tasks). You have {have}."
        )


def generate_squares(
    size: int,
    tolerations: Sequence[str],
    tasks: Sequence[str],
    rng: Optional[random.Random] = None,
) -> List[SquareState]:
    """
    Lay out size * size squares in position order.

    Raises ValueError for unsupported sizes or too few items.
    """
    tolerations = [t.strip() for t in tolerations if t and t.strip()]
    tasks = [t.strip() for t in tasks if t and t.strip()]
    validate_board_request(size, tolerations, tasks)

    items = tolerations + tasks
    free_index = free_space_index(size, rng)
    squares = []

    for position in range(size * size):
        if position == free_index:
            squares.append(SquareState(kind=SquareKind.FREE_SPACE, content=FREE_SPACE_CONTENT))
            continue

        item_index = position - 1 if position > free_index else position
        item_index %= len(items)
        kind = SquareKind.TOLERATION if item_index < len(tolerations) else SquareKind.TASK
        squares.append(SquareState(kind=kind, content=items[item_index]))

    return squares
