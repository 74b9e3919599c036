"""
Services for Bingo app.

The persisted completion flow: update a square, re-evaluate the whole
board, and record every newly won line exactly once. Recording is an
idempotent upsert on (board, line_type, line_index) backed by a unique
constraint, so racing requests for the same board cannot duplicate a bingo.
"""
import logging
import random
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from apps.activity.services import log_action, ActivityAction
from apps.identity.services import user_exists
from .choices import SquareKind
from .evaluator import BingoKey, evaluate, find_bingos
from .generator import generate_squares
from .models import Board, Square, Bingo

logger = logging.getLogger(__name__)


class BingoError(Exception):
    """Base class for bingo service errors."""


class BoardNotFoundError(BingoError):
    pass


class SquareNotFoundError(BingoError):
    pass


class UserNotFoundError(BingoError):
    pass


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of setting a square's completed flag."""
    square: Square
    board: Board
    bingos: List[Bingo]                 # newly recorded, in evaluation order
    current_bingos: Tuple[BingoKey, ...]

    @property
    def has_new_bingos(self) -> bool:
        return bool(self.bingos)


# =============================================================================
# Lookups
# =============================================================================

def _parse_id(value, error_cls, label: str) -> UUID:
    """Missing or malformed identifiers are reported as not found."""
    if not value:
        raise error_cls(f"{label} ID is required")
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise error_cls(f"{label} not found")


def get_board(board_id) -> Board:
    pk = _parse_id(board_id, BoardNotFoundError, "Board")
    try:
        return Board.objects.get(id=pk)
    except Board.DoesNotExist:
        raise BoardNotFoundError("Board not found")


def list_boards(
    user_id: UUID,
    month: Optional[int] = None,
    year: Optional[int] = None,
    active_only: bool = False,
) -> List[Board]:
    queryset = Board.objects.filter(user_id=user_id)
    if month:
        queryset = queryset.filter(month=month)
    if year:
        queryset = queryset.filter(year=year)
    if active_only:
        queryset = queryset.filter(is_active=True)
    return list(queryset)


def get_recorded_bingo_keys(board: Board) -> set:
    return {
        BingoKey(line_type, line_index)
        for line_type, line_index in board.bingos.values_list('line_type', 'line_index')
    }


def get_current_bingos(board: Board) -> List[BingoKey]:
    """Lines won right now, regardless of what has been recorded."""
    return find_bingos(board.to_state())


# =============================================================================
# Completion
# =============================================================================

def record_bingos(board: Board, keys: Iterable[BingoKey]) -> List[Bingo]:
    """
    Persist each key at most once per board.

    Returns only the rows this call created. A key some other request has
    already stored is skipped, so it is never reported as new twice.
    """
    created = []
    for key in keys:
        bingo, was_created = Bingo.objects.get_or_create(
            board=board,
            line_type=key.line_type,
            line_index=key.line_index,
        )
        if was_created:
            created.append(bingo)
        else:
            logger.info(f"Bingo {key.line_type} {key.line_index} already recorded on board {board.id}")
    return created


def set_square_completed(square_id, board_id, completed: bool) -> CompletionResult:
    """
    Set a square's completed flag and record any bingos it creates.

    Raises BoardNotFoundError / SquareNotFoundError for unknown, missing or
    malformed identifiers, or when the square is not on the board.
    """
    board = get_board(board_id)
    square_pk = _parse_id(square_id, SquareNotFoundError, "Square")

    with transaction.atomic():
        # Board lock serializes completions on one board so each evaluation
        # sees every square committed before it
        board = Board.objects.select_for_update().filter(id=board.id).first()
        if not board:
            raise BoardNotFoundError("Board not found")
        try:
            square = Square.objects.select_for_update().get(id=square_pk, board=board)
        except Square.DoesNotExist:
            raise SquareNotFoundError("Square not found")

        changed = square.is_completed != completed
        if changed:
            square.is_completed = completed
            square.completed_at = timezone.now() if completed else None
            square.save(update_fields=['is_completed', 'completed_at'])

        evaluation = evaluate(board.to_state(), get_recorded_bingo_keys(board))
        created = record_bingos(board, evaluation.new)

    if changed:
        logger.info(
            f"Square {square.position} on board {board.id} "
            f"{'completed' if completed else 'reopened'}"
        )
        log_action(
            user_id=board.user_id,
            action=ActivityAction.SQUARE_COMPLETED if completed else ActivityAction.SQUARE_REOPENED,
            target_type="Square",
            target_id=square.id,
            target_label=square.content,
            context={"board_id": str(board.id), "position": square.position},
        )

    for bingo in created:
        logger.info(f"New bingo on board {board.id}: {bingo.line_type} {bingo.line_index}")
        log_action(
            user_id=board.user_id,
            action=ActivityAction.BINGO_ACHIEVED,
            target_type="Board",
            target_id=board.id,
            target_label=board.label,
            context={"line_type": bingo.line_type, "line_index": bingo.line_index},
        )

    return CompletionResult(
        square=square,
        board=board,
        bingos=created,
        current_bingos=evaluation.current,
    )


def complete_square(square_id, board_id) -> CompletionResult:
    return set_square_completed(square_id, board_id, completed=True)


# =============================================================================
# Board Lifecycle
# =============================================================================

def create_board(
    user_id: UUID,
    size: int,
    tolerations: List[str],
    tasks: List[str],
    month: Optional[int] = None,
    year: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Generate and store a board for the given month (defaults to this month).

    Any other active board the user has for that month is deactivated.
    Raises ValueError for invalid sizes or too few items.
    """
    if not user_exists(user_id):
        raise UserNotFoundError("User not found")

    today = timezone.localdate()
    if month is None:
        month = today.month
    if year is None:
        year = today.year
    if not 1 <= month <= 12:
        raise ValueError("Month must be between 1 and 12")

    squares = generate_squares(size, tolerations, tasks, rng=rng)

    with transaction.atomic():
        Board.objects.filter(
            user_id=user_id, month=month, year=year, is_active=True
        ).update(is_active=False)

        board = Board.objects.create(user_id=user_id, size=size, month=month, year=year)
        Square.objects.bulk_create([
            Square(
                board=board,
                position=position,
                content=state.content,
                kind=state.kind,
                is_completed=state.completed,
            )
            for position, state in enumerate(squares)
        ])

    logger.info(f"Created board {board.id} for user {user_id} ({board.label})")
    log_action(
        user_id=user_id,
        action=ActivityAction.BOARD_CREATED,
        target_type="Board",
        target_id=board.id,
        target_label=board.label,
        context={"size": size, "tolerations": len(tolerations), "tasks": len(tasks)},
    )
    return board


def previous_month(today: date) -> Tuple[int, int]:
    """(month, year) of the month before `today`."""
    if today.month == 1:
        return 12, today.year - 1
    return today.month - 1, today.year


def get_current_board(user_id: UUID, today: Optional[date] = None) -> Board:
    today = today or timezone.localdate()
    board = Board.objects.filter(
        user_id=user_id, month=today.month, year=today.year, is_active=True
    ).first()
    if not board:
        raise BoardNotFoundError("No board for this month")
    return board


def get_carryover_tasks(user_id: UUID, today: Optional[date] = None) -> List[str]:
    """
    Contents of last month's unfinished squares, to pre-fill a new board.
    Free spaces are never carried over.
    """
    today = today or timezone.localdate()
    month, year = previous_month(today)
    board = Board.objects.filter(user_id=user_id, month=month, year=year).first()
    if not board:
        return []

    return list(
        board.squares
        .filter(is_completed=False)
        .exclude(kind=SquareKind.FREE_SPACE)
        .order_by('position')
        .values_list('content', flat=True)
    )


def deactivate_stale_boards(today: Optional[date] = None) -> int:
    """
    Mark active boards from before the current month inactive.
    Run on the 1st of each month. Returns the number of boards updated.
    """
    today = today or timezone.localdate()
    count = Board.objects.filter(is_active=True).filter(
        Q(year__lt=today.year) | Q(year=today.year, month__lt=today.month)
    ).update(is_active=False)
    logger.info(f"Deactivated {count} boards from before {today.year}-{today.month:02d}")
    return count


def count_bingos_for_user(user_id: UUID) -> int:
    return Bingo.objects.filter(board__user_id=user_id).count()
