"""API Router for Bingo app."""
import logging
from typing import List, Optional
from uuid import UUID
from ninja import Router
from ninja.errors import HttpError
from django.http import HttpRequest
from django.utils import timezone

from apps.rewards.services import draw_reward
from . import services
from .dtos import (
    BoardIn, BoardOut, BoardSummaryOut, CarryoverOut, CompleteIn,
    CompletionOut, SquareUpdateIn, bingo_keys_out,
)

logger = logging.getLogger(__name__)

router = Router(tags=["Bingo"])


def _completion_response(result: services.CompletionResult, message: str) -> dict:
    reward = draw_reward(result.board.user_id) if result.has_new_bingos else None
    return {
        "message": message,
        "square": result.square,
        "bingos": result.bingos,
        "current_bingos": bingo_keys_out(result.current_bingos),
        "reward": reward,
    }


# =============================================================================
# Square Completion
# =============================================================================

@router.post("/complete", response=CompletionOut, auth=None)
def complete_square(request: HttpRequest, payload: CompleteIn):
    """
    Mark a square completed and return the bingos it created.

    `bingos` holds only lines recorded for the first time by this request,
    in row, column, diagonal order. A reward is drawn when there are any.
    """
    try:
        result = services.complete_square(payload.square_id, payload.board_id)
        return _completion_response(result, "Square completed successfully")
    except services.BingoError as e:
        raise HttpError(404, str(e))
    except Exception:
        logger.exception(f"Complete square error (square={payload.square_id}, board={payload.board_id})")
        raise HttpError(500, "Failed to complete square")


@router.put("/squares/{square_id}", response=CompletionOut, auth=None)
def update_square(request: HttpRequest, square_id: str, payload: SquareUpdateIn):
    """Set a square completed or not completed."""
    try:
        result = services.set_square_completed(square_id, payload.board_id, payload.completed)
    except services.BingoError as e:
        raise HttpError(404, str(e))
    message = "Square completed successfully" if payload.completed else "Square reopened"
    return _completion_response(result, message)


# =============================================================================
# Boards
# =============================================================================

@router.post("/boards", response=BoardOut, auth=None)
def create_board(request: HttpRequest, payload: BoardIn):
    """Generate this month's board from tolerations and tasks."""
    try:
        return services.create_board(
            user_id=payload.user_id,
            size=payload.size,
            tolerations=payload.tolerations,
            tasks=payload.tasks,
            month=payload.month,
            year=payload.year,
        )
    except services.UserNotFoundError as e:
        raise HttpError(404, str(e))
    except ValueError as e:
        raise HttpError(400, str(e))


@router.get("/boards", response=List[BoardSummaryOut], auth=None)
def list_boards(
    request: HttpRequest,
    user_id: UUID,
    month: Optional[int] = None,
    year: Optional[int] = None,
    active_only: bool = False,
):
    return services.list_boards(user_id, month=month, year=year, active_only=active_only)


@router.get("/boards/current", response=BoardOut, auth=None)
def get_current_board(request: HttpRequest, user_id: UUID):
    """The user's active board for this month."""
    try:
        return services.get_current_board(user_id)
    except services.BoardNotFoundError as e:
        raise HttpError(404, str(e))


@router.get("/boards/{board_id}", response=BoardOut, auth=None)
def get_board(request: HttpRequest, board_id: str):
    try:
        return services.get_board(board_id)
    except services.BoardNotFoundError as e:
        raise HttpError(404, str(e))


@router.get("/carryover", response=CarryoverOut, auth=None)
def get_carryover(request: HttpRequest, user_id: UUID):
    """Unfinished squares from last month, to pre-fill a new board."""
    today = timezone.localdate()
    month, year = services.previous_month(today)
    return {
        "month": month,
        "year": year,
        "tasks": services.get_carryover_tasks(user_id, today),
    }
