from ninja import Schema
from ninja.orm import create_schema
from uuid import UUID
from datetime import datetime
from typing import List, Optional

from apps.rewards.dtos import RewardOut
from .evaluator import find_bingos
from .models import Board, Square, Bingo

SquareOut = create_schema(
    Square,
    fields=['id', 'position', 'content', 'kind', 'is_completed', 'completed_at']
)

BingoOut = create_schema(
    Bingo,
    fields=['id', 'line_type', 'line_index', 'achieved_at']
)


class BingoKeyOut(Schema):
    line_type: str
    line_index: int


def bingo_keys_out(keys) -> List[dict]:
    return [{"line_type": key.line_type, "line_index": key.line_index} for key in keys]


class BoardSummaryOut(Schema):
    id: UUID
    user_id: UUID
    size: int
    month: int
    year: int
    label: str
    is_active: bool
    created_at: datetime


class BoardOut(BoardSummaryOut):
    squares: List[SquareOut]
    bingos: List[BingoOut]
    current_bingos: List[BingoKeyOut]

    @staticmethod
    def resolve_squares(obj: Board):
        return list(obj.squares.order_by('position'))

    @staticmethod
    def resolve_bingos(obj: Board):
        return list(obj.bingos.all())

    @staticmethod
    def resolve_current_bingos(obj: Board):
        return bingo_keys_out(find_bingos(obj.to_state()))


# Identifiers are plain strings so a malformed value is reported as not found
class CompleteIn(Schema):
    square_id: Optional[str] = None
    board_id: Optional[str] = None


class SquareUpdateIn(Schema):
    board_id: Optional[str] = None
    completed: bool = True


class BoardIn(Schema):
    user_id: UUID
    size: int = 3
    tolerations: List[str] = []
    tasks: List[str] = []
    month: Optional[int] = None
    year: Optional[int] = None


class CompletionOut(Schema):
    message: str
    square: SquareOut
    bingos: List[BingoOut]
    current_bingos: List[BingoKeyOut]
    reward: Optional[RewardOut] = None


class CarryoverOut(Schema):
    month: int
    year: int
    tasks: List[str]
