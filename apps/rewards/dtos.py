from ninja import Schema
from uuid import UUID
from datetime import datetime
from typing import Optional


class RewardOut(Schema):
    id: UUID
    user_id: UUID
    name: str
    description: str
    points: int
    rarity: str
    is_redeemed: bool
    redeemed_at: Optional[datetime] = None


class RewardIn(Schema):
    user_id: UUID
    name: str
    description: str = ""
    points: int = 1


class RedeemIn(Schema):
    user_id: UUID


class DrawOut(Schema):
    reward: Optional[RewardOut] = None


class PointsSummaryOut(Schema):
    earned: int
    spent: int
    available: int
