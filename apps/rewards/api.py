"""
Rewards API endpoints.

Users create rewards, earn points from bingos and redeem them.
"""
from typing import List
from uuid import UUID
from ninja import Router
from ninja.errors import HttpError
from django.http import HttpRequest

from .dtos import RewardOut, RewardIn, RedeemIn, DrawOut, PointsSummaryOut
from . import services

router = Router(tags=["Rewards"])


@router.get("", response=List[RewardOut], auth=None)
def list_rewards_api(request: HttpRequest, user_id: UUID, include_redeemed: bool = True):
    """List a user's rewards, cheapest first."""
    return services.list_rewards(user_id, include_redeemed=include_redeemed)


@router.post("", response=RewardOut, auth=None)
def create_reward_api(request: HttpRequest, payload: RewardIn):
    try:
        return services.create_reward(
            user_id=payload.user_id,
            name=payload.name,
            description=payload.description,
            points=payload.points,
        )
    except ValueError as e:
        raise HttpError(400, str(e))


@router.get("/points", response=PointsSummaryOut, auth=None)
def get_points_api(request: HttpRequest, user_id: UUID):
    """Points earned from bingos, spent on rewards, and still available."""
    summary = services.get_points_summary(user_id)
    return PointsSummaryOut(earned=summary.earned, spent=summary.spent, available=summary.available)


@router.post("/draw", response=DrawOut, auth=None)
def draw_reward_api(request: HttpRequest, payload: RedeemIn):
    """Open the treasure chest: a random unredeemed reward, or null."""
    return {"reward": services.draw_reward(payload.user_id)}


@router.post("/{reward_id}/redeem", response=RewardOut, auth=None)
def redeem_reward_api(request: HttpRequest, reward_id: UUID, payload: RedeemIn):
    try:
        return services.redeem_reward(reward_id, payload.user_id)
    except services.RewardNotFoundError as e:
        raise HttpError(404, str(e))
    except (services.RewardAlreadyRedeemedError, services.InsufficientPointsError) as e:
        raise HttpError(400, str(e))
