"""
Services for Rewards app.

Points are earned per recorded bingo and spent by redeeming rewards.
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from apps.activity.services import log_action, ActivityAction
from apps.bingo.services import count_bingos_for_user
from .models import Reward

logger = logging.getLogger(__name__)


class RewardError(Exception):
    """Base class for reward service errors."""


class RewardNotFoundError(RewardError):
    pass


class RewardAlreadyRedeemedError(RewardError):
    pass


class InsufficientPointsError(RewardError):
    pass


@dataclass(frozen=True)
class PointsSummaryDTO:
    earned: int
    spent: int

    @property
    def available(self) -> int:
        return self.earned - self.spent


def points_per_bingo() -> int:
    return getattr(settings, 'BINGO_POINTS_PER_BINGO', 1)


def get_points_summary(user_id: UUID) -> PointsSummaryDTO:
    earned = count_bingos_for_user(user_id) * points_per_bingo()
    spent = Reward.objects.filter(
        user_id=user_id, is_redeemed=True
    ).aggregate(total=Sum('points'))['total'] or 0
    return PointsSummaryDTO(earned=earned, spent=spent)


def list_rewards(user_id: UUID, include_redeemed: bool = True) -> List[Reward]:
    queryset = Reward.objects.filter(user_id=user_id)
    if not include_redeemed:
        queryset = queryset.filter(is_redeemed=False)
    return list(queryset)


def get_reward(reward_id: UUID, user_id: Optional[UUID] = None) -> Reward:
    queryset = Reward.objects.filter(id=reward_id)
    if user_id:
        queryset = queryset.filter(user_id=user_id)
    reward = queryset.first()
    if not reward:
        raise RewardNotFoundError("Reward not found")
    return reward


def create_reward(user_id: UUID, name: str, description: str = "", points: int = 1) -> Reward:
    name = name.strip()
    if not name:
        raise ValueError("Reward name is required")
    if points < 1:
        raise ValueError("Points must be at least 1")

    reward = Reward.objects.create(
        user_id=user_id,
        name=name,
        description=description.strip(),
        points=points,
    )
    log_action(
        user_id=user_id,
        action=ActivityAction.REWARD_CREATED,
        target_type="Reward",
        target_id=reward.id,
        target_label=reward.name,
        context={"points": points},
    )
    return reward


def redeem_reward(reward_id: UUID, user_id: UUID) -> Reward:
    """
    Spend points on a reward.

    Raises RewardNotFoundError, RewardAlreadyRedeemedError or
    InsufficientPointsError.
    """
    with transaction.atomic():
        try:
            reward = Reward.objects.select_for_update().get(id=reward_id, user_id=user_id)
        except Reward.DoesNotExist:
            raise RewardNotFoundError("Reward not found")

        if reward.is_redeemed:
            raise RewardAlreadyRedeemedError("Reward has already been redeemed")

        summary = get_points_summary(user_id)
        if summary.available < reward.points:
            raise InsufficientPointsError(
                f"Need {reward.points - summary.available} more points to redeem {reward.name}"
            )

        reward.is_redeemed = True
        reward.redeemed_at = timezone.now()
        reward.save(update_fields=['is_redeemed', 'redeemed_at', 'updated_at'])

    logger.info(f"User {user_id} redeemed reward {reward.id} for {reward.points} points")
    log_action(
        user_id=user_id,
        action=ActivityAction.REWARD_REDEEMED,
        target_type="Reward",
        target_id=reward.id,
        target_label=reward.name,
        context={"points": reward.points},
    )
    return reward


def draw_reward(user_id: UUID, rng: Optional[random.Random] = None) -> Optional[Reward]:
    """
    Pick one unredeemed reward uniformly at random (the treasure chest
    opened after a new bingo). Returns None when there is nothing to draw.
    """
    candidates = list_rewards(user_id, include_redeemed=False)
    if not candidates:
        return None
    rng = rng or random.Random()
    return rng.choice(candidates)
