"""
Centralized activity logging service.

Use log_action() to record any user-visible mutation. It is designed to be
fire-and-forget: it will never raise, so a logging failure will never
break the calling request.

Usage:
    from apps.activity.services import log_action, ActivityAction

    log_action(
        user_id=board.user_id,
        action=ActivityAction.BINGO_ACHIEVED,
        target_type="Board",
        target_id=board.id,
        target_label=board.label,
        context={"line_type": "ROW", "line_index": 0},
    )
"""
import logging
from uuid import UUID
from typing import List, Optional

from django.db import transaction

from .models import ActivityLog

logger = logging.getLogger(__name__)


class ActivityAction:
    """
    Canonical string constants for activity log actions.
    Prevents scattered string literals and typos across apps.
    """
    # ── Bingo ─────────────────────────────────────────────────────────
    BOARD_CREATED = "BOARD_CREATED"
    SQUARE_COMPLETED = "SQUARE_COMPLETED"
    SQUARE_REOPENED = "SQUARE_REOPENED"
    BINGO_ACHIEVED = "BINGO_ACHIEVED"

    # ── Rewards ───────────────────────────────────────────────────────
    REWARD_CREATED = "REWARD_CREATED"
    REWARD_REDEEMED = "REWARD_REDEEMED"


def log_action(
    *,
    user_id: Optional[UUID],
    action: str,
    target_type: str,
    target_id: UUID,
    target_label: str = "",
    context: Optional[dict] = None,
) -> Optional[ActivityLog]:
    """
    Create an ActivityLog entry.

    Never raises. Any DB or serialization error is logged and swallowed so
    activity logging never degrades the user-facing request.

    Args:
        user_id:       Owner of the board or reward, if known.
        action:        Action constant from ActivityAction.
        target_type:   Human-readable type of the object acted on (e.g. "Square").
        target_id:     Primary key of the object acted on.
        target_label:  Optional human-readable description of the object.
        context:       Optional dict of additional metadata to store as JSON.

    Returns:
        The created ActivityLog instance, or None if creation failed.
    """
    try:
        # Own savepoint so a failed insert never poisons the caller's transaction
        with transaction.atomic():
            return ActivityLog.objects.create(
                user_id=user_id,
                action=action,
                target_type=target_type,
                target_id=target_id,
                target_label=target_label[:255],
                context=context or {},
            )
    except Exception:
        # Safety net: never let activity logging break a request
        logger.warning(f"Failed to record {action} for {target_type} {target_id}", exc_info=True)
        return None


def list_activity(
    user_id: UUID,
    action: Optional[str] = None,
    target_type: Optional[str] = None,
    limit: int = 100,
) -> List[ActivityLog]:
    queryset = ActivityLog.objects.filter(user_id=user_id)
    if action:
        queryset = queryset.filter(action=action)
    if target_type:
        queryset = queryset.filter(target_type=target_type)
    return list(queryset[:limit])
