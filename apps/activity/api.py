from typing import List, Optional
from uuid import UUID
from ninja import Router
from django.http import HttpRequest

from .dtos import ActivityLogOut
from .services import list_activity

router = Router(tags=["Activity"])


@router.get("", response=List[ActivityLogOut], auth=None)
def list_activity_api(
    request: HttpRequest,
    user_id: UUID,
    action: Optional[str] = None,
    target_type: Optional[str] = None,
    limit: int = 100,
):
    """
    List a user's activity, newest first.

    Query Parameters:
    - action: e.g. BINGO_ACHIEVED, REWARD_REDEEMED
    - target_type: e.g. Board, Square, Reward
    - limit: max rows returned (capped at 500)
    """
    return list_activity(user_id, action=action, target_type=target_type, limit=min(limit, 500))
