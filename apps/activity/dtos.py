from ninja import Schema
from uuid import UUID
from datetime import datetime
from typing import Optional, Any


class ActivityLogOut(Schema):
    id: UUID
    user_id: Optional[UUID] = None
    action: str
    target_type: str
    target_id: UUID
    target_label: str
    performed_at: datetime
    context: Any
