"""DTOs for Identity app."""
from dataclasses import dataclass
from uuid import UUID
from typing import Optional


@dataclass(frozen=True)
class UserDTO:
    id: UUID
    username: str
    email: str
    display_name: str
    account_id: Optional[UUID]
    is_active: bool


@dataclass(frozen=True)
class AccountDTO:
    id: UUID
    name: str
    email: str
