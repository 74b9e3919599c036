"""
Services for Identity app.
This is the public API for other apps to look up users and accounts.
"""
from typing import Optional
from uuid import UUID
from django.core.exceptions import ValidationError
from django.db import transaction

from .models import Account, User
from .dtos import AccountDTO, UserDTO


def get_user_dto(user_id) -> UserDTO | None:
    try:
        user = User.objects.get(id=user_id)
        return UserDTO(
            id=user.id,
            username=user.username,
            email=user.email,
            display_name=str(user),
            account_id=user.account_id,
            is_active=user.is_active,
        )
    except (User.DoesNotExist, ValidationError, ValueError):
        return None


def user_exists(user_id: UUID) -> bool:
    return User.objects.filter(id=user_id, is_active=True).exists()


def get_account_dto(account_id) -> AccountDTO | None:
    try:
        account = Account.objects.get(id=account_id)
        return AccountDTO(id=account.id, name=account.name, email=account.email)
    except (Account.DoesNotExist, ValidationError, ValueError):
        return None


def create_user(
    account_id: Optional[UUID],
    username: str,
    email: str = "",
    display_name: str = "",
    password: Optional[str] = None,
) -> UserDTO:
    # Password hashing is delegated to Django's configured hashers
    user = User.objects.create_user(
        username=username,
        email=email,
        password=password,
        display_name=display_name,
        account_id=account_id,
        is_active=True,
    )
    return get_user_dto(user.id)


def create_account_with_user(
    email: str,
    display_name: str,
    account_name: str = "",
    password: Optional[str] = None,
) -> tuple[AccountDTO, UserDTO]:
    """Create an account and its first member in one transaction."""
    with transaction.atomic():
        account = Account.objects.create(email=email, name=account_name)
        user_dto = create_user(
            account_id=account.id,
            username=email,
            email=email,
            display_name=display_name,
            password=password,
        )
    return AccountDTO(id=account.id, name=account.name, email=account.email), user_dto
