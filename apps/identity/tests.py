from uuid import uuid4
from django.test import TestCase
from django.db import IntegrityError
from .models import Account, User
from .services import create_account_with_user, create_user, get_user_dto, get_account_dto, user_exists


class IdentityServicesTest(TestCase):
    def test_create_account_with_user(self):
        account, user = create_account_with_user(
            email="demo@productivitybingo.com",
            display_name="Sir Knight",
            account_name="The Smith Family",
            password="password123",
        )
        self.assertEqual(account.name, "The Smith Family")
        self.assertEqual(user.account_id, account.id)
        self.assertEqual(user.display_name, "Sir Knight")

        stored = User.objects.get(id=user.id)
        self.assertTrue(stored.check_password("password123"))
        self.assertNotEqual(stored.password, "password123")

    def test_account_email_unique(self):
        create_account_with_user(email="a@castle.com", display_name="A")
        with self.assertRaises(IntegrityError):
            Account.objects.create(email="a@castle.com")

    def test_second_member_joins_account(self):
        account, _ = create_account_with_user(email="family@castle.com", display_name="Sir Knight")
        member = create_user(account.id, username="warrior", email="warrior@castle.com", display_name="Lady Warrior")
        self.assertEqual(member.account_id, account.id)
        self.assertEqual(User.objects.filter(account_id=account.id).count(), 2)

    def test_lookups_return_none_for_unknown_ids(self):
        self.assertIsNone(get_user_dto(uuid4()))
        self.assertIsNone(get_account_dto(uuid4()))
        self.assertFalse(user_exists(uuid4()))

    def test_str_prefers_display_name(self):
        user = User.objects.create_user(username="knight", email="knight@castle.com")
        self.assertEqual(str(user), "knight@castle.com")
        user.display_name = "Sir Knight"
        self.assertEqual(str(user), "Sir Knight")
