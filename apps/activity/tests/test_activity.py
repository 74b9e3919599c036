"""
Tests for the activity trail.

Covers:
1. log_action() - creates an ActivityLog, never raises
2. GET /activity - list endpoint with filters
"""
from uuid import uuid4

from django.db import transaction
from django.test import TestCase, Client

from apps.activity.models import ActivityLog
from apps.activity.services import log_action, ActivityAction


class LogActionTest(TestCase):
    def setUp(self):
        self.user_id = uuid4()
        self.target_id = uuid4()

    def test_log_action_creates_entry(self):
        log = log_action(
            user_id=self.user_id,
            action=ActivityAction.BINGO_ACHIEVED,
            target_type="Board",
            target_id=self.target_id,
            target_label="2026-05 (3x3)",
            context={"line_type": "ROW", "line_index": 0},
        )
        self.assertIsNotNone(log)
        self.assertEqual(log.user_id, self.user_id)
        self.assertEqual(log.action, ActivityAction.BINGO_ACHIEVED)
        self.assertEqual(log.context["line_type"], "ROW")

    def test_log_action_defaults_context(self):
        log = log_action(
            user_id=None,
            action=ActivityAction.BOARD_CREATED,
            target_type="Board",
            target_id=self.target_id,
        )
        self.assertEqual(log.context, {})
        self.assertIsNone(log.user_id)

    def test_log_action_never_raises(self):
        result = log_action(
            user_id=self.user_id,
            action=ActivityAction.SQUARE_COMPLETED,
            target_type="Square",
            target_id=self.target_id,
            context={"not_json": object()},
        )
        self.assertIsNone(result)
        self.assertEqual(ActivityLog.objects.count(), 0)

    def test_failed_log_leaves_outer_transaction_usable(self):
        with transaction.atomic():
            log_action(
                user_id=self.user_id,
                action=ActivityAction.SQUARE_COMPLETED,
                target_type="Square",
                target_id=self.target_id,
                context={"not_json": object()},
            )
            log = log_action(
                user_id=self.user_id,
                action=ActivityAction.SQUARE_REOPENED,
                target_type="Square",
                target_id=self.target_id,
            )
        self.assertIsNotNone(log)
        self.assertEqual(list(ActivityLog.objects.values_list("action", flat=True)), [ActivityAction.SQUARE_REOPENED])

    def test_long_label_truncated(self):
        log = log_action(
            user_id=self.user_id,
            action=ActivityAction.REWARD_CREATED,
            target_type="Reward",
            target_id=self.target_id,
            target_label="x" * 300,
        )
        self.assertEqual(len(log.target_label), 255)


class ActivityAPITest(TestCase):
    def setUp(self):
        self.client = Client()
        self.user_id = uuid4()
        for action, target_type in (
            (ActivityAction.BOARD_CREATED, "Board"),
            (ActivityAction.SQUARE_COMPLETED, "Square"),
            (ActivityAction.BINGO_ACHIEVED, "Board"),
        ):
            log_action(user_id=self.user_id, action=action, target_type=target_type, target_id=uuid4())
        log_action(user_id=uuid4(), action=ActivityAction.BOARD_CREATED, target_type="Board", target_id=uuid4())

    def test_list_for_user(self):
        response = self.client.get(f"/api/activity/?user_id={self.user_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 3)

    def test_filter_by_action(self):
        response = self.client.get(
            f"/api/activity/?user_id={self.user_id}&action={ActivityAction.BINGO_ACHIEVED}"
        )
        data = response.json()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["action"], ActivityAction.BINGO_ACHIEVED)

    def test_filter_by_target_type(self):
        response = self.client.get(f"/api/activity/?user_id={self.user_id}&target_type=Board")
        self.assertEqual(len(response.json()), 2)

    def test_limit(self):
        response = self.client.get(f"/api/activity/?user_id={self.user_id}&limit=1")
        self.assertEqual(len(response.json()), 1)
