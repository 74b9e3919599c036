import json
from uuid import uuid4

from django.test import TestCase, Client

from apps.bingo.services import record_bingos
from apps.bingo.evaluator import BingoKey
from apps.bingo.tests.factories import make_board, make_user
from apps.rewards.models import Reward


class RewardsAPITest(TestCase):
    def setUp(self):
        self.client = Client()
        self.user = make_user()

    def post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def test_create_and_list(self):
        response = self.post("/api/rewards/", {"user_id": str(self.user.id), "name": "Buy a new book", "points": 5})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["rarity"], "EPIC")

        response = self.client.get(f"/api/rewards/?user_id={self.user.id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([r["name"] for r in response.json()], ["Buy a new book"])

    def test_create_invalid_returns_400(self):
        response = self.post("/api/rewards/", {"user_id": str(self.user.id), "name": "", "points": 1})
        self.assertEqual(response.status_code, 400)

    def test_points_summary(self):
        record_bingos(make_board(self.user.id), [BingoKey("ROW", 0), BingoKey("ROW", 1)])
        response = self.client.get(f"/api/rewards/points?user_id={self.user.id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"earned": 2, "spent": 0, "available": 2})

    def test_redeem(self):
        record_bingos(make_board(self.user.id), [BingoKey("ROW", 0)])
        reward = Reward.objects.create(user_id=self.user.id, name="Bath", points=1)

        response = self.post(f"/api/rewards/{reward.id}/redeem", {"user_id": str(self.user.id)})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["is_redeemed"])

        response = self.post(f"/api/rewards/{reward.id}/redeem", {"user_id": str(self.user.id)})
        self.assertEqual(response.status_code, 400)

    def test_redeem_without_points(self):
        reward = Reward.objects.create(user_id=self.user.id, name="Movie", points=10)
        response = self.post(f"/api/rewards/{reward.id}/redeem", {"user_id": str(self.user.id)})
        self.assertEqual(response.status_code, 400)
        self.assertIn("Need 10 more points", response.json()["detail"])

    def test_redeem_unknown(self):
        response = self.post(f"/api/rewards/{uuid4()}/redeem", {"user_id": str(self.user.id)})
        self.assertEqual(response.status_code, 404)

    def test_draw(self):
        response = self.post("/api/rewards/draw", {"user_id": str(self.user.id)})
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["reward"])

        reward = Reward.objects.create(user_id=self.user.id, name="Bath", points=1)
        response = self.post("/api/rewards/draw", {"user_id": str(self.user.id)})
        self.assertEqual(response.json()["reward"]["id"], str(reward.id))
