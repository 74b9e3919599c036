"""
Management command to seed a demo account with a board and rewards.
Safe to rerun: every row is created with get_or_create.
"""
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.identity.models import Account, User
from apps.rewards.models import Reward
from apps.bingo.choices import SquareKind
from apps.bingo.generator import FREE_SPACE_CONTENT
from apps.bingo.models import Board, Square

DEMO_EMAIL = 'demo@productivitybingo.com'
DEMO_PASSWORD = 'password123'

DEMO_MEMBERS = [
    ('knight@castle.com', 'Sir Knight'),
    ('warrior@castle.com', 'Lady Warrior'),
]

# (content, kind, completed) in position order
DEMO_SQUARES = [
    ('Fix the broken cabinet door', SquareKind.TOLERATION, False),
    ('Call the dentist', SquareKind.TASK, True),
    ('Organize the garage', SquareKind.TOLERATION, False),
    ('Buy new laundry bin', SquareKind.TOLERATION, False),
    (FREE_SPACE_CONTENT, SquareKind.FREE_SPACE, True),
    ('Schedule car maintenance', SquareKind.TASK, False),
    ('Clean out email inbox', SquareKind.TASK, True),
    ('Update resume', SquareKind.TASK, False),
    ('Fix squeaky door', SquareKind.TOLERATION, False),
]

DEMO_REWARDS = [
    ('Order my favorite takeout', "Get that delicious meal you've been craving", 3),
    ('Buy a new book', 'Add something exciting to your reading list', 5),
    ('Take a relaxing bath', 'Unwind with some self-care time', 1),
    ('Go to a movie', 'Enjoy a night out at the cinema', 10),
]


class Command(BaseCommand):
    help = 'Seeds a demo account, a 3x3 board for this month and sample rewards'

    def handle(self, *args, **options):
        with transaction.atomic():
            account, _ = Account.objects.get_or_create(
                email=DEMO_EMAIL,
                defaults={'name': 'The Smith Family'},
            )
            self.stdout.write(f'Account: {account.email}')

            users = [self._seed_user(account, email, name) for email, name in DEMO_MEMBERS]
            user = users[0]

            board = self._seed_board(user)
            reward_count = self._seed_rewards(user)

        self.stdout.write(self.style.SUCCESS(
            f'Seeded {len(users)} users, board {board.label} and {reward_count} new rewards'
        ))

    def _seed_user(self, account, email, display_name):
        user, created = User.objects.get_or_create(
            username=email,
            defaults={
                'email': email,
                'display_name': display_name,
                'account_id': account.id,
            },
        )
        if created:
            user.set_password(DEMO_PASSWORD)
            user.save(update_fields=['password'])
            self.stdout.write(f'  Created user {display_name} ({email})')
        return user

    def _seed_board(self, user):
        today = timezone.localdate()
        board, created = Board.objects.get_or_create(
            user_id=user.id,
            month=today.month,
            year=today.year,
            is_active=True,
            defaults={'size': 3},
        )
        if not created:
            self.stdout.write(f'  Board {board.label} already exists')
            return board

        now = timezone.now()
        for position, (content, kind, completed) in enumerate(DEMO_SQUARES):
            Square.objects.get_or_create(
                board=board,
                position=position,
                defaults={
                    'content': content,
                    'kind': kind,
                    'is_completed': completed,
                    'completed_at': now if completed and kind != SquareKind.FREE_SPACE else None,
                },
            )
        self.stdout.write(f'  Created board {board.label} with {len(DEMO_SQUARES)} squares')
        return board

    def _seed_rewards(self, user):
        count = 0
        for name, description, points in DEMO_REWARDS:
            _, created = Reward.objects.get_or_create(
                user_id=user.id,
                name=name,
                defaults={'description': description, 'points': points},
            )
            if created:
                count += 1
        return count
