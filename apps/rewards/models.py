import uuid
from django.db import models


class RewardRarity(models.TextChoices):
    COMMON = 'COMMON', 'Common'
    RARE = 'RARE', 'Rare'
    EPIC = 'EPIC', 'Epic'
    LEGENDARY = 'LEGENDARY', 'Legendary'


class Reward(models.Model):
    """
    A treat the user promises themselves, bought with points earned from bingos.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField(db_index=True)  # No FK - modular boundary

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    points = models.PositiveIntegerField(default=1)

    is_redeemed = models.BooleanField(default=False)
    redeemed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['points', 'name']

    def __str__(self):
        return f"{self.name} ({self.points} pts)"

    @property
    def rarity(self) -> str:
        if self.points >= 10:
            return RewardRarity.LEGENDARY
        if self.points >= 5:
            return RewardRarity.EPIC
        if self.points >= 3:
            return RewardRarity.RARE
        return RewardRarity.COMMON
