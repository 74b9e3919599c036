"""
Choice enums shared by the bingo models and the pure evaluator.

Kept outside models.py so the evaluator can import them without
loading the Django app registry.
"""
from django.db import models


class SquareKind(models.TextChoices):
    TOLERATION = 'TOLERATION', 'Toleration'
    TASK = 'TASK', 'Task'
    FREE_SPACE = 'FREE_SPACE', 'Free Space'


class LineType(models.TextChoices):
    ROW = 'ROW', 'Row'
    COLUMN = 'COLUMN', 'Column'
    DIAGONAL = 'DIAGONAL', 'Diagonal'


# Diagonal line indexes
MAIN_DIAGONAL = 0
ANTI_DIAGONAL = 1
