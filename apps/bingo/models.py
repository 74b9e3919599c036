import uuid
from django.db import models

from .choices import LineType, SquareKind
from . import evaluator


class Board(models.Model):
    """
    One user's bingo grid for a calendar month.
    Squares are stored row-major by position.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField(db_index=True)  # No FK - modular boundary

    size = models.PositiveSmallIntegerField(default=3)
    month = models.PositiveSmallIntegerField()
    year = models.PositiveIntegerField()

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-year', '-month', '-created_at']
        indexes = [
            models.Index(fields=['user_id', 'year', 'month'], name='bingo_board_user_month_idx'),
        ]

    def __str__(self):
        return f"{self.size}x{self.size} board {self.month:02d}/{self.year}"

    @property
    def label(self):
        return f"{self.year}-{self.month:02d} ({self.size}x{self.size})"

    def to_state(self) -> evaluator.Board:
        """Snapshot for the evaluator, read fresh from the database."""
        squares = self.squares.order_by('position')
        return evaluator.Board(size=self.size, squares=[s.to_state() for s in squares])


class Square(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    board = models.ForeignKey(Board, on_delete=models.CASCADE, related_name='squares')

    position = models.PositiveSmallIntegerField()
    content = models.CharField(max_length=255)
    kind = models.CharField(
        max_length=20,
        choices=SquareKind.choices,
        default=SquareKind.TASK
    )

    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['position']
        unique_together = ['board', 'position']

    def __str__(self):
        return f"#{self.position} {self.content}"

    @property
    def is_free_space(self):
        return self.kind == SquareKind.FREE_SPACE

    def to_state(self) -> evaluator.SquareState:
        return evaluator.SquareState(kind=self.kind, completed=self.is_completed, content=self.content)


class Bingo(models.Model):
    """
    A line that has been won on a board at least once.
    Unique per (board, line_type, line_index) so concurrent completions
    cannot record the same line twice.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    board = models.ForeignKey(Board, on_delete=models.CASCADE, related_name='bingos')

    line_type = models.CharField(max_length=20, choices=LineType.choices)
    line_index = models.PositiveSmallIntegerField()

    achieved_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['achieved_at']
        constraints = [
            models.UniqueConstraint(
                fields=['board', 'line_type', 'line_index'],
                name='unique_bingo_per_board_line',
            ),
        ]

    def __str__(self):
        return f"{self.line_type} {self.line_index} on {self.board_id}"

    @property
    def key(self) -> evaluator.BingoKey:
        return evaluator.BingoKey(self.line_type, self.line_index)
