import uuid
from django.db import models


class ActivityLog(models.Model):
    """
    Append-only trail of what happened on a user's boards and rewards.
    Keeps a record of who did what and when.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField(null=True, blank=True, db_index=True)  # No FK - modular boundary

    action = models.CharField(max_length=50, help_text="Action performed (e.g., BINGO_ACHIEVED)")
    target_type = models.CharField(max_length=50, help_text="Type of object acted on (e.g., Square)")
    target_id = models.UUIDField(help_text="ID of the object acted on")
    target_label = models.CharField(max_length=255, blank=True, help_text="Human-readable label of the object")

    performed_at = models.DateTimeField(auto_now_add=True)
    context = models.JSONField(default=dict, blank=True, help_text="Additional context/metadata")

    class Meta:
        ordering = ['-performed_at']
        verbose_name = "Activity Log"
        verbose_name_plural = "Activity Logs"

    def __str__(self):
        return f"{self.action} on {self.target_type} {self.target_id}"
