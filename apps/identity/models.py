import uuid
from django.db import models
from django.contrib.auth.models import AbstractUser


class Account(models.Model):
    """
    A household sharing one sign-up (e.g. "The Smith Family").
    Each member gets their own User and their own boards.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name or self.email


class User(AbstractUser):
    """
    Custom User model tied to an Account.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Store account_id as UUID field (no FK to maintain app independence)
    account_id = models.UUIDField(null=True, blank=True, db_index=True)
    display_name = models.CharField(max_length=150, blank=True)

    class Meta:
        ordering = ['username']

    def __str__(self):
        return self.display_name or self.email or self.username
