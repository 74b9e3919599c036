from django.contrib import admin
from .models import Reward


@admin.register(Reward)
class RewardAdmin(admin.ModelAdmin):
    list_display = ['name', 'points', 'user_id', 'is_redeemed', 'redeemed_at']
    list_filter = ['is_redeemed']
    search_fields = ['name', 'description']
