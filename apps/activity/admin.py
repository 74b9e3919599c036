from django.contrib import admin
from .models import ActivityLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ['action', 'target_type', 'target_label', 'user_id', 'performed_at']
    list_filter = ['action', 'target_type']
    search_fields = ['target_label']
