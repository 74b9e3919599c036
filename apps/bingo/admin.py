from django.contrib import admin
from .models import Board, Square, Bingo


class SquareInline(admin.TabularInline):
    model = Square
    extra = 0
    fields = ['position', 'content', 'kind', 'is_completed', 'completed_at']
    ordering = ['position']


class BingoInline(admin.TabularInline):
    model = Bingo
    extra = 0
    readonly_fields = ['line_type', 'line_index', 'achieved_at']


@admin.register(Board)
class BoardAdmin(admin.ModelAdmin):
    list_display = ['label', 'user_id', 'is_active', 'created_at']
    list_filter = ['is_active', 'size', 'year', 'month']
    search_fields = ['user_id']
    inlines = [SquareInline, BingoInline]


@admin.register(Bingo)
class BingoAdmin(admin.ModelAdmin):
    list_display = ['board', 'line_type', 'line_index', 'achieved_at']
    list_filter = ['line_type']
