"""
Stores admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.store_model import StoreModel


@admin.register(StoreModel)
class StoreAdmin(admin.ModelAdmin):
    """Admin configuration for Store model."""
    list_display = ('store_name', 'user_id', 'status', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('store_name', 'user_id')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
