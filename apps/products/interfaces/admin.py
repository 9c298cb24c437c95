"""
Products admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.product_model import ProductModel
from ..infrastructure.models.category_model import CategoryModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('name', 'store_id', 'category_name', 'price', 'stock', 'status', 'created_at')
    list_filter = ('status', 'category_name', 'created_at')
    search_fields = ('name', 'description', 'seller_id')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')


@admin.register(CategoryModel)
class CategoryAdmin(admin.ModelAdmin):
    """Admin configuration for Category model."""
    list_display = ('name', 'slug', 'parent', 'level', 'is_active', 'created_at')
    list_filter = ('is_active', 'level')
    search_fields = ('name', 'slug', 'description')
    prepopulated_fields = {'slug': ('name',)}
    ordering = ('level', 'name')
    readonly_fields = ('id', 'created_at', 'updated_at')
