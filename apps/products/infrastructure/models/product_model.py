"""
Product Django ORM model.
"""
import uuid

from django.core.validators import MinValueValidator
from django.db import models

from ...domain.value_objects.product_status import ProductStatus


class ProductModel(models.Model):
    """Product with denormalized category labels and an image gallery."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    stock = models.PositiveIntegerField(default=0)

    # Category labels are copies taken when the ids were last written
    category_id = models.UUIDField(db_index=True)
    category_name = models.CharField(max_length=100)
    sub_category_id = models.UUIDField(null=True, blank=True, db_index=True)
    sub_category_name = models.CharField(max_length=100, null=True, blank=True)

    seller_id = models.CharField(max_length=128, db_index=True)
    store_id = models.UUIDField(db_index=True)

    main_image_url = models.URLField(max_length=500)
    image_urls = models.JSONField(default=list, blank=True)

    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices(),
        default=ProductStatus.ACTIVE.value,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['store_id', 'status']),
            models.Index(fields=['category_id', 'status']),
        ]

    def __str__(self):
        return f"{self.name} ({self.status})"
