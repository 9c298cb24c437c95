"""
Store Django ORM model.
"""
import uuid

from django.db import models

from ...domain.value_objects.store_status import StoreStatus


class StoreModel(models.Model):
    """Seller store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=128, db_index=True)
    store_name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default='')
    logo = models.URLField(max_length=500, null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=StoreStatus.choices(),
        default=StoreStatus.PENDING.value,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stores'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.store_name} ({self.status})"
