"""
Product serializers.
"""
from rest_framework import serializers

from ...application.dtos.product_dto import ImageAction
from ...domain.value_objects.product_images import MAX_PRODUCT_IMAGES
from ...domain.value_objects.product_status import ProductStatus

SORTABLE_FIELDS = ('name', 'price', 'stock', 'status', 'created_at', 'updated_at')


class ProductSerializer(serializers.Serializer):
    """Serializer for product output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    stock = serializers.IntegerField(read_only=True)
    category_id = serializers.UUIDField(read_only=True)
    category_name = serializers.CharField(read_only=True)
    sub_category_id = serializers.UUIDField(read_only=True, allow_null=True)
    sub_category_name = serializers.CharField(read_only=True, allow_null=True)
    seller_id = serializers.CharField(read_only=True)
    store_id = serializers.UUIDField(read_only=True)
    main_image_url = serializers.URLField(read_only=True)
    image_urls = serializers.ListField(child=serializers.URLField(), read_only=True)
    status = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class PaginationMetaSerializer(serializers.Serializer):
    """Serializer for listing pagination details."""
    total_items = serializers.IntegerField(read_only=True)
    total_pages = serializers.IntegerField(read_only=True)
    current_page = serializers.IntegerField(read_only=True)
    items_per_page = serializers.IntegerField(read_only=True)
    has_next_page = serializers.BooleanField(read_only=True)
    has_prev_page = serializers.BooleanField(read_only=True)


class ProductListSerializer(serializers.Serializer):
    """Serializer for a page of products."""
    products = ProductSerializer(many=True, read_only=True)
    pagination = PaginationMetaSerializer(read_only=True)


class PaginatedProductSerializer(serializers.Serializer):
    """Serializer for the generic paginated envelope of products."""
    data = ProductSerializer(many=True, read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    total_pages = serializers.IntegerField(read_only=True)
    current_page = serializers.IntegerField(read_only=True)


class ProductImagesMixin:
    """Limit the number of gallery files accepted in one request."""

    def validate_additional_images(self, value):
        if len(value) > MAX_PRODUCT_IMAGES:
            raise serializers.ValidationError(
                f"At most {MAX_PRODUCT_IMAGES} additional images can be uploaded at once."
            )
        return value


class ProductCreateSerializer(ProductImagesMixin, serializers.Serializer):
    """Serializer for multipart product creation."""
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    stock = serializers.IntegerField(min_value=0)
    category_id = serializers.UUIDField()
    sub_category_id = serializers.UUIDField(required=False, allow_null=True)
    store_id = serializers.UUIDField()
    main_image = serializers.FileField(required=False)
    additional_images = serializers.ListField(
        child=serializers.FileField(),
        required=False,
        default=list,
    )


class ProductUpdateSerializer(ProductImagesMixin, serializers.Serializer):
    """Serializer for product update. Every field is optional."""
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    stock = serializers.IntegerField(min_value=0, required=False)
    status = serializers.ChoiceField(choices=ProductStatus.choices(), required=False)
    category_id = serializers.UUIDField(required=False)
    sub_category_id = serializers.UUIDField(required=False)
    main_image = serializers.FileField(required=False)
    additional_images = serializers.ListField(
        child=serializers.FileField(),
        required=False,
        default=list,
    )


class ImageActionSerializer(serializers.Serializer):
    """Serializer for the image_action query parameter."""
    image_action = serializers.ChoiceField(
        choices=[action.value for action in ImageAction],
        default=ImageAction.KEEP.value,
    )


class ProductListQuerySerializer(serializers.Serializer):
    """Serializer for product listing query parameters."""
    page = serializers.IntegerField(min_value=1)
    limit = serializers.IntegerField(min_value=1, max_value=100)
    store_id = serializers.UUIDField(required=False)
    category_id = serializers.UUIDField(required=False)
    sub_category_id = serializers.UUIDField(required=False)
    status = serializers.ChoiceField(choices=ProductStatus.choices(), required=False)
    sort_by = serializers.ChoiceField(choices=SORTABLE_FIELDS, required=False)
    order = serializers.ChoiceField(choices=('asc', 'desc'), default='desc')

    def to_sort(self) -> dict:
        """Build the {field: 1 | -1} sort mapping from sort_by and order."""
        sort_by = self.validated_data.get('sort_by')
        if not sort_by:
            return {}
        return {sort_by: 1 if self.validated_data['order'] == 'asc' else -1}


class StoreProductsQuerySerializer(ProductListQuerySerializer):
    """Serializer for store product query parameters."""
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)
    store_id = None
    category_id = None
    sub_category_id = None
    status = None
