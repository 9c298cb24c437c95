"""
Pytest configuration and fixtures.
"""
import uuid

import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user(django_user_model):
    """Create a regular user."""
    return django_user_model.objects.create_user(
        email='seller@example.com',
        username='seller',
        password='testpass123',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def store_model(user):
    """Create an approved store owned by the test user."""
    from apps.stores.infrastructure.models import StoreModel
    return StoreModel.objects.create(
        user_id=str(user.pk),
        store_name='Seller Store',
        status='Approved',
    )


@pytest.fixture
def category_model():
    """Create an active top level category."""
    from apps.products.infrastructure.models import CategoryModel
    return CategoryModel.objects.create(name='Electronics', slug='electronics')


@pytest.fixture
def sub_category_model(category_model):
    """Create an active subcategory under the test category."""
    from apps.products.infrastructure.models import CategoryModel
    return CategoryModel.objects.create(
        name='Laptops',
        slug='laptops',
        parent=category_model,
        level=1,
    )


@pytest.fixture
def product_model(store_model, category_model, user):
    """Create an active product in the test store."""
    from apps.products.infrastructure.models import ProductModel
    return ProductModel.objects.create(
        id=uuid.uuid4(),
        name='Notebook',
        description='A thin notebook',
        price='1200.00',
        stock=3,
        category_id=category_model.id,
        category_name=category_model.name,
        seller_id=str(user.pk),
        store_id=store_model.id,
        main_image_url='https://storage.test/test-bucket/products/main_1_abc123_a.png',
        image_urls=['https://storage.test/test-bucket/products/gallery_1_abc123_b.png'],
    )
