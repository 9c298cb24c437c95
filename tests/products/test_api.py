"""
Tests for the products API.
"""
import uuid
from unittest.mock import patch

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.products.infrastructure.models import ProductModel
from tests.factories import fake_storage

pytestmark = pytest.mark.django_db

PRODUCTS_URL = '/api/v1/products/'


def image(name='image.png'):
    return SimpleUploadedFile(name, b'\x89PNG fake image', content_type='image/png')


@pytest.fixture
def storage():
    storage = fake_storage()
    with patch('apps.products.interfaces.api.v1.views.S3ImageStorage', return_value=storage):
        yield storage


class TestProductList:

    def test_page_and_limit_are_required(self, api_client):
        response = api_client.get(PRODUCTS_URL)

        assert response.status_code == 400
        assert 'page' in response.data
        assert 'limit' in response.data

    def test_limit_is_bounded(self, api_client):
        response = api_client.get(PRODUCTS_URL, {'page': 1, 'limit': 101})

        assert response.status_code == 400

    def test_lists_active_products(self, api_client, product_model):
        response = api_client.get(PRODUCTS_URL, {'page': 1, 'limit': 10, 'sort_by': 'price', 'order': 'asc'})

        assert response.status_code == 200
        assert response.data['pagination']['total_items'] == 1
        assert response.data['pagination']['items_per_page'] == 10
        assert response.data['products'][0]['id'] == str(product_model.id)

    def test_status_filter(self, api_client, product_model):
        response = api_client.get(PRODUCTS_URL, {'page': 1, 'limit': 10, 'status': 'Inactive'})

        assert response.status_code == 200
        assert response.data['products'] == []


class TestProductCreate:

    def test_requires_authentication(self, api_client):
        response = api_client.post(PRODUCTS_URL, {}, format='multipart')

        assert response.status_code in (401, 403)

    def test_creates_product(self, authenticated_client, store_model, category_model, storage):
        response = authenticated_client.post(
            PRODUCTS_URL,
            {
                'name': 'Notebook',
                'description': 'A thin notebook',
                'price': '1200.00',
                'stock': 3,
                'category_id': str(category_model.id),
                'store_id': str(store_model.id),
                'main_image': image('main.png'),
                'additional_images': [image('a.png'), image('b.png')],
            },
            format='multipart',
        )

        assert response.status_code == 201, response.data
        assert response.data['category_name'] == 'Electronics'
        assert response.data['main_image_url'] == 'https://cdn.test/products/main_main.png'
        assert response.data['image_urls'] == [
            'https://cdn.test/products/gallery_a.png',
            'https://cdn.test/products/gallery_b.png',
        ]
        assert ProductModel.objects.filter(id=response.data['id']).exists()

    def test_missing_main_image(self, authenticated_client, store_model, category_model, storage):
        response = authenticated_client.post(
            PRODUCTS_URL,
            {
                'name': 'Notebook',
                'price': '10.00',
                'stock': 1,
                'category_id': str(category_model.id),
                'store_id': str(store_model.id),
            },
            format='multipart',
        )

        assert response.status_code == 400
        assert response.data['error'] == "Main product image is required"
        storage.upload.assert_not_called()

    def test_store_of_another_seller(self, authenticated_client, store_model, category_model, storage):
        store_model.user_id = 'someone-else'
        store_model.save()

        response = authenticated_client.post(
            PRODUCTS_URL,
            {
                'name': 'Notebook',
                'price': '10.00',
                'stock': 1,
                'category_id': str(category_model.id),
                'store_id': str(store_model.id),
                'main_image': image(),
            },
            format='multipart',
        )

        assert response.status_code == 422
        assert response.data['error'] == (
            "Failed to create product: You can only create products for your own stores."
        )

    def test_too_many_images_in_one_request(self, authenticated_client, store_model, category_model, storage):
        response = authenticated_client.post(
            PRODUCTS_URL,
            {
                'name': 'Notebook',
                'price': '10.00',
                'stock': 1,
                'category_id': str(category_model.id),
                'store_id': str(store_model.id),
                'main_image': image(),
                'additional_images': [image(f'{i}.png') for i in range(6)],
            },
            format='multipart',
        )

        assert response.status_code == 400
        assert 'additional_images' in response.data


class TestProductDetail:

    def test_get(self, api_client, product_model):
        response = api_client.get(f'{PRODUCTS_URL}{product_model.id}/')

        assert response.status_code == 200
        assert response.data['name'] == 'Notebook'
        assert response.data['sub_category_id'] is None

    def test_get_missing(self, api_client):
        response = api_client.get(f'{PRODUCTS_URL}{uuid.uuid4()}/')

        assert response.status_code == 404

    def test_patch_price(self, authenticated_client, product_model, storage):
        response = authenticated_client.patch(
            f'{PRODUCTS_URL}{product_model.id}/',
            {'price': '999.00'},
            format='multipart',
        )

        assert response.status_code == 200, response.data
        assert response.data['price'] == '999.00'
        assert response.data['image_urls'] == product_model.image_urls
        storage.upload_many.assert_not_called()

    def test_replace_gallery(self, authenticated_client, product_model, storage):
        response = authenticated_client.put(
            f'{PRODUCTS_URL}{product_model.id}/?image_action=replace',
            {'additional_images': [image('new.png')]},
            format='multipart',
        )

        assert response.status_code == 200, response.data
        storage.delete_many.assert_called_once_with(product_model.image_urls)
        assert response.data['image_urls'] == ['https://cdn.test/products/gallery_new.png']

    def test_invalid_image_action(self, authenticated_client, product_model, storage):
        response = authenticated_client.patch(
            f'{PRODUCTS_URL}{product_model.id}/?image_action=merge',
            {'name': 'Renamed'},
            format='multipart',
        )

        assert response.status_code == 400

    def test_only_the_store_owner_may_update(self, api_client, django_user_model, product_model, storage):
        other = django_user_model.objects.create_user(username='other', password='testpass123')
        api_client.force_authenticate(user=other)

        response = api_client.patch(
            f'{PRODUCTS_URL}{product_model.id}/',
            {'name': 'Renamed'},
            format='multipart',
        )

        assert response.status_code == 403
        assert response.data['detail'] == (
            "You do not have permission to modify this product. Only the store owner can modify products."
        )

    def test_store_must_be_approved_to_update(self, authenticated_client, store_model, product_model, storage):
        store_model.status = 'Suspended'
        store_model.save()

        response = authenticated_client.patch(
            f'{PRODUCTS_URL}{product_model.id}/',
            {'name': 'Renamed'},
            format='multipart',
        )

        assert response.status_code == 403
        assert response.data['detail'] == (
            "Cannot modify products for a store with status: Suspended. Store must be Approved."
        )

    def test_staff_may_update_any_product(self, api_client, admin_user, product_model, storage):
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch(
            f'{PRODUCTS_URL}{product_model.id}/',
            {'name': 'Renamed'},
            format='multipart',
        )

        assert response.status_code == 200
        assert response.data['name'] == 'Renamed'

    def test_delete(self, authenticated_client, product_model, storage):
        response = authenticated_client.delete(f'{PRODUCTS_URL}{product_model.id}/')

        assert response.status_code == 204
        storage.delete.assert_called_once_with(product_model.main_image_url)
        assert not ProductModel.objects.filter(id=product_model.id).exists()

    def test_delete_missing(self, authenticated_client, storage):
        response = authenticated_client.delete(f'{PRODUCTS_URL}{uuid.uuid4()}/')

        assert response.status_code == 404
        assert response.data['detail'] == "Product not found"


class TestStoreProducts:

    def test_lists_store_products(self, api_client, store_model, product_model):
        response = api_client.get(f'{PRODUCTS_URL}stores/{store_model.id}/')

        assert response.status_code == 200
        assert response.data['total_items'] == 1
        assert response.data['total_pages'] == 1
        assert response.data['current_page'] == 1
        assert response.data['data'][0]['store_id'] == str(store_model.id)

    def test_unknown_store(self, api_client):
        response = api_client.get(f'{PRODUCTS_URL}stores/{uuid.uuid4()}/')

        assert response.status_code == 404
        assert response.data['error'] == "Store not found."

