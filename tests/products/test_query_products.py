"""
Tests for the product read use cases.
"""
import uuid
from unittest.mock import MagicMock

import pytest

from apps.products.application.dtos import ProductListQueryDTO, StoreProductsQueryDTO
from apps.products.application.use_cases import (
    GetAllProductsUseCase,
    GetProductByIdUseCase,
    GetStoreProductsUseCase,
)
from apps.stores.domain.exceptions import StoreNotFoundError
from shared.domain import Page
from tests.factories import build_product, build_store


@pytest.fixture
def product_repository():
    repository = MagicMock()
    repository.find_all.return_value = Page(items=[], total_items=0, current_page=1, page_size=10)
    return repository


class TestGetProductById:

    def test_returns_product(self, product_repository):
        product = build_product()
        product_repository.find_by_id.return_value = product

        result = GetProductByIdUseCase(product_repository=product_repository).execute(product.id)

        assert result.data.id == product.id
        assert result.data.price == product.price.amount

    def test_missing_product_is_none(self, product_repository):
        product_repository.find_by_id.return_value = None

        result = GetProductByIdUseCase(product_repository=product_repository).execute(uuid.uuid4())

        assert result.success
        assert result.data is None


class TestGetAllProducts:

    def test_defaults_to_active_products(self, product_repository):
        use_case = GetAllProductsUseCase(product_repository=product_repository)

        use_case.execute(ProductListQueryDTO(filters={}, page=1, limit=10))

        filters = product_repository.find_all.call_args.args[0]
        assert filters == {'status': 'Active'}

    def test_keeps_only_supported_filters(self, product_repository):
        store_id = uuid.uuid4()
        use_case = GetAllProductsUseCase(product_repository=product_repository)

        use_case.execute(ProductListQueryDTO(
            filters={
                'store_id': store_id,
                'category_id': None,
                'status': 'Inactive',
                'seller_id': 'seller1',
                'price': 10,
            },
            page=2,
            limit=5,
            sort={'price': 1},
        ))

        product_repository.find_all.assert_called_once_with(
            {'store_id': store_id, 'status': 'Inactive'},
            page=2,
            limit=5,
            sort={'price': 1},
        )

    def test_builds_pagination(self, product_repository):
        products = [build_product() for _ in range(5)]
        product_repository.find_all.return_value = Page(
            items=products, total_items=12, current_page=2, page_size=5,
        )

        result = GetAllProductsUseCase(product_repository=product_repository).execute(
            ProductListQueryDTO(page=2, limit=5)
        )

        assert [p.id for p in result.data.products] == [p.id for p in products]
        pagination = result.data.pagination
        assert pagination.total_items == 12
        assert pagination.total_pages == 3
        assert pagination.current_page == 2
        assert pagination.items_per_page == 5
        assert pagination.has_next_page is True
        assert pagination.has_prev_page is True

    def test_errors_are_not_wrapped(self, product_repository):
        product_repository.find_all.side_effect = RuntimeError("database unavailable")

        with pytest.raises(RuntimeError, match="database unavailable"):
            GetAllProductsUseCase(product_repository=product_repository).execute(
                ProductListQueryDTO(page=1, limit=10)
            )


class TestGetStoreProducts:

    def test_unknown_store(self, product_repository):
        store_repository = MagicMock()
        store_repository.find_by_id.return_value = None
        use_case = GetStoreProductsUseCase(
            product_repository=product_repository,
            store_repository=store_repository,
        )

        with pytest.raises(StoreNotFoundError):
            use_case.execute(StoreProductsQueryDTO(store_id=uuid.uuid4()))

        product_repository.find_by_store_id.assert_not_called()

    def test_lists_store_products(self, product_repository):
        store = build_store()
        store_repository = MagicMock()
        store_repository.find_by_id.return_value = store
        products = [build_product(store_id=store.id) for _ in range(3)]
        product_repository.find_by_store_id.return_value = Page(
            items=products, total_items=23, current_page=3, page_size=10,
        )
        use_case = GetStoreProductsUseCase(
            product_repository=product_repository,
            store_repository=store_repository,
        )

        result = use_case.execute(StoreProductsQueryDTO(store_id=store.id, page=3))

        product_repository.find_by_store_id.assert_called_once_with(
            store.id, page=3, limit=10, sort=None,
        )
        assert len(result.data.data) == 3
        assert result.data.total_items == 23
        assert result.data.total_pages == 3
        assert result.data.current_page == 3
