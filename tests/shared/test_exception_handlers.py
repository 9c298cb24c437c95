"""
Tests for the DRF exception handler and shared domain helpers.
"""
import pytest

from apps.products.domain.exceptions import (
    CategoryNotFoundError,
    ProductNotFoundError,
    SubcategoryMismatchError,
)
from apps.stores.domain.exceptions import StoreNotApprovedError
from shared.domain.exceptions import DomainException, OperationFailedError
from shared.infrastructure.storage import StorageError
from shared.interfaces import custom_exception_handler


@pytest.mark.parametrize('exc, status_code', [
    (ProductNotFoundError('1'), 404),
    (CategoryNotFoundError('1'), 400),
    (SubcategoryMismatchError('1', '2'), 422),
    (StoreNotApprovedError('Pending'), 409),
    (DomainException('Something is off'), 400),
])
def test_domain_errors(exc, status_code):
    response = custom_exception_handler(exc, {})

    assert response.status_code == status_code
    assert response.data['error'] == exc.message


def test_wrapped_domain_error_keeps_cause_status():
    exc = OperationFailedError('update', 'product', ProductNotFoundError('1'))

    response = custom_exception_handler(exc, {})

    assert response.status_code == 404
    assert response.data['error'] == "Failed to update product: Product not found"
    assert response.data['code'] == 'ENTITY_NOT_FOUND'


def test_wrapped_infrastructure_error_is_server_error():
    exc = OperationFailedError('create', 'product', StorageError("Error uploading image: timeout"))

    response = custom_exception_handler(exc, {})

    assert response.status_code == 500
    assert response.data == {
        'error': "Failed to create product: Error uploading image: timeout",
        'code': 'OPERATION_FAILED',
    }


def test_unknown_errors_are_left_to_django():
    assert custom_exception_handler(RuntimeError('boom'), {}) is None

