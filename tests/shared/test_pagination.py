"""
Tests for repository pages.
"""
import pytest

from shared.domain import Page


def test_page_navigation():
    page = Page(items=[1, 2], total_items=12, current_page=1, page_size=5)

    assert page.total_pages == 3
    assert page.has_next_page
    assert not page.has_prev_page


def test_last_page():
    page = Page(items=[11, 12], total_items=12, current_page=3, page_size=5)

    assert not page.has_next_page
    assert page.has_prev_page


@pytest.mark.parametrize('total_items, page_size, total_pages', [
    (0, 10, 0),
    (10, 10, 1),
    (11, 10, 2),
    (5, 0, 0),
])
def test_total_pages(total_items, page_size, total_pages):
    assert Page(total_items=total_items, page_size=page_size).total_pages == total_pages
