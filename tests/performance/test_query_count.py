"""Performance regression tests: constant query count.

Listings must execute a bounded number of SQL queries regardless of how
many products the category holds.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

BASE_URL = "/api/v1/products/"


def _seed(make_product, count: int) -> None:
    for i in range(count):
        make_product("electronics", f"item-{i}")


class TestOffsetListingQueries:
    @pytest.mark.parametrize("count", [1, 30])
    def test_count_plus_window(self, api_client, make_product, django_assert_num_queries, count):
        _seed(make_product, count)

        with django_assert_num_queries(2):
            response = api_client.get(BASE_URL, {"category": "electronics", "size": 20})

        assert response.status_code == 200

    def test_page_past_end_skips_window_query(
        self, api_client, make_product, django_assert_num_queries
    ):
        _seed(make_product, 3)

        with django_assert_num_queries(1):
            response = api_client.get(
                BASE_URL, {"category": "electronics", "page": 4, "size": 20}
            )

        assert response.json()["items"] == []

    def test_invalid_request_never_queries(self, api_client, django_assert_num_queries):
        with django_assert_num_queries(0):
            response = api_client.get(BASE_URL, {"category": "electronics", "size": 0})

        assert response.status_code == 400


class TestCursorListingQueries:
    @pytest.mark.parametrize("count", [1, 30])
    def test_single_query(self, api_client, make_product, django_assert_num_queries, count):
        _seed(make_product, count)

        with django_assert_num_queries(1):
            response = api_client.get(
                f"{BASE_URL}scroll/", {"category": "electronics", "size": 20}
            )

        assert response.status_code == 200


class TestRetrieveQueries:
    def test_single_query(self, api_client, make_product, django_assert_num_queries):
        product = make_product()

        with django_assert_num_queries(1):
            api_client.get(f"{BASE_URL}{product.id}/")
