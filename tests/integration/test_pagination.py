"""Integration tests for category listings over HTTP.

Covers:
- Offset listing: totals, windows past the end, sorting.
- Offset listing validation (page, size, sort, category).
- Cursor listing: seeking by id, end of results, validation.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

LIST_URL = "/api/v1/products/"
SCROLL_URL = "/api/v1/products/scroll/"


@pytest.fixture()
def catalog(make_product):
    """25 electronics products plus 3 unrelated ones."""
    electronics = [make_product("electronics", f"item-{i:02d}") for i in range(25)]
    for name in ("robot", "kite", "puzzle"):
        make_product("toys", name)
    return electronics


# ===========================================================================
# Offset listing
# ===========================================================================


class TestOffsetListing:
    def test_page_totals(self, api_client, catalog):
        response = api_client.get(
            LIST_URL, {"category": "electronics", "page": 0, "size": 10}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_elements"] == 25
        assert data["total_pages"] == 3
        assert data["page_index"] == 0
        assert len(data["items"]) == 10
        assert {item["category"] for item in data["items"]} == {"electronics"}

    def test_last_partial_page(self, api_client, catalog):
        data = api_client.get(
            LIST_URL, {"category": "electronics", "page": 2, "size": 10}
        ).json()

        assert len(data["items"]) == 5

    def test_page_past_end_is_empty(self, api_client, catalog):
        data = api_client.get(
            LIST_URL, {"category": "electronics", "page": 5, "size": 10}
        ).json()

        assert data["items"] == []
        assert data["total_elements"] == 25
        assert data["total_pages"] == 3

    def test_unknown_category_is_empty(self, api_client, catalog):
        data = api_client.get(LIST_URL, {"category": "garden"}).json()

        assert data == {
            "items": [],
            "total_pages": 0,
            "total_elements": 0,
            "page_index": 0,
        }

    def test_default_page_size(self, api_client, catalog, settings):
        settings.DEFAULT_PAGE_SIZE = 20
        data = api_client.get(LIST_URL, {"category": "electronics"}).json()

        assert len(data["items"]) == 20
        assert data["total_pages"] == 2

    def test_sort_by_name_descending(self, api_client, catalog):
        data = api_client.get(
            LIST_URL, {"category": "toys", "size": 10, "sort": "-name"}
        ).json()

        assert [item["name"] for item in data["items"]] == ["robot", "puzzle", "kite"]

    def test_sort_by_category_is_accepted(self, api_client, catalog):
        response = api_client.get(
            LIST_URL, {"category": "toys", "size": 10, "sort": "category"}
        )

        assert response.status_code == 200
        assert response.json()["total_elements"] == 3


class TestOffsetListingValidation:
    @pytest.mark.parametrize(
        ("params", "detail"),
        [
            ({"page": -1, "size": 10}, "Page index must not be negative."),
            ({"page": 0, "size": 0}, "Page size must be at least 1."),
            ({"page": 0, "size": 101}, "Page size must not exceed 100."),
            ({"page": 0, "size": 10, "sort": "price"}, "Cannot sort by 'price'."),
            ({"page": 0, "size": 10, "sort": "--name"}, "Cannot sort by '-name'."),
        ],
    )
    def test_invalid_window_returns_400(self, api_client, params, detail):
        response = api_client.get(LIST_URL, {"category": "electronics", **params})

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "client_error"
        assert body["errors"][0]["code"] == "invalid_request"
        assert body["errors"][0]["detail"] == detail

    @pytest.mark.parametrize("params", [{"page": "first"}, {"size": "lots"}])
    def test_non_numeric_returns_400(self, api_client, params):
        response = api_client.get(LIST_URL, {"category": "electronics", **params})

        assert response.status_code == 400

    def test_missing_category_returns_400(self, api_client):
        response = api_client.get(LIST_URL, {"page": 0, "size": 10})

        assert response.status_code == 400
        assert "category" in response.json()["errors"][0]["detail"]


# ===========================================================================
# Cursor listing
# ===========================================================================


class TestCursorListing:
    def test_walks_whole_category(self, api_client, catalog):
        seen = []
        after = 0
        while True:
            data = api_client.get(
                SCROLL_URL, {"category": "electronics", "after": after, "size": 10}
            ).json()
            seen.extend(item["id"] for item in data["items"])
            if not data["has_next"]:
                break
            after = data["next_cursor"]

        assert seen == sorted(p.id for p in catalog)

    def test_last_window_has_no_cursor(self, api_client, catalog):
        data = api_client.get(
            SCROLL_URL, {"category": "toys", "after": 0, "size": 10}
        ).json()

        assert len(data["items"]) == 3
        assert data["next_cursor"] is None
        assert data["has_next"] is False

    @pytest.mark.parametrize(
        "params",
        [{"after": -1}, {"size": 0}, {"size": 101}, {"after": "x"}],
    )
    def test_invalid_returns_400(self, api_client, params):
        response = api_client.get(SCROLL_URL, {"category": "electronics", **params})

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "invalid_request"
