import pytest

pytestmark = pytest.mark.integration


class TestOpenApiSchema:
    def test_schema_lists_product_routes(self, client):
        response = client.get("/api/schema/", {"format": "json"})

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/v1/products/" in paths
        assert "/api/v1/products/{id}/" in paths
        assert "/api/v1/products/scroll/" in paths
        assert "/api/v1/products/categories/" in paths

    def test_product_detail_has_no_patch(self, client):
        paths = client.get("/api/schema/", {"format": "json"}).json()["paths"]

        assert "patch" not in paths["/api/v1/products/{id}/"]
