"""Product DRF serializers for API output.

Views render products only through these serializers, so adding a
column to the model does not expose it until it is listed here.
Request input is parsed by the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only representation of the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "category", "name"]
        read_only_fields = fields


class ProductPageSerializer(serializers.Serializer):
    """Offset page: ``items`` plus page metadata."""

    items = ProductSerializer(many=True)
    total_pages = serializers.IntegerField()
    total_elements = serializers.IntegerField()
    page_index = serializers.IntegerField()


class ProductCursorPageSerializer(serializers.Serializer):
    """Cursor page: ``items`` plus the key of the next window."""

    items = ProductSerializer(many=True)
    next_cursor = serializers.IntegerField(allow_null=True)
    has_next = serializers.BooleanField()


class ProductInputSerializer(serializers.Serializer):
    """Request body of create and update (documentation only).

    Parsing is done by ``CreateProductDTO`` / ``UpdateProductDTO``.
    """

    category = serializers.CharField(max_length=255)
    name = serializers.CharField(max_length=255)
