"""Product API views.

Exposes ``ProductService`` over HTTP with a DRF ViewSet.  The service
instance is handed to the view by ``urls.py`` (``as_view(service=...)``);
the view never builds its own collaborators.

Every write goes through ``validate_product`` first; a failing payload is
answered with a field -> message map and never reaches the service.
A missing product is answered with an empty 404.
"""

from __future__ import annotations

from typing import Optional

import structlog
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import error_map, validate_product
from modules.products.models import Product
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Does **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer.  ``queryset`` is kept only for schema
    introspection.
    """

    queryset = Product.objects.none()
    serializer_class = ProductSerializer
    service: Optional[ProductService] = None

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self.service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 404: None})
    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/products/{pk}"""
        product = self.service.get_product(pk)
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(responses={201: ProductSerializer, 400: OpenApiTypes.OBJECT})
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto, errors = validate_product(request.data)
        if errors:
            return self._validation_failed(errors)

        product = self.service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={201: ProductSerializer, 400: OpenApiTypes.OBJECT, 404: None}
    )
    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/products/{pk}

        Answers 201 on success, like create.
        """
        dto, errors = validate_product(request.data)
        if errors:
            return self._validation_failed(errors)

        product = self.service.update_product(pk, dto)
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ProductSerializer, 404: None})
    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/products/{pk}"""
        product = self.service.delete_product(pk)
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validation_failed(self, errors) -> Response:
        logger.info(
            "product.validation_failed",
            fields=sorted(err.field for err in errors),
        )
        return Response(error_map(errors), status=status.HTTP_400_BAD_REQUEST)
