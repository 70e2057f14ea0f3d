"""Product URL configuration.

Wires the view set to a single ``ProductService`` built here, once, at
import time.
"""

from __future__ import annotations

from django.urls import path

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.products.views import ProductViewSet

product_service = ProductService(repository=ProductDjangoRepository())

product_list = ProductViewSet.as_view(
    {"get": "list", "post": "create"},
    service=product_service,
)
product_detail = ProductViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"},
    service=product_service,
)

urlpatterns = [
    path("products", product_list, name="product-list"),
    path("products/<int:pk>", product_detail, name="product-detail"),
]
