"""Products."""

from __future__ import annotations

from shopify_admin.models.product import Product
from shopify_admin.resources.base import ResourceService
from shopify_admin.resources.metafields import HasMetafields


class ProductService(HasMetafields, ResourceService):
    base_path = "products"
    singular = "product"
    plural = "products"
    model = Product
