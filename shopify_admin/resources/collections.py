"""Collections, custom and smart collections, and collects."""

from __future__ import annotations

from collections.abc import Iterator

from shopify_admin.models.collection import (
    Collect,
    Collection,
    CustomCollection,
    SmartCollection,
)
from shopify_admin.models.product import Product
from shopify_admin.pagination import Pagination
from shopify_admin.resources.base import QueryOptions, ResourceService
from shopify_admin.resources.metafields import HasMetafields


class CollectionService(ResourceService):
    """Read access to any collection, custom or smart, and its products."""

    base_path = "collections"
    singular = "collection"
    plural = "collections"
    model = Collection
    operations = frozenset({"get"})

    def list_products(self, collection_id: int, options: QueryOptions = None) -> list[Product]:
        """List the products in a collection (a single page)."""
        return self._fetch_list(
            self._path(collection_id, "products"), options, key="products", model=Product
        )

    def list_products_with_pagination(
        self, collection_id: int, options: QueryOptions = None
    ) -> tuple[list[Product], Pagination]:
        return self._fetch_page(
            self._path(collection_id, "products"), options, key="products", model=Product
        )

    def iter_products(self, collection_id: int, options: QueryOptions = None) -> Iterator[Product]:
        return self._iter_pages(
            self._path(collection_id, "products"), options, key="products", model=Product
        )


class CustomCollectionService(HasMetafields, ResourceService):
    base_path = "custom_collections"
    singular = "custom_collection"
    plural = "custom_collections"
    model = CustomCollection


class SmartCollectionService(HasMetafields, ResourceService):
    """Collections whose products are selected by rules."""

    base_path = "smart_collections"
    singular = "smart_collection"
    plural = "smart_collections"
    model = SmartCollection


class CollectService(ResourceService):
    """Links between products and custom collections."""

    base_path = "collects"
    singular = "collect"
    plural = "collects"
    model = Collect
    operations = frozenset({"list", "count", "get", "create", "delete"})
