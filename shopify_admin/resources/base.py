"""Generic resource service shared by every Admin API resource.

A service is declared by its base path, its singular and plural envelope keys
and its model. The generic operations build the paths, wrap request bodies
and unwrap response envelopes; resource modules only add what is special.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from shopify_admin.logging_config import get_logger
from shopify_admin.models.base import ShopifyModel, envelope_for, wrap
from shopify_admin.pagination import Pagination

if TYPE_CHECKING:
    from shopify_admin.client import ShopifyClient

logger = get_logger(__name__)

ALL_OPERATIONS = frozenset({"list", "count", "get", "create", "update", "delete"})

Resource = ShopifyModel | dict[str, Any]
QueryOptions = BaseModel | Mapping[str, Any] | None


class ResourceService:
    """Base for resource services.

    Subclasses set:
        base_path: Path below the API prefix, e.g. ``"orders"``.
        singular: Envelope key of a single resource, e.g. ``"order"``.
        plural: Envelope key of a list, e.g. ``"orders"``.
        model: Model class the payloads decode into.
        operations: Generic operations the endpoint supports. Calling one that
            is not listed raises ``NotImplementedError``.
    """

    base_path: str
    singular: str
    plural: str
    model: type[ShopifyModel]
    operations: frozenset[str] = ALL_OPERATIONS

    def __init__(self, client: "ShopifyClient"):
        self._client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_path={self.base_path!r})"

    # Paths

    def _path(self, *parts: Any) -> str:
        return "/".join(str(part) for part in (self.base_path, *parts)) + ".json"

    def _require(self, operation: str) -> None:
        if operation not in self.operations:
            raise NotImplementedError(
                f"{type(self).__name__} does not support {operation}()"
            )

    # Envelope helpers usable with any path, model and key

    def _fetch_list(
        self,
        path: str,
        options: QueryOptions = None,
        key: str | None = None,
        model: type[ShopifyModel] | None = None,
    ) -> list[Any]:
        key = key or self.plural
        envelope = envelope_for(key, model or self.model, many=True)
        return getattr(self._client.get(path, envelope, options), key)

    def _fetch_page(
        self,
        path: str,
        options: QueryOptions = None,
        key: str | None = None,
        model: type[ShopifyModel] | None = None,
    ) -> tuple[list[Any], Pagination]:
        key = key or self.plural
        envelope = envelope_for(key, model or self.model, many=True)
        decoded, pagination = self._client.get_with_pagination(path, envelope, options)
        return getattr(decoded, key), pagination

    def _iter_pages(
        self,
        path: str,
        options: QueryOptions = None,
        key: str | None = None,
        model: type[ShopifyModel] | None = None,
    ) -> Iterator[Any]:
        page_count = 0
        total = 0

        while True:
            page_count += 1
            items, pagination = self._fetch_page(path, options, key, model)
            for item in items:
                total += 1
                yield item

            if not pagination.has_next:
                logger.debug(
                    "Pagination complete",
                    extra={"path": path, "total_pages": page_count, "total_items": total},
                )
                return

            options = pagination.next_page_options

    def _fetch_one(
        self,
        path: str,
        options: QueryOptions = None,
        key: str | None = None,
        model: type[ShopifyModel] | None = None,
    ) -> Any:
        key = key or self.singular
        envelope = envelope_for(key, model or self.model)
        return getattr(self._client.get(path, envelope, options), key)

    def _send_one(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: QueryOptions = None,
        key: str | None = None,
        model: type[ShopifyModel] | None = None,
    ) -> Any:
        key = key or self.singular
        envelope = envelope_for(key, model or self.model)
        if method == "POST":
            decoded = self._client.post(path, body, envelope, options)
        else:
            decoded = self._client.put(path, body, envelope, options)
        return getattr(decoded, key)

    # Generic operations

    def list(self, options: QueryOptions = None) -> list[Any]:
        """List resources matching ``options`` (a single page)."""
        self._require("list")
        return self._fetch_list(self._path(), options)

    def list_with_pagination(self, options: QueryOptions = None) -> tuple[list[Any], Pagination]:
        """List one page of resources plus the options for adjacent pages.

        Example:
            >>> orders, page = client.orders.list_with_pagination(ListOptions(limit=50))
            >>> while page.has_next:
            ...     orders, page = client.orders.list_with_pagination(page.next_page_options)
        """
        self._require("list")
        return self._fetch_page(self._path(), options)

    def iter_all(self, options: QueryOptions = None) -> Iterator[Any]:
        """Yield every resource, following ``next`` links until the last page."""
        self._require("list")
        return self._iter_pages(self._path(), options)

    def count(self, options: QueryOptions = None) -> int:
        self._require("count")
        return self._client.count(self._path("count"), options)

    def get(self, resource_id: int, options: QueryOptions = None) -> Any:
        self._require("get")
        return self._fetch_one(self._path(resource_id), options)

    def create(self, resource: Resource) -> Any:
        self._require("create")
        return self._send_one("POST", self._path(), wrap(self.singular, resource))

    def update(self, resource: Resource) -> Any:
        """Update a resource; its ``id`` selects which one."""
        self._require("update")
        resource_id = resource_id_of(resource)
        return self._send_one(
            "PUT", self._path(resource_id), wrap(self.singular, resource)
        )

    def delete(self, resource_id: int) -> None:
        self._require("delete")
        self._client.delete(self._path(resource_id))


def resource_id_of(resource: Resource) -> int:
    """Return the ``id`` of a model or payload dict.

    Raises:
        ValueError: If the resource has no id.
    """
    if isinstance(resource, Mapping):
        resource_id = resource.get("id")
    else:
        resource_id = getattr(resource, "id", None)
    if resource_id is None:
        raise ValueError(f"{type(resource).__name__} has no id")
    return resource_id
