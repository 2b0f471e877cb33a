"""Metafields, attached to an owner resource such as an order or a page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopify_admin.models.metafield import Metafield
from shopify_admin.resources.base import QueryOptions, Resource, ResourceService

if TYPE_CHECKING:
    from shopify_admin.client import ShopifyClient


class MetafieldService(ResourceService):
    """Metafields of one owner, at ``{owner_resource}/{owner_id}/metafields``."""

    singular = "metafield"
    plural = "metafields"
    model = Metafield

    def __init__(self, client: "ShopifyClient", owner_resource: str, owner_id: int):
        super().__init__(client)
        self.owner_resource = owner_resource
        self.owner_id = owner_id
        self.base_path = f"{owner_resource}/{owner_id}/metafields"


class HasMetafields:
    """Adds metafield operations to a resource service.

    Mixed into services whose resources own metafields; the owner path is
    the service's ``base_path``.
    """

    def metafields(self, resource_id: int) -> MetafieldService:
        """The metafield service of one resource."""
        return MetafieldService(self._client, self.base_path, resource_id)

    def list_metafields(self, resource_id: int, options: QueryOptions = None) -> list[Metafield]:
        return self.metafields(resource_id).list(options)

    def count_metafields(self, resource_id: int, options: QueryOptions = None) -> int:
        return self.metafields(resource_id).count(options)

    def get_metafield(
        self, resource_id: int, metafield_id: int, options: QueryOptions = None
    ) -> Metafield | None:
        return self.metafields(resource_id).get(metafield_id, options)

    def create_metafield(self, resource_id: int, metafield: Resource) -> Metafield:
        return self.metafields(resource_id).create(metafield)

    def update_metafield(self, resource_id: int, metafield: Resource) -> Metafield:
        return self.metafields(resource_id).update(metafield)

    def delete_metafield(self, resource_id: int, metafield_id: int) -> None:
        self.metafields(resource_id).delete(metafield_id)
