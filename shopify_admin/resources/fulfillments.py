"""Fulfillments, attached to an owner resource (orders)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopify_admin.models.fulfillment import Fulfillment
from shopify_admin.resources.base import QueryOptions, Resource, ResourceService

if TYPE_CHECKING:
    from shopify_admin.client import ShopifyClient


class FulfillmentService(ResourceService):
    """Fulfillments of one owner, at ``{owner_resource}/{owner_id}/fulfillments``."""

    singular = "fulfillment"
    plural = "fulfillments"
    model = Fulfillment
    operations = frozenset({"list", "count", "get", "create", "update"})

    def __init__(self, client: "ShopifyClient", owner_resource: str, owner_id: int):
        super().__init__(client)
        self.owner_resource = owner_resource
        self.owner_id = owner_id
        self.base_path = f"{owner_resource}/{owner_id}/fulfillments"

    def complete(self, fulfillment_id: int) -> Fulfillment:
        """Mark a pending fulfillment as complete."""
        return self._send_one("POST", self._path(fulfillment_id, "complete"))

    def transition(self, fulfillment_id: int) -> Fulfillment:
        """Transition a fulfillment from pending to open."""
        return self._send_one("POST", self._path(fulfillment_id, "open"))

    def cancel(self, fulfillment_id: int) -> Fulfillment:
        return self._send_one("POST", self._path(fulfillment_id, "cancel"))


class HasFulfillments:
    """Adds fulfillment operations to a resource service."""

    def fulfillments(self, resource_id: int) -> FulfillmentService:
        """The fulfillment service of one resource."""
        return FulfillmentService(self._client, self.base_path, resource_id)

    def list_fulfillments(
        self, resource_id: int, options: QueryOptions = None
    ) -> list[Fulfillment]:
        return self.fulfillments(resource_id).list(options)

    def count_fulfillments(self, resource_id: int, options: QueryOptions = None) -> int:
        return self.fulfillments(resource_id).count(options)

    def get_fulfillment(
        self, resource_id: int, fulfillment_id: int, options: QueryOptions = None
    ) -> Fulfillment | None:
        return self.fulfillments(resource_id).get(fulfillment_id, options)

    def create_fulfillment(self, resource_id: int, fulfillment: Resource) -> Fulfillment:
        return self.fulfillments(resource_id).create(fulfillment)

    def update_fulfillment(self, resource_id: int, fulfillment: Resource) -> Fulfillment:
        return self.fulfillments(resource_id).update(fulfillment)

    def complete_fulfillment(self, resource_id: int, fulfillment_id: int) -> Fulfillment:
        return self.fulfillments(resource_id).complete(fulfillment_id)

    def transition_fulfillment(self, resource_id: int, fulfillment_id: int) -> Fulfillment:
        return self.fulfillments(resource_id).transition(fulfillment_id)

    def cancel_fulfillment(self, resource_id: int, fulfillment_id: int) -> Fulfillment:
        return self.fulfillments(resource_id).cancel(fulfillment_id)
