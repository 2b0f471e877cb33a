"""Inventory items, inventory levels and locations."""

from __future__ import annotations

from shopify_admin.models.inventory import (
    InventoryItem,
    InventoryLevel,
    InventoryLevelAdjust,
    InventoryLevelConnect,
    InventoryLevelSet,
)
from shopify_admin.models.store import Location
from shopify_admin.pagination import Pagination
from shopify_admin.resources.base import QueryOptions, ResourceService


class InventoryItemService(ResourceService):
    base_path = "inventory_items"
    singular = "inventory_item"
    plural = "inventory_items"
    model = InventoryItem
    operations = frozenset({"list", "get", "update"})


class InventoryLevelService(ResourceService):
    """Inventory levels: the available quantity of an item at a location.

    Levels have no id of their own. They are addressed by the pair
    (inventory item, location), and changed through the action endpoints.
    Their bodies are sent without an envelope.
    """

    base_path = "inventory_levels"
    singular = "inventory_level"
    plural = "inventory_levels"
    model = InventoryLevel
    operations = frozenset({"list"})

    def adjust(self, adjust: InventoryLevelAdjust | dict) -> InventoryLevel | None:
        """Add ``available_adjustment`` (may be negative) to the available quantity."""
        return self._send_one("POST", self._path("adjust"), adjust)

    def connect(self, connect: InventoryLevelConnect | dict) -> InventoryLevel | None:
        """Connect an inventory item to a location."""
        return self._send_one("POST", self._path("connect"), connect)

    def set(self, level: InventoryLevelSet | dict) -> InventoryLevel | None:
        """Set the available quantity of an item at a location."""
        return self._send_one("POST", self._path("set"), level)

    def delete(self, inventory_item_id: int, location_id: int) -> None:
        """Remove an item's inventory level from a location."""
        self._client.delete(
            self._path(),
            {"inventory_item_id": inventory_item_id, "location_id": location_id},
        )


class LocationService(ResourceService):
    base_path = "locations"
    singular = "location"
    plural = "locations"
    model = Location
    operations = frozenset({"list", "get", "count"})

    def list_inventory_levels(
        self, location_id: int, options: QueryOptions = None
    ) -> list[InventoryLevel]:
        """List the inventory levels stocked at one location."""
        return self._fetch_list(
            self._path(location_id, "inventory_levels"),
            options,
            key="inventory_levels",
            model=InventoryLevel,
        )

    def list_inventory_levels_with_pagination(
        self, location_id: int, options: QueryOptions = None
    ) -> tuple[list[InventoryLevel], Pagination]:
        return self._fetch_page(
            self._path(location_id, "inventory_levels"),
            options,
            key="inventory_levels",
            model=InventoryLevel,
        )
