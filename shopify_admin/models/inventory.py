"""Inventory item and inventory level models."""

from datetime import datetime
from decimal import Decimal

from shopify_admin.models.base import ShopifyModel


class CountryHarmonizedSystemCode(ShopifyModel):
    harmonized_system_code: str | None = None
    country_code: str | None = None


class InventoryItem(ShopifyModel):
    id: int | None = None
    sku: str | None = None
    cost: Decimal | None = None
    tracked: bool | None = None
    requires_shipping: bool | None = None
    country_code_of_origin: str | None = None
    province_code_of_origin: str | None = None
    harmonized_system_code: str | None = None
    country_harmonized_system_codes: list[CountryHarmonizedSystemCode] | None = None
    admin_graphql_api_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class InventoryLevel(ShopifyModel):
    inventory_item_id: int | None = None
    location_id: int | None = None
    available: int | None = None
    admin_graphql_api_id: str | None = None
    updated_at: datetime | None = None


class InventoryLevelAdjust(ShopifyModel):
    """Body of ``inventory_levels/adjust``."""

    location_id: int
    inventory_item_id: int
    available_adjustment: int


class InventoryLevelConnect(ShopifyModel):
    """Body of ``inventory_levels/connect``; also identifies a level to delete."""

    location_id: int
    inventory_item_id: int
    relocate_if_necessary: bool | None = None


class InventoryLevelSet(ShopifyModel):
    """Body of ``inventory_levels/set``."""

    location_id: int
    inventory_item_id: int
    available: int
    disconnect_if_necessary: bool | None = None
