"""Resource services bound to the Admin API client."""

from .base import ALL_OPERATIONS, ResourceService
from .collections import (
    CollectionService,
    CollectService,
    CustomCollectionService,
    SmartCollectionService,
)
from .content import AssetService, BlogService, PageService
from .customers import CustomerAddressService, CustomerService
from .draft_orders import DraftOrderService
from .fulfillments import FulfillmentService, HasFulfillments
from .inventory import InventoryItemService, InventoryLevelService, LocationService
from .metafields import HasMetafields, MetafieldService
from .orders import OrderService
from .products import ProductService
from .store import ApplicationChargeService, ShippingZoneService, ShopService
from .webhooks import WebhookService

__all__ = [
    "ALL_OPERATIONS",
    "ApplicationChargeService",
    "AssetService",
    "BlogService",
    "CollectionService",
    "CollectService",
    "CustomCollectionService",
    "CustomerAddressService",
    "CustomerService",
    "DraftOrderService",
    "FulfillmentService",
    "HasFulfillments",
    "HasMetafields",
    "InventoryItemService",
    "InventoryLevelService",
    "LocationService",
    "MetafieldService",
    "OrderService",
    "PageService",
    "ProductService",
    "ResourceService",
    "ShippingZoneService",
    "ShopService",
    "SmartCollectionService",
    "WebhookService",
]
