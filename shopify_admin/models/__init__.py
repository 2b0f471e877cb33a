"""Wire models for Admin API resources."""

from .base import Envelope, ShopifyModel, envelope_for, wrap
from .collection import Collect, Collection, CustomCollection, Rule, SmartCollection
from .common import (
    Address,
    AmountSet,
    AmountSetEntry,
    AppliedDiscount,
    DiscountAllocation,
    DiscountCode,
    LineItem,
    NoteAttribute,
    ShippingLine,
    ShippingLines,
    TaxLine,
)
from .content import Asset, Blog, Page
from .customer import Customer, CustomerAddress, MarketingConsent
from .draft_order import DraftOrder, DraftOrderInvoice
from .fulfillment import Fulfillment
from .inventory import (
    CountryHarmonizedSystemCode,
    InventoryItem,
    InventoryLevel,
    InventoryLevelAdjust,
    InventoryLevelConnect,
    InventoryLevelSet,
)
from .metafield import Metafield
from .order import ClientDetails, Order, OrderCancelRequest, Refund, RefundLineItem, Transaction
from .product import Image, Product, ProductOption, Variant
from .store import (
    ApplicationCharge,
    CarrierShippingRateProvider,
    Location,
    PriceBasedShippingRate,
    ShippingCountry,
    ShippingProvince,
    ShippingZone,
    Shop,
    Webhook,
    WeightBasedShippingRate,
)

__all__ = [
    "Address",
    "AmountSet",
    "AmountSetEntry",
    "AppliedDiscount",
    "ApplicationCharge",
    "Asset",
    "Blog",
    "CarrierShippingRateProvider",
    "ClientDetails",
    "Collect",
    "Collection",
    "CountryHarmonizedSystemCode",
    "CustomCollection",
    "Customer",
    "CustomerAddress",
    "DiscountAllocation",
    "DiscountCode",
    "DraftOrder",
    "DraftOrderInvoice",
    "Envelope",
    "Fulfillment",
    "Image",
    "InventoryItem",
    "InventoryLevel",
    "InventoryLevelAdjust",
    "InventoryLevelConnect",
    "InventoryLevelSet",
    "LineItem",
    "Location",
    "MarketingConsent",
    "Metafield",
    "NoteAttribute",
    "Order",
    "OrderCancelRequest",
    "Page",
    "PriceBasedShippingRate",
    "Product",
    "ProductOption",
    "Refund",
    "RefundLineItem",
    "Rule",
    "ShippingCountry",
    "ShippingLine",
    "ShippingLines",
    "ShippingProvince",
    "ShippingZone",
    "Shop",
    "ShopifyModel",
    "SmartCollection",
    "TaxLine",
    "Transaction",
    "Variant",
    "Webhook",
    "WeightBasedShippingRate",
    "envelope_for",
    "wrap",
]
