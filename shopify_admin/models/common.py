"""Types shared by orders, draft orders, refunds and fulfillments."""

from decimal import Decimal
from typing import Any

from pydantic import field_validator

from shopify_admin.models.base import ShopifyModel


class Address(ShopifyModel):
    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province: str | None = None
    province_code: str | None = None
    country: str | None = None
    country_code: str | None = None
    zip: str | None = None
    phone: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class AmountSetEntry(ShopifyModel):
    amount: Decimal | None = None
    currency_code: str | None = None


class AmountSet(ShopifyModel):
    shop_money: AmountSetEntry | None = None
    presentment_money: AmountSetEntry | None = None


class NoteAttribute(ShopifyModel):
    name: str | None = None
    value: Any = None


class TaxLine(ShopifyModel):
    title: str | None = None
    price: Decimal | None = None
    rate: Decimal | None = None
    channel_liable: bool | None = None


class DiscountCode(ShopifyModel):
    code: str | None = None
    amount: Decimal | None = None
    type: str | None = None


class DiscountAllocation(ShopifyModel):
    amount: Decimal | None = None
    discount_application_index: int | None = None
    amount_set: AmountSet | None = None


class AppliedDiscount(ShopifyModel):
    title: str | None = None
    description: str | None = None
    value: str | None = None
    value_type: str | None = None
    amount: str | None = None


class LineItem(ShopifyModel):
    id: int | None = None
    product_id: int | None = None
    variant_id: int | None = None
    quantity: int | None = None
    price: Decimal | None = None
    total_discount: Decimal | None = None
    title: str | None = None
    variant_title: str | None = None
    name: str | None = None
    sku: str | None = None
    vendor: str | None = None
    gift_card: bool | None = None
    taxable: bool | None = None
    fulfillment_service: str | None = None
    fulfillment_status: str | None = None
    fulfillable_quantity: int | None = None
    requires_shipping: bool | None = None
    grams: int | None = None
    properties: list[NoteAttribute] | None = None
    tax_lines: list[TaxLine] | None = None
    applied_discount: AppliedDiscount | None = None
    discount_allocations: list[DiscountAllocation] | None = None
    custom: bool | None = None

    @field_validator("properties", mode="before")
    @classmethod
    def coerce_properties(cls, value: Any) -> Any:
        """Accept the object form some older orders carry.

        ``properties`` is normally a list of name/value pairs, but older
        orders return a single object, sometimes an empty one. A single
        object becomes a one-element list; an empty object means no
        properties.
        """
        if isinstance(value, dict):
            if not value or (value.get("name") in (None, "") and value.get("value") is None):
                return None
            return [value]
        return value


class ShippingLine(ShopifyModel):
    """Shipping line as sent on draft orders."""

    custom: bool | None = None
    handle: str | None = None
    title: str | None = None
    price: Decimal | None = None


class ShippingLines(ShopifyModel):
    """Shipping line as returned on orders."""

    id: int | None = None
    title: str | None = None
    price: Decimal | None = None
    price_set: AmountSet | None = None
    code: str | None = None
    source: str | None = None
    phone: str | None = None
    requested_fulfillment_service_id: str | None = None
    delivery_category: str | None = None
    carrier_identifier: str | None = None
    discounted_price: Decimal | None = None
    tax_lines: list[TaxLine] | None = None

    @field_validator("requested_fulfillment_service_id", mode="before")
    @classmethod
    def coerce_service_id(cls, value: Any) -> Any:
        """The API sends this id as a string, a number or null."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value


