"""Order models: orders, transactions and refunds."""

from datetime import datetime
from decimal import Decimal

from shopify_admin.models.base import ShopifyModel
from shopify_admin.models.common import (
    Address,
    AmountSet,
    DiscountCode,
    LineItem,
    NoteAttribute,
    ShippingLines,
    TaxLine,
)
from shopify_admin.models.customer import Customer
from shopify_admin.models.fulfillment import Fulfillment


class ClientDetails(ShopifyModel):
    accept_language: str | None = None
    browser_height: int | None = None
    browser_ip: str | None = None
    browser_width: int | None = None
    session_hash: str | None = None
    user_agent: str | None = None


class Transaction(ShopifyModel):
    id: int | None = None
    order_id: int | None = None
    parent_id: int | None = None
    amount: Decimal | None = None
    currency: str | None = None
    kind: str | None = None
    gateway: str | None = None
    status: str | None = None
    message: str | None = None
    authorization: str | None = None
    error_code: str | None = None
    source_name: str | None = None
    test: bool | None = None
    created_at: datetime | None = None
    processed_at: datetime | None = None


class RefundLineItem(ShopifyModel):
    id: int | None = None
    line_item_id: int | None = None
    line_item: LineItem | None = None
    quantity: int | None = None
    restock_type: str | None = None
    location_id: int | None = None
    subtotal: Decimal | None = None
    total_tax: Decimal | None = None


class Refund(ShopifyModel):
    id: int | None = None
    order_id: int | None = None
    note: str | None = None
    restock: bool | None = None
    user_id: int | None = None
    created_at: datetime | None = None
    processed_at: datetime | None = None
    refund_line_items: list[RefundLineItem] | None = None
    transactions: list[Transaction] | None = None


class Order(ShopifyModel):
    """A Shopify order.

    See https://shopify.dev/docs/api/admin-rest/latest/resources/order
    """

    id: int | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    number: int | None = None
    order_number: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    processed_at: datetime | None = None
    cancelled_at: datetime | None = None
    closed_at: datetime | None = None
    cancel_reason: str | None = None
    currency: str | None = None
    presentment_currency: str | None = None
    financial_status: str | None = None
    fulfillment_status: str | None = None
    confirmed: bool | None = None
    test: bool | None = None
    taxes_included: bool | None = None
    buyer_accepts_marketing: bool | None = None
    total_price: Decimal | None = None
    total_price_set: AmountSet | None = None
    subtotal_price: Decimal | None = None
    subtotal_price_set: AmountSet | None = None
    total_tax: Decimal | None = None
    total_tax_set: AmountSet | None = None
    total_discounts: Decimal | None = None
    total_discounts_set: AmountSet | None = None
    total_line_items_price: Decimal | None = None
    total_weight: int | None = None
    tags: str | None = None
    note: str | None = None
    note_attributes: list[NoteAttribute] | None = None
    token: str | None = None
    cart_token: str | None = None
    checkout_token: str | None = None
    source_name: str | None = None
    location_id: int | None = None
    user_id: int | None = None
    customer: Customer | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    client_details: ClientDetails | None = None
    discount_codes: list[DiscountCode] | None = None
    line_items: list[LineItem] | None = None
    shipping_lines: list[ShippingLines] | None = None
    tax_lines: list[TaxLine] | None = None
    transactions: list[Transaction] | None = None
    refunds: list[Refund] | None = None
    fulfillments: list[Fulfillment] | None = None
    payment_gateway_names: list[str] | None = None
    order_status_url: str | None = None


class OrderCancelRequest(ShopifyModel):
    """Body of the order cancel call."""

    amount: Decimal | None = None
    currency: str | None = None
    restock: bool | None = None
    reason: str | None = None
    email: bool | None = None
    refund: Refund | None = None
