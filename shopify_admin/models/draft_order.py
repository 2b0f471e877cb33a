"""Draft order models."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from shopify_admin.models.base import ShopifyModel
from shopify_admin.models.common import (
    Address,
    AppliedDiscount,
    LineItem,
    NoteAttribute,
    ShippingLine,
    TaxLine,
)
from shopify_admin.models.customer import Customer


class DraftOrder(ShopifyModel):
    id: int | None = None
    order_id: int | None = None
    name: str | None = None
    email: str | None = None
    status: str | None = None
    note: str | None = None
    note_attributes: list[NoteAttribute] | None = None
    currency: str | None = None
    customer: Customer | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    line_items: list[LineItem] | None = None
    shipping_line: ShippingLine | None = None
    applied_discount: AppliedDiscount | None = None
    tax_lines: list[TaxLine] | None = None
    tax_exempt: bool | None = None
    taxes_included: bool | None = None
    tags: str | None = None
    source_name: str | None = None
    invoice_url: str | None = None
    invoice_sent_at: datetime | None = None
    subtotal_price: Decimal | None = None
    total_tax: Decimal | None = None
    total_price: Decimal | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # Request only: use the customer's default address for shipping
    use_customer_default_address: bool | None = None


class DraftOrderInvoice(ShopifyModel):
    to: str | None = None
    # "from" is a keyword, so the attribute takes an alias
    from_: str | None = Field(default=None, alias="from")
    subject: str | None = None
    custom_message: str | None = None
    bcc: list[str] | None = None
