"""Fulfillment model, reachable from orders."""

from datetime import datetime

from shopify_admin.models.base import ShopifyModel
from shopify_admin.models.common import LineItem


class Fulfillment(ShopifyModel):
    id: int | None = None
    order_id: int | None = None
    location_id: int | None = None
    name: str | None = None
    status: str | None = None
    service: str | None = None
    shipment_status: str | None = None
    tracking_company: str | None = None
    tracking_number: str | None = None
    tracking_numbers: list[str] | None = None
    tracking_url: str | None = None
    tracking_urls: list[str] | None = None
    notify_customer: bool | None = None
    line_items: list[LineItem] | None = None
    receipt: dict | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
