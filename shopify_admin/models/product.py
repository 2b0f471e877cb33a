"""Product, variant and image models."""

from datetime import datetime
from decimal import Decimal

from shopify_admin.models.base import ShopifyModel


class Image(ShopifyModel):
    id: int | None = None
    product_id: int | None = None
    position: int | None = None
    src: str | None = None
    alt: str | None = None
    width: int | None = None
    height: int | None = None
    variant_ids: list[int] | None = None
    attachment: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Variant(ShopifyModel):
    id: int | None = None
    product_id: int | None = None
    title: str | None = None
    sku: str | None = None
    barcode: str | None = None
    position: int | None = None
    price: Decimal | None = None
    compare_at_price: Decimal | None = None
    option1: str | None = None
    option2: str | None = None
    option3: str | None = None
    grams: int | None = None
    weight: Decimal | None = None
    weight_unit: str | None = None
    inventory_item_id: int | None = None
    inventory_quantity: int | None = None
    inventory_management: str | None = None
    inventory_policy: str | None = None
    requires_shipping: bool | None = None
    taxable: bool | None = None
    image_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductOption(ShopifyModel):
    id: int | None = None
    product_id: int | None = None
    name: str | None = None
    position: int | None = None
    values: list[str] | None = None


class Product(ShopifyModel):
    """A Shopify product.

    See https://shopify.dev/docs/api/admin-rest/latest/resources/product
    """

    id: int | None = None
    title: str | None = None
    body_html: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    handle: str | None = None
    status: str | None = None
    tags: str | None = None
    template_suffix: str | None = None
    published_scope: str | None = None
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    variants: list[Variant] | None = None
    options: list[ProductOption] | None = None
    images: list[Image] | None = None
    image: Image | None = None
