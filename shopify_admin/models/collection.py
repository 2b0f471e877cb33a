"""Collection models: generic collections, custom and smart collections, collects."""

from datetime import datetime

from shopify_admin.models.base import ShopifyModel
from shopify_admin.models.metafield import Metafield
from shopify_admin.models.product import Image


class Collection(ShopifyModel):
    id: int | None = None
    handle: str | None = None
    title: str | None = None
    body_html: str | None = None
    sort_order: str | None = None
    template_suffix: str | None = None
    image: Image | None = None
    published_at: datetime | None = None
    published_scope: str | None = None
    collection_type: str | None = None
    updated_at: datetime | None = None


class CustomCollection(ShopifyModel):
    id: int | None = None
    handle: str | None = None
    title: str | None = None
    body_html: str | None = None
    sort_order: str | None = None
    template_suffix: str | None = None
    image: Image | None = None
    published: bool | None = None
    published_at: datetime | None = None
    published_scope: str | None = None
    metafields: list[Metafield] | None = None
    updated_at: datetime | None = None


class Rule(ShopifyModel):
    column: str | None = None
    relation: str | None = None
    condition: str | None = None


class SmartCollection(ShopifyModel):
    id: int | None = None
    handle: str | None = None
    title: str | None = None
    body_html: str | None = None
    sort_order: str | None = None
    template_suffix: str | None = None
    image: Image | None = None
    published: bool | None = None
    published_at: datetime | None = None
    published_scope: str | None = None
    rules: list[Rule] | None = None
    disjunctive: bool | None = None
    metafields: list[Metafield] | None = None
    updated_at: datetime | None = None


class Collect(ShopifyModel):
    id: int | None = None
    collection_id: int | None = None
    product_id: int | None = None
    position: int | None = None
    sort_value: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
