"""Online store content models: pages, blogs and theme assets."""

from datetime import datetime

from shopify_admin.models.base import ShopifyModel
from shopify_admin.models.metafield import Metafield


class Page(ShopifyModel):
    id: int | None = None
    shop_id: int | None = None
    title: str | None = None
    handle: str | None = None
    author: str | None = None
    body_html: str | None = None
    template_suffix: str | None = None
    published: bool | None = None
    published_at: datetime | None = None
    metafields: list[Metafield] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Blog(ShopifyModel):
    id: int | None = None
    title: str | None = None
    handle: str | None = None
    commentable: str | None = None
    feedburner: str | None = None
    feedburner_location: str | None = None
    tags: str | None = None
    template_suffix: str | None = None
    metafields: list[Metafield] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Asset(ShopifyModel):
    key: str | None = None
    theme_id: int | None = None
    value: str | None = None
    attachment: str | None = None
    content_type: str | None = None
    public_url: str | None = None
    size: int | None = None
    src: str | None = None
    source_key: str | None = None
    checksum: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
