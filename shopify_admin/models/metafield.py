"""Metafield model, attachable to most owner resources."""

from datetime import datetime
from typing import Any

from shopify_admin.models.base import ShopifyModel


class Metafield(ShopifyModel):
    id: int | None = None
    namespace: str | None = None
    key: str | None = None
    value: Any = None
    type: str | None = None
    description: str | None = None
    owner_id: int | None = None
    owner_resource: str | None = None
    admin_graphql_api_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
