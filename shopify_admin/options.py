"""Query option models and their query-string encoding.

Option models only ever send what the caller set: a field left at ``None``
never reaches the query string. ``encode_query`` is the single place that
turns options into request parameters, so every resource shares the same
formatting rules.
"""

from collections.abc import Mapping
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Options(BaseModel):
    """Base class for query option models."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def format_query_value(value: Any) -> str:
    """Format a single option value the way the Admin API expects it.

    Args:
        value: A scalar, datetime, enum, Decimal or sequence of those.

    Returns:
        The string placed in the query string.
    """
    # bool before int: True is an int too
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_query_value(value.value)
    if isinstance(value, datetime):
        if value.utcoffset() == timedelta(0):
            return value.replace(tzinfo=None).isoformat() + "Z"
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(format_query_value(item) for item in value)
    return str(value)


def encode_query(options: BaseModel | Mapping[str, Any] | None) -> dict[str, str]:
    """Encode options into query parameters, omitting unset values.

    Args:
        options: An option model, a plain mapping, or None.

    Returns:
        Parameter name to string value. Empty when nothing was set.

    Raises:
        TypeError: If ``options`` is some other type.

    Example:
        >>> encode_query(ListOptions(limit=50))
        {'limit': '50'}
    """
    if options is None:
        return {}

    if isinstance(options, BaseModel):
        raw = options.model_dump(by_alias=True, exclude_none=True)
    elif isinstance(options, Mapping):
        raw = dict(options)
    else:
        raise TypeError(
            f"options must be a pydantic model or a mapping, got {type(options).__name__}"
        )

    return {
        str(key): format_query_value(value)
        for key, value in raw.items()
        if value is not None
    }


class CountOptions(Options):
    """Filters shared by most count endpoints."""

    created_at_min: datetime | None = None
    created_at_max: datetime | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None


class ListOptions(CountOptions):
    """Filters shared by most list endpoints."""

    page_info: str | None = None
    limit: int | None = Field(default=None, ge=1, le=250)
    since_id: int | None = None
    order: str | None = None
    fields: list[str] | str | None = None
    ids: list[int] | str | None = None


class PageOptions(Options):
    """Options that fetch an adjacent page, taken from a ``Link`` header URL.

    Every query parameter of the link is kept, including ones this model does
    not name, so the follow-up request matches the link exactly.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    page_info: str
    limit: int | None = None
    fields: str | None = None


class OrderCountOptions(CountOptions):
    status: str | None = None
    financial_status: str | None = None
    fulfillment_status: str | None = None


class OrderListOptions(ListOptions):
    """See https://shopify.dev/docs/api/admin-rest/latest/resources/order#get-orders"""

    status: str | None = None
    financial_status: str | None = None
    fulfillment_status: str | None = None
    processed_at_min: datetime | None = None
    processed_at_max: datetime | None = None
    attribution_app_id: str | None = None


class CustomerSearchOptions(Options):
    query: str | None = None
    order: str | None = None
    limit: int | None = Field(default=None, ge=1, le=250)
    fields: list[str] | str | None = None
    page_info: str | None = None


class WebhookCountOptions(Options):
    address: str | None = None
    topic: str | None = None


class WebhookListOptions(ListOptions):
    address: str | None = None
    topic: str | None = None


class InventoryItemListOptions(Options):
    ids: list[int] | str | None = None
    limit: int | None = Field(default=None, ge=1, le=250)
    page_info: str | None = None


class InventoryLevelListOptions(Options):
    inventory_item_ids: list[int] | str | None = None
    location_ids: list[int] | str | None = None
    limit: int | None = Field(default=None, ge=1, le=250)
    updated_at_min: datetime | None = None
    page_info: str | None = None


class CollectionCountOptions(CountOptions):
    product_id: int | None = None
    published_at_min: datetime | None = None
    published_at_max: datetime | None = None
    published_status: str | None = None
    title: str | None = None


class CollectionListOptions(ListOptions):
    handle: str | None = None
    product_id: int | None = None
    published_at_min: datetime | None = None
    published_at_max: datetime | None = None
    published_status: str | None = None
    title: str | None = None


class CollectListOptions(ListOptions):
    product_id: int | None = None
    collection_id: int | None = None


class DraftOrderCountOptions(Options):
    since_id: int | None = None
    status: str | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None


class DraftOrderListOptions(ListOptions):
    status: str | None = None


class MetafieldListOptions(ListOptions):
    namespace: str | None = None
    key: str | None = None
    type: str | None = None


class AssetGetOptions(Options):
    """Selects a single theme asset by key."""

    key: str = Field(alias="asset[key]")
    theme_id: int | None = None


class DraftOrderCompleteOptions(Options):
    payment_pending: bool | None = None
