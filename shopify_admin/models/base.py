"""Base classes for Admin API wire models and response envelopes."""

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, create_model


class ShopifyModel(BaseModel):
    """Base for every resource model.

    Unknown fields are kept (``extra="allow"``) so that a model never drops
    data the API returns but this library does not name yet.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body, leaving out everything unset."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Envelope(BaseModel):
    """Base for the single-key wrapper objects the API sends and expects."""

    model_config = ConfigDict(extra="ignore")


@lru_cache(maxsize=None)
def envelope_for(key: str, model: type[BaseModel], many: bool = False) -> type[Envelope]:
    """Build (once) the envelope model ``{key: model}`` or ``{key: [model]}``.

    The key is required: a response without it does not have the expected
    shape. A singular payload may still be ``null``.

    Args:
        key: Envelope key, e.g. ``"order"`` or ``"orders"``.
        model: Model class of the payload.
        many: True for list endpoints.

    Returns:
        A pydantic model class with a single field named ``key``.
    """
    field_type: Any = list[model] if many else model | None  # type: ignore[valid-type]
    suffix = "ListEnvelope" if many else "Envelope"
    return create_model(
        f"{model.__name__}{suffix}",
        __base__=Envelope,
        **{key: (field_type, ...)},
    )


def wrap(key: str, payload: BaseModel | dict[str, Any] | None) -> dict[str, Any]:
    """Wrap a request payload in its envelope key."""
    if isinstance(payload, ShopifyModel):
        return {key: payload.to_payload()}
    if isinstance(payload, BaseModel):
        return {key: payload.model_dump(mode="json", by_alias=True, exclude_none=True)}
    return {key: payload}
