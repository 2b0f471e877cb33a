"""Webhook subscriptions."""

from __future__ import annotations

from shopify_admin.models.store import Webhook
from shopify_admin.resources.base import ResourceService


class WebhookService(ResourceService):
    """See https://shopify.dev/docs/api/admin-rest/latest/resources/webhook"""

    base_path = "webhooks"
    singular = "webhook"
    plural = "webhooks"
    model = Webhook
