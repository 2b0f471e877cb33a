"""Orders."""

from __future__ import annotations

from shopify_admin.models.order import Order, OrderCancelRequest
from shopify_admin.resources.base import ResourceService
from shopify_admin.resources.fulfillments import HasFulfillments
from shopify_admin.resources.metafields import HasMetafields


class OrderService(HasMetafields, HasFulfillments, ResourceService):
    """Orders, with their metafields and fulfillments.

    See https://shopify.dev/docs/api/admin-rest/latest/resources/order
    """

    base_path = "orders"
    singular = "order"
    plural = "orders"
    model = Order

    def cancel(
        self, order_id: int, request: OrderCancelRequest | dict | None = None
    ) -> Order | None:
        """Cancel an order.

        Args:
            order_id: Order to cancel.
            request: Optional refund, restock and notification settings, sent
                as the (unwrapped) request body.
        """
        return self._send_one("POST", self._path(order_id, "cancel"), request)

    def close(self, order_id: int) -> Order | None:
        return self._send_one("POST", self._path(order_id, "close"))

    def open(self, order_id: int) -> Order | None:
        """Re-open a closed order."""
        return self._send_one("POST", self._path(order_id, "open"))
