"""Draft orders."""

from __future__ import annotations

from shopify_admin.models.base import wrap
from shopify_admin.models.draft_order import DraftOrder, DraftOrderInvoice
from shopify_admin.options import DraftOrderCompleteOptions
from shopify_admin.resources.base import ResourceService
from shopify_admin.resources.metafields import HasMetafields


class DraftOrderService(HasMetafields, ResourceService):
    """Draft orders, with their metafields.

    See https://shopify.dev/docs/api/admin-rest/latest/resources/draftorder
    """

    base_path = "draft_orders"
    singular = "draft_order"
    plural = "draft_orders"
    model = DraftOrder

    def invoice(
        self, draft_order_id: int, invoice: DraftOrderInvoice | dict
    ) -> DraftOrderInvoice | None:
        """Email an invoice for the draft order to the customer."""
        return self._send_one(
            "POST",
            self._path(draft_order_id, "send_invoice"),
            wrap("draft_order_invoice", invoice),
            key="draft_order_invoice",
            model=DraftOrderInvoice,
        )

    def complete(self, draft_order_id: int, payment_pending: bool = False) -> DraftOrder | None:
        """Turn the draft order into an order.

        Args:
            draft_order_id: Draft order to complete.
            payment_pending: True to mark the resulting order as payment pending
                instead of paid.
        """
        return self._send_one(
            "PUT",
            self._path(draft_order_id, "complete"),
            options=DraftOrderCompleteOptions(payment_pending=payment_pending),
        )
