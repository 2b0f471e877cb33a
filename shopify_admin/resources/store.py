"""Store-wide resources: the shop, application charges and shipping zones."""

from __future__ import annotations

from shopify_admin.models.base import wrap
from shopify_admin.models.store import ApplicationCharge, ShippingZone, Shop
from shopify_admin.resources.base import QueryOptions, Resource, ResourceService, resource_id_of


class ShopService(ResourceService):
    """The shop the client is authenticated for."""

    base_path = "shop"
    singular = "shop"
    plural = "shops"
    model = Shop
    operations = frozenset({"get"})

    def get(self, options: QueryOptions = None) -> Shop | None:
        return self._fetch_one(self._path(), options)


class ApplicationChargeService(ResourceService):
    """One-time application charges."""

    base_path = "application_charges"
    singular = "application_charge"
    plural = "application_charges"
    model = ApplicationCharge
    operations = frozenset({"list", "get", "create"})

    def activate(self, charge: Resource) -> ApplicationCharge | None:
        """Activate an accepted charge."""
        charge_id = resource_id_of(charge)
        return self._send_one(
            "POST", self._path(charge_id, "activate"), wrap(self.singular, charge)
        )


class ShippingZoneService(ResourceService):
    base_path = "shipping_zones"
    singular = "shipping_zone"
    plural = "shipping_zones"
    model = ShippingZone
    operations = frozenset({"list"})
