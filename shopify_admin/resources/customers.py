"""Customers and customer addresses."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from shopify_admin.models.base import wrap
from shopify_admin.models.customer import Customer, CustomerAddress
from shopify_admin.models.order import Order
from shopify_admin.pagination import Pagination
from shopify_admin.resources.base import (
    QueryOptions,
    Resource,
    ResourceService,
    resource_id_of,
)
from shopify_admin.resources.metafields import HasMetafields


class _TagsEnvelope(BaseModel):
    tags: list[str]


class CustomerService(HasMetafields, ResourceService):
    """Customers, with their metafields.

    See https://shopify.dev/docs/api/admin-rest/latest/resources/customer
    """

    base_path = "customers"
    singular = "customer"
    plural = "customers"
    model = Customer

    def search(self, options: QueryOptions = None) -> list[Customer]:
        """Search customers, e.g. with ``CustomerSearchOptions(query="email:bob@example.com")``."""
        return self._fetch_list(self._path("search"), options)

    def search_with_pagination(
        self, options: QueryOptions = None
    ) -> tuple[list[Customer], Pagination]:
        return self._fetch_page(self._path("search"), options)

    def list_orders(self, customer_id: int, options: QueryOptions = None) -> list[Order]:
        """List the orders of one customer."""
        return self._fetch_list(
            self._path(customer_id, "orders"), options, key="orders", model=Order
        )

    def list_tags(self, options: QueryOptions = None) -> list[str]:
        """List the tags used on customers."""
        return self._client.get(self._path("tags"), _TagsEnvelope, options).tags


class CustomerAddressService(ResourceService):
    """Addresses of a customer, at ``customers/{customer_id}/addresses``.

    Every call names the customer first.
    """

    base_path = "customers"
    singular = "customer_address"
    plural = "addresses"
    model = CustomerAddress
    operations = frozenset({"list", "get", "create", "update", "delete"})

    def list(self, customer_id: int, options: QueryOptions = None) -> list[CustomerAddress]:
        return self._fetch_list(self._path(customer_id, "addresses"), options)

    def list_with_pagination(
        self, customer_id: int, options: QueryOptions = None
    ) -> tuple[list[CustomerAddress], Pagination]:
        return self._fetch_page(self._path(customer_id, "addresses"), options)

    def iter_all(
        self, customer_id: int, options: QueryOptions = None
    ) -> Iterator[CustomerAddress]:
        return self._iter_pages(self._path(customer_id, "addresses"), options)

    def get(
        self, customer_id: int, address_id: int, options: QueryOptions = None
    ) -> CustomerAddress | None:
        return self._fetch_one(self._path(customer_id, "addresses", address_id), options)

    def create(self, customer_id: int, address: Resource) -> CustomerAddress | None:
        return self._send_one(
            "POST",
            self._path(customer_id, "addresses"),
            wrap(self.singular, address),
        )

    def update(self, customer_id: int, address: Resource) -> CustomerAddress | None:
        address_id = resource_id_of(address)
        return self._send_one(
            "PUT",
            self._path(customer_id, "addresses", address_id),
            wrap(self.singular, address),
        )

    def delete(self, customer_id: int, address_id: int) -> None:
        self._client.delete(self._path(customer_id, "addresses", address_id))

    def set_default(self, customer_id: int, address_id: int) -> CustomerAddress | None:
        """Make an address the customer's default address."""
        return self._send_one(
            "PUT", self._path(customer_id, "addresses", address_id, "default")
        )
