"""Customer and customer address models."""

from datetime import datetime
from decimal import Decimal

from shopify_admin.models.base import ShopifyModel


class CustomerAddress(ShopifyModel):
    id: int | None = None
    customer_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province: str | None = None
    province_code: str | None = None
    country: str | None = None
    country_code: str | None = None
    country_name: str | None = None
    zip: str | None = None
    phone: str | None = None
    default: bool | None = None


class MarketingConsent(ShopifyModel):
    state: str | None = None
    opt_in_level: str | None = None
    consent_updated_at: datetime | None = None
    consent_collected_from: str | None = None


class Customer(ShopifyModel):
    """A Shopify customer.

    See https://shopify.dev/docs/api/admin-rest/latest/resources/customer
    """

    id: int | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    state: str | None = None
    note: str | None = None
    verified_email: bool | None = None
    multipass_identifier: str | None = None
    orders_count: int | None = None
    total_spent: Decimal | None = None
    tax_exempt: bool | None = None
    tax_exemptions: list[str] | None = None
    tags: str | None = None
    currency: str | None = None
    last_order_id: int | None = None
    last_order_name: str | None = None
    default_address: CustomerAddress | None = None
    addresses: list[CustomerAddress] | None = None
    email_marketing_consent: MarketingConsent | None = None
    sms_marketing_consent: MarketingConsent | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # Write-only, used when creating customers with a login
    password: str | None = None
    password_confirmation: str | None = None
    send_email_invite: bool | None = None
