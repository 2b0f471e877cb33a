"""Store-wide models: shop, locations, webhooks, shipping zones and app charges."""

from datetime import datetime
from decimal import Decimal

from shopify_admin.models.base import ShopifyModel


class Shop(ShopifyModel):
    id: int | None = None
    name: str | None = None
    email: str | None = None
    customer_email: str | None = None
    shop_owner: str | None = None
    domain: str | None = None
    myshopify_domain: str | None = None
    plan_name: str | None = None
    plan_display_name: str | None = None
    currency: str | None = None
    enabled_presentment_currencies: list[str] | None = None
    money_format: str | None = None
    money_with_currency_format: str | None = None
    weight_unit: str | None = None
    primary_locale: str | None = None
    primary_location_id: int | None = None
    timezone: str | None = None
    iana_timezone: str | None = None
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
    latitude: float | None = None
    longitude: float | None = None
    taxes_included: bool | None = None
    tax_shipping: bool | None = None
    has_storefront: bool | None = None
    has_discounts: bool | None = None
    has_gift_cards: bool | None = None
    password_enabled: bool | None = None
    setup_required: bool | None = None
    checkout_api_supported: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Location(ShopifyModel):
    id: int | None = None
    name: str | None = None
    active: bool | None = None
    legacy: bool | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province: str | None = None
    province_code: str | None = None
    country: str | None = None
    country_code: str | None = None
    country_name: str | None = None
    localized_country_name: str | None = None
    localized_province_name: str | None = None
    zip: str | None = None
    phone: str | None = None
    admin_graphql_api_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Webhook(ShopifyModel):
    id: int | None = None
    address: str | None = None
    topic: str | None = None
    format: str | None = None
    api_version: str | None = None
    fields: list[str] | None = None
    metafield_namespaces: list[str] | None = None
    private_metafield_namespaces: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ApplicationCharge(ShopifyModel):
    id: int | None = None
    name: str | None = None
    api_client_id: int | None = None
    price: Decimal | None = None
    status: str | None = None
    return_url: str | None = None
    decorated_return_url: str | None = None
    confirmation_url: str | None = None
    charge_type: str | None = None
    test: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ShippingProvince(ShopifyModel):
    id: int | None = None
    country_id: int | None = None
    shipping_zone_id: int | None = None
    name: str | None = None
    code: str | None = None
    tax: Decimal | None = None
    tax_name: str | None = None
    tax_type: str | None = None
    tax_percentage: Decimal | None = None


class ShippingCountry(ShopifyModel):
    id: int | None = None
    shipping_zone_id: int | None = None
    name: str | None = None
    code: str | None = None
    tax: Decimal | None = None
    tax_name: str | None = None
    provinces: list[ShippingProvince] | None = None


class WeightBasedShippingRate(ShopifyModel):
    id: int | None = None
    shipping_zone_id: int | None = None
    name: str | None = None
    price: Decimal | None = None
    weight_low: Decimal | None = None
    weight_high: Decimal | None = None


class PriceBasedShippingRate(ShopifyModel):
    id: int | None = None
    shipping_zone_id: int | None = None
    name: str | None = None
    price: Decimal | None = None
    min_order_subtotal: Decimal | None = None
    max_order_subtotal: Decimal | None = None


class CarrierShippingRateProvider(ShopifyModel):
    id: int | None = None
    carrier_service_id: int | None = None
    shipping_zone_id: int | None = None
    flat_modifier: Decimal | None = None
    percent_modifier: Decimal | None = None
    service_filter: dict[str, str] | None = None


class ShippingZone(ShopifyModel):
    id: int | None = None
    name: str | None = None
    profile_id: str | None = None
    location_group_id: str | None = None
    admin_graphql_api_id: str | None = None
    countries: list[ShippingCountry] | None = None
    weight_based_shipping_rates: list[WeightBasedShippingRate] | None = None
    price_based_shipping_rates: list[PriceBasedShippingRate] | None = None
    carrier_shipping_rate_providers: list[CarrierShippingRateProvider] | None = None
