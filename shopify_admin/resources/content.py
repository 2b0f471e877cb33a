"""Online store content: pages, blogs and theme assets."""

from __future__ import annotations

from shopify_admin.models.base import wrap
from shopify_admin.models.content import Asset, Blog, Page
from shopify_admin.options import AssetGetOptions
from shopify_admin.resources.base import QueryOptions, Resource, ResourceService
from shopify_admin.resources.metafields import HasMetafields


class PageService(HasMetafields, ResourceService):
    base_path = "pages"
    singular = "page"
    plural = "pages"
    model = Page


class BlogService(HasMetafields, ResourceService):
    base_path = "blogs"
    singular = "blog"
    plural = "blogs"
    model = Blog


class AssetService(ResourceService):
    """Theme assets, at ``themes/{theme_id}/assets``.

    Assets are identified by their ``key`` (e.g. ``templates/index.liquid``),
    passed as the ``asset[key]`` query parameter.
    """

    base_path = "themes"
    singular = "asset"
    plural = "assets"
    model = Asset
    operations = frozenset({"list", "get", "update", "delete"})

    def list(self, theme_id: int, options: QueryOptions = None) -> list[Asset]:
        """List asset metadata of a theme; values are not included."""
        return self._fetch_list(self._path(theme_id, "assets"), options)

    def get(self, theme_id: int, key: str) -> Asset | None:
        options = AssetGetOptions(key=key, theme_id=theme_id)
        return self._fetch_one(self._path(theme_id, "assets"), options)

    def update(self, theme_id: int, asset: Resource) -> Asset | None:
        """Create or replace an asset; the asset's ``key`` selects which."""
        return self._send_one(
            "PUT", self._path(theme_id, "assets"), wrap(self.singular, asset)
        )

    def delete(self, theme_id: int, key: str) -> None:
        self._client.delete(
            self._path(theme_id, "assets"), AssetGetOptions(key=key)
        )
