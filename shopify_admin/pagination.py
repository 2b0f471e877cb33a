"""Cursor pagination through the ``Link`` response header.

Shopify list endpoints return links to the adjacent pages:

    Link: <https://shop.myshopify.com/admin/api/2024-01/orders.json?limit=50&page_info=abc>; rel="previous",
          <https://shop.myshopify.com/admin/api/2024-01/orders.json?limit=50&page_info=def>; rel="next"

Each link is turned into ``PageOptions`` that, passed to the next list call,
request exactly the query string of that link.
"""

import re
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlsplit

from pydantic import ValidationError as PydanticValidationError

from shopify_admin.logging_config import get_logger
from shopify_admin.options import PageOptions

logger = get_logger(__name__)

LINK_PATTERN = re.compile(r'^\s*<([^<>]+)>\s*;\s*rel="(previous|next)"\s*$')
# Split between entries only; link URLs may contain commas themselves
ENTRY_SEPARATOR = re.compile(r",\s*(?=<)")


class MalformedLinkError(ValueError):
    """Raised internally when a ``Link`` entry cannot be used."""

    pass


@dataclass(frozen=True)
class Pagination:
    """Options for the pages before and after the one just fetched.

    Attributes:
        previous_page_options: Options fetching the previous page, if any.
        next_page_options: Options fetching the next page, if any.
    """

    previous_page_options: PageOptions | None = None
    next_page_options: PageOptions | None = None

    @property
    def has_next(self) -> bool:
        return self.next_page_options is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page_options is not None


def _page_options_from_url(url: str) -> PageOptions:
    try:
        query = urlsplit(url).query
    except ValueError as e:
        raise MalformedLinkError(f"Unparseable link URL: {url!r}") from e

    params = dict(parse_qsl(query, keep_blank_values=True))
    if not params.get("page_info"):
        raise MalformedLinkError(f"Link URL has no page_info: {url!r}")

    try:
        return PageOptions(**params)
    except PydanticValidationError as e:
        raise MalformedLinkError(f"Link URL has invalid parameters: {url!r}") from e


def _parse_entries(link_header: str) -> Pagination:
    previous_options: PageOptions | None = None
    next_options: PageOptions | None = None

    for entry in ENTRY_SEPARATOR.split(link_header):
        match = LINK_PATTERN.match(entry)
        if match is None:
            raise MalformedLinkError(f"Malformed Link entry: {entry.strip()!r}")

        url, rel = match.groups()
        options = _page_options_from_url(url)
        if rel == "next":
            next_options = options
        else:
            previous_options = options

    return Pagination(previous_page_options=previous_options, next_page_options=next_options)


def parse_link_header(link_header: str | None) -> Pagination:
    """Parse a ``Link`` header into a ``Pagination``.

    A missing or empty header means there are no adjacent pages. A header
    with any malformed entry (no angle brackets, no or unknown ``rel``,
    unparseable URL, no ``page_info``) is treated as absent as a whole; links
    are never partially applied.

    Args:
        link_header: Raw header value, or None.

    Returns:
        Pagination with the options found, or an empty Pagination.

    Example:
        >>> p = parse_link_header('<https://x.myshopify.com/admin/orders.json?page_info=abc&limit=2>; rel="next"')
        >>> p.next_page_options.page_info
        'abc'
    """
    if not link_header or not link_header.strip():
        return Pagination()

    try:
        return _parse_entries(link_header)
    except MalformedLinkError as e:
        logger.warning(
            "Ignoring malformed Link header",
            extra={"link_header": link_header, "reason": str(e)},
        )
        return Pagination()
