"""CLI entry point for the Shopify Admin client.

Provides a command-line interface to:
- Show the shop the credentials belong to
- Count resources, optionally filtered by creation date
- List resources as a Rich table, one page or every page
- Fetch a single resource as JSON
"""

import argparse
import json
import sys
from datetime import datetime
from typing import Any, Iterable

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table
from rich.text import Text

from shopify_admin.client import ShopifyClient
from shopify_admin.config import get_settings
from shopify_admin.errors import ShopifyError
from shopify_admin.logging_config import get_logger, setup_logging
from shopify_admin.options import CountOptions, ListOptions
from shopify_admin.resources import ResourceService

# Services reachable without a parent id
TOP_LEVEL_RESOURCES = (
    "orders",
    "customers",
    "products",
    "draft_orders",
    "webhooks",
    "locations",
    "inventory_items",
    "custom_collections",
    "smart_collections",
    "collects",
    "pages",
    "blogs",
    "application_charges",
    "shipping_zones",
)

# First attribute found is shown as the label column
LABEL_FIELDS = ("name", "title", "email", "topic", "sku", "key")


def _datetime_arg(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 date/time: {value!r}") from e


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        prog="shopify-admin",
        description="Query the Shopify Admin REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shopify-admin shop                              # Shop details
  shopify-admin count orders                      # Number of orders
  shopify-admin count orders --created-at-min 2024-01-01
  shopify-admin list products --limit 10          # First page of products
  shopify-admin list orders --all                 # Every order, following pages
  shopify-admin get orders 450789469              # One order as JSON
        """,
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("shop", help="Show the shop the credentials belong to")

    count_parser = subparsers.add_parser("count", help="Count resources")
    count_parser.add_argument("resource", choices=TOP_LEVEL_RESOURCES)
    count_parser.add_argument("--created-at-min", type=_datetime_arg)
    count_parser.add_argument("--created-at-max", type=_datetime_arg)

    list_parser = subparsers.add_parser("list", help="List resources")
    list_parser.add_argument("resource", choices=TOP_LEVEL_RESOURCES)
    list_parser.add_argument(
        "--limit",
        type=int,
        help="Page size, 1-250 (Shopify's default is 50)",
    )
    list_parser.add_argument("--created-at-min", type=_datetime_arg)
    list_parser.add_argument("--created-at-max", type=_datetime_arg)
    list_parser.add_argument(
        "--all",
        action="store_true",
        help="Follow pagination links until the last page",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a table",
    )

    get_parser = subparsers.add_parser("get", help="Fetch one resource as JSON")
    get_parser.add_argument("resource", choices=TOP_LEVEL_RESOURCES)
    get_parser.add_argument("id", type=int)

    return parser.parse_args(argv)


def create_progress() -> Progress:
    """Create a Rich progress display for page walking.

    Returns:
        Configured Progress instance.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=Console(stderr=True),
    )


def describe(item: Any) -> tuple[str, str, str]:
    """Pick the id, a human label and a timestamp out of any resource model."""
    label = ""
    for field_name in LABEL_FIELDS:
        value = getattr(item, field_name, None)
        if value:
            label = str(value)
            break

    timestamp = getattr(item, "created_at", None) or getattr(item, "updated_at", None)
    return (
        str(getattr(item, "id", "") or ""),
        label,
        timestamp.isoformat() if timestamp else "",
    )


def display_items_table(console: Console, resource: str, items: list[Any]) -> None:
    """Display resources as a table.

    Args:
        console: Rich console for output.
        resource: Resource name, used as the title.
        items: Decoded resource models.
    """
    if not items:
        console.print(f"[yellow]No {resource} found.[/yellow]")
        return

    title = resource.replace("_", " ").title()
    table = Table(title=f"[bold]{title}[/bold]", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=5)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Created", style="green")

    for idx, item in enumerate(items, 1):
        table.add_row(str(idx), *describe(item))

    console.print(table)


def display_shop(console: Console, client: ShopifyClient) -> None:
    shop = client.shop.get()
    if shop is None:
        console.print("[yellow]The API returned no shop.[/yellow]")
        return

    text = Text()
    for label, value in (
        ("Name", shop.name),
        ("Domain", shop.domain),
        ("Shopify domain", shop.myshopify_domain),
        ("Plan", shop.plan_display_name),
        ("Currency", shop.currency),
        ("Timezone", shop.iana_timezone),
        ("API version", client.api_version or "unversioned"),
    ):
        text.append(f"{label}: ", style="dim")
        text.append(f"{value or 'N/A'}\n", style="bold")

    limits = client.rate_limits
    if limits is not None and limits.bucket_size is not None:
        text.append("API calls: ", style="dim")
        text.append(f"{limits.request_count}/{limits.bucket_size}", style="bold")

    console.print(Panel(text, title="[bold]Shop[/bold]", border_style="blue"))


def collect_with_progress(service: ResourceService, options: ListOptions) -> list[Any]:
    """Walk every page of a resource with a progress display."""
    items: list[Any] = []

    with create_progress() as progress:
        task = progress.add_task("Fetching pages", total=None)
        for item in service.iter_all(options):
            items.append(item)
            progress.update(task, description=f"Fetched {len(items)} items")
        progress.update(task, description=f"[green]Complete: {len(items)} items[/green]")

    return items


def print_json(console: Console, items: Iterable[Any]) -> None:
    payload = [item.to_payload() for item in items]
    console.print_json(json.dumps(payload, default=str))


def run(args: argparse.Namespace, client: ShopifyClient, console: Console) -> int:
    """Execute the selected command against a ready client.

    Returns:
        Exit code.
    """
    if args.command == "shop":
        display_shop(console, client)
        return 0

    service: ResourceService = getattr(client, args.resource)

    if args.command == "count":
        if "count" not in service.operations:
            console.print(f"[yellow]{args.resource} cannot be counted.[/yellow]")
            return 1
        options = CountOptions(
            created_at_min=args.created_at_min,
            created_at_max=args.created_at_max,
        )
        console.print(service.count(options))
        return 0

    if args.command == "get":
        item = service.get(args.id)
        if item is None:
            console.print(f"[yellow]{args.resource} {args.id} not found.[/yellow]")
            return 1
        console.print_json(json.dumps(item.to_payload(), default=str))
        return 0

    list_options = ListOptions(
        limit=args.limit,
        created_at_min=args.created_at_min,
        created_at_max=args.created_at_max,
    )
    if args.all:
        items = collect_with_progress(service, list_options)
    else:
        items, pagination = service.list_with_pagination(list_options)
        if pagination.has_next:
            console.print("[dim]More pages available, use --all to fetch them.[/dim]")

    if args.json:
        print_json(console, items)
    else:
        display_items_table(console, args.resource, items)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)
    console = Console()

    try:
        settings = get_settings()
        log_level = "DEBUG" if args.verbose else settings.log_level
        setup_logging(log_level=log_level, log_format=settings.log_format)
        logger = get_logger(__name__)

        logger.debug("Running command", extra={"command": args.command})

        with ShopifyClient.from_settings(settings) as client:
            return run(args, client, console)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user.[/yellow]")
        return 130

    except ShopifyError as e:
        console.print(f"\n[bold red]Shopify error:[/bold red] {e}")
        if args.verbose:
            console.print_exception()
        return 1

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if args.verbose:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
