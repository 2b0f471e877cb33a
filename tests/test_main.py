"""Tests for the command-line interface."""

import json

import pytest
from rich.console import Console

from conftest import BASE_URL, make_response, requested
from shopify_admin.main import TOP_LEVEL_RESOURCES, describe, main, parse_args, run
from shopify_admin.models import Order


@pytest.fixture
def console():
    return Console(record=True, width=120, force_terminal=False)


class TestParseArgs:
    """Tests for argument parsing."""

    def test_count_with_filter(self):
        args = parse_args(["count", "orders", "--created-at-min", "2016-01-01T00:00:00Z"])

        assert args.command == "count"
        assert args.resource == "orders"
        assert args.created_at_min.isoformat() == "2016-01-01T00:00:00+00:00"

    def test_list_flags(self):
        args = parse_args(["-v", "list", "products", "--limit", "10", "--all", "--json"])

        assert args.verbose
        assert args.limit == 10
        assert args.all
        assert args.json

    def test_unknown_resource_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["list", "widgets"])

    def test_bad_date_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["count", "orders", "--created-at-min", "yesterday"])

    def test_nested_resources_are_not_offered(self):
        assert "customer_addresses" not in TOP_LEVEL_RESOURCES
        assert "assets" not in TOP_LEVEL_RESOURCES


class TestRun:
    """Tests for command execution against a mocked session."""

    def test_shop(self, client, session, console):
        session.request.return_value = make_response(
            200,
            {"shop": {"name": "Apple Computers", "currency": "USD"}},
            headers={"X-Shopify-Shop-Api-Call-Limit": "1/40"},
        )

        assert run(parse_args(["shop"]), client, console) == 0

        output = console.export_text()
        assert "Apple Computers" in output
        assert "USD" in output
        assert "1/40" in output

    def test_count(self, client, session, console):
        session.request.return_value = make_response(200, {"count": 5})

        assert run(parse_args(["count", "orders"]), client, console) == 0

        assert console.export_text().strip() == "5"
        assert requested(session)[1] == f"{BASE_URL}/orders/count.json"

    def test_count_unsupported_resource(self, client, session, console):
        assert run(parse_args(["count", "inventory_items"]), client, console) == 1

        assert "cannot be counted" in console.export_text()
        session.request.assert_not_called()

    def test_list_table_hints_at_more_pages(self, client, session, console):
        session.request.return_value = make_response(
            200,
            {"orders": [{"id": 450789469, "name": "#1001", "created_at": "2008-01-10T11:00:00-05:00"}]},
            headers={"Link": f'<{BASE_URL}/orders.json?page_info=abc>; rel="next"'},
        )

        assert run(parse_args(["list", "orders", "--limit", "1"]), client, console) == 0

        output = console.export_text()
        assert "#1001" in output
        assert "450789469" in output
        assert "--all" in output

    def test_list_all_as_json(self, client, session, console):
        session.request.side_effect = [
            make_response(
                200,
                {"webhooks": [{"id": 1, "topic": "orders/create"}]},
                headers={"Link": f'<{BASE_URL}/webhooks.json?page_info=p2>; rel="next"'},
            ),
            make_response(200, {"webhooks": [{"id": 2, "topic": "orders/paid"}]}),
        ]

        assert run(parse_args(["list", "webhooks", "--all", "--json"]), client, console) == 0

        data = json.loads(console.export_text())
        assert [w["id"] for w in data] == [1, 2]

    def test_list_empty(self, client, session, console):
        session.request.return_value = make_response(200, {"pages": []})

        run(parse_args(["list", "pages"]), client, console)

        assert "No pages found" in console.export_text()

    def test_get(self, client, session, console):
        session.request.return_value = make_response(200, {"order": {"id": 1, "name": "#1001"}})

        assert run(parse_args(["get", "orders", "1"]), client, console) == 0

        assert json.loads(console.export_text()) == {"id": 1, "name": "#1001"}

    def test_get_missing(self, client, session, console):
        session.request.return_value = make_response(200, {"order": None})
        assert run(parse_args(["get", "orders", "1"]), client, console) == 1


class TestMain:
    """Tests for the process entry point."""

    def test_missing_settings_exit_with_error(self, monkeypatch, tmp_path):
        monkeypatch.delenv("SHOPIFY_SHOP_NAME", raising=False)
        monkeypatch.chdir(tmp_path)

        assert main(["shop"]) == 1


def test_describe_picks_label_and_timestamp():
    order = Order.model_validate(
        {"id": 7, "email": "bob@example.com", "created_at": "2024-01-01T00:00:00Z"}
    )

    assert describe(order) == ("7", "bob@example.com", "2024-01-01T00:00:00+00:00")
