"""Tests for the Supabase repositories against a mocked client.

``MagicMock`` returns the same child for every call on a chain, so the
query builder is stubbed through its attribute path.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import httpx
import pytest
from postgrest.exceptions import APIError

from insuite.application.views import DashboardView
from insuite.domain.exceptions import RemoteCallError
from insuite.domain.model.inventory import InventoryItem
from insuite.domain.model.sale import Sale
from insuite.domain.model.value_objects import Money, Quantity
from insuite.infrastructure.persistence.supabase_inventory_repository import (
    SupabaseInventoryRepository,
)
from insuite.infrastructure.persistence.supabase_sales_repository import (
    SupabaseSalesRepository,
)

WIDGET_ROW = {
    "id": 1,
    "product_name": "Widget",
    "quantity": 10,
    "price": 5.0,
    "cost": 2.0,
    "supplier_id": 1,
}


def _api_error(message="permission denied"):
    return APIError({"message": message, "code": "42501", "hint": None, "details": None})


@pytest.fixture
def client():
    return MagicMock()


class TestInventoryRepository:

    def test_list_orders_by_id(self, client):
        query = client.table.return_value
        query.select.return_value.order.return_value.execute.return_value.data = [WIDGET_ROW]

        items = SupabaseInventoryRepository(client).list_all()

        client.table.assert_called_with("inventory")
        query.select.assert_called_once_with("*")
        query.select.return_value.order.assert_called_once_with("id", desc=False)
        assert items[0].product_name == "Widget"
        assert items[0].price == Money.of("5")

    def test_missing_cost_and_supplier_get_defaults(self, client):
        row = {**WIDGET_ROW, "cost": None, "supplier_id": None}
        client.table.return_value.select.return_value.order.return_value.execute.return_value.data = [row]

        item = SupabaseInventoryRepository(client).list_all()[0]

        assert item.cost == Money.of(0)
        assert item.supplier_id == 1

    def test_rows_entered_elsewhere_are_read_as_stored(self, client):
        row = {**WIDGET_ROW, "id": 2, "price": -1.0, "cost": -0.5, "quantity": -3}
        client.table.return_value.select.return_value.order.return_value.execute.return_value.data = [
            WIDGET_ROW, row,
        ]

        items = SupabaseInventoryRepository(client).list_all()

        assert items[1].price.amount == Decimal("-1.0")
        assert items[1].cost.amount == Decimal("-0.5")
        assert items[1].quantity == -3

    def test_add_sends_row_and_returns_stored(self, client):
        insert = client.table.return_value.insert
        insert.return_value.execute.return_value.data = [WIDGET_ROW]
        item = InventoryItem.create("Widget", 10, Money.of("5.00"), Money.of("2.00"))

        stored = SupabaseInventoryRepository(client).add(item)

        insert.assert_called_once_with([{
            "product_name": "Widget",
            "quantity": 10,
            "price": 5.0,
            "cost": 2.0,
            "supplier_id": 1,
        }])
        assert stored.id == 1

    def test_add_without_returned_row_fails(self, client):
        client.table.return_value.insert.return_value.execute.return_value.data = []
        item = InventoryItem.create("Widget", 10, Money.of("5"), Money.of("2"))

        with pytest.raises(RemoteCallError, match="no rows"):
            SupabaseInventoryRepository(client).add(item)

    def test_set_quantity_updates_single_column(self, client):
        update = client.table.return_value.update

        SupabaseInventoryRepository(client).set_quantity(3, 7)

        update.assert_called_once_with({"quantity": 7})
        update.return_value.eq.assert_called_once_with("id", 3)

    def test_delete_filters_by_id(self, client):
        delete = client.table.return_value.delete

        SupabaseInventoryRepository(client).delete(4)

        delete.return_value.eq.assert_called_once_with("id", 4)

    def test_delete_all_uses_not_null_filter(self, client):
        delete = client.table.return_value.delete

        SupabaseInventoryRepository(client).delete_all()

        delete.return_value.not_.is_.assert_called_once_with("id", "null")

    def test_api_error_becomes_remote_call_error(self, client):
        client.table.return_value.select.return_value.order.return_value.execute.side_effect = (
            _api_error("permission denied for table inventory")
        )

        with pytest.raises(RemoteCallError, match="permission denied"):
            SupabaseInventoryRepository(client).list_all()

    def test_transport_error_becomes_remote_call_error(self, client):
        client.table.return_value.update.return_value.eq.return_value.execute.side_effect = (
            httpx.ConnectError("connection refused")
        )

        with pytest.raises(RemoteCallError, match="connection refused"):
            SupabaseInventoryRepository(client).set_quantity(1, 1)


class TestSalesRepository:

    def test_list_is_most_recent_first(self, client):
        order = client.table.return_value.select.return_value.order
        order.return_value.execute.return_value.data = [{
            "id": 2,
            "product_id": 1,
            "quantity": 3,
            "price": 5.0,
            "sale_date": "2024-03-01T10:00:00+00:00",
            "created_at": "2024-03-01T10:00:01+00:00",
        }]

        sales = SupabaseSalesRepository(client).list_all()

        client.table.assert_called_with("sales")
        order.assert_called_once_with("id", desc=True)
        assert sales[0].quantity == Quantity(3)
        assert sales[0].total.amount == Decimal("15")
        assert sales[0].sale_date.year == 2024

    def test_add_serializes_sale_date(self, client):
        insert = client.table.return_value.insert
        when = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
        insert.return_value.execute.return_value.data = [{
            "id": 9,
            "product_id": 1,
            "quantity": 2,
            "price": 5.0,
            "sale_date": when.isoformat(),
        }]
        sale = Sale(id=None, product_id=1, quantity=Quantity(2), price=Money.of("5.00"), sale_date=when)

        stored = SupabaseSalesRepository(client).add(sale)

        insert.assert_called_once_with([{
            "product_id": 1,
            "quantity": 2,
            "price": 5.0,
            "sale_date": "2024-03-01T10:00:00+00:00",
        }])
        assert stored.id == 9
        assert stored.created_at is None

    def test_delete_all_failure(self, client):
        client.table.return_value.delete.return_value.not_.is_.return_value.execute.side_effect = (
            _api_error("row level security")
        )

        with pytest.raises(RemoteCallError, match="row level security"):
            SupabaseSalesRepository(client).delete_all()

    def test_zero_quantity_and_negative_price_rows_still_reduce(self, client):
        sales_rows = [
            {"id": 2, "product_id": 1, "quantity": 0, "price": 5.0,
             "sale_date": "2024-03-02T10:00:00+00:00"},
            {"id": 1, "product_id": 1, "quantity": 2, "price": -1.0,
             "sale_date": "2024-03-01T10:00:00+00:00"},
        ]

        def table(name):
            query = MagicMock()
            rows = sales_rows if name == "sales" else [WIDGET_ROW]
            query.select.return_value.order.return_value.execute.return_value.data = rows
            return query

        client.table.side_effect = table
        view = DashboardView(SupabaseSalesRepository(client), SupabaseInventoryRepository(client))

        assert view.refresh()
        assert view.summary.items_sold == 2
        assert view.summary.total_sales == Decimal("-2.0")
        assert view.summary.profit == Decimal("-4.0")
