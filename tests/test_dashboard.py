"""Tests for the dashboard figures."""

from datetime import date, datetime, timezone
from decimal import Decimal

from slipsync.reports import (
    InventoryEntry,
    OrderRecord,
    build_dashboard,
    count_low_stock,
    filter_today,
    sum_revenue,
)

TODAY = date(2024, 6, 15)


def _orders() -> list:
    return [
        OrderRecord(id="1", placed_at="2024-06-15T08:00:00Z", total_amount="25.50"),
        OrderRecord(id="2", placed_at="2024-06-15T21:45:00Z", total_amount=10),
        OrderRecord(id="3", placed_at="2024-06-14T23:59:59Z", total_amount=99),
        OrderRecord(id="4", placed_at=None, total_amount=5),
        OrderRecord(id="5", placed_at="2024-06-15T12:00:00Z", total_amount=None),
    ]


class TestOrderRecord:
    def test_from_dict(self) -> None:
        record = OrderRecord.from_dict(
            {"id": 7, "placedAt": "2024-01-01T10:00Z", "totalAmount": "50", "currency": "USD"}
        )
        assert record.id == "7"
        assert record.placed_at == "2024-01-01T10:00Z"
        assert record.total_amount == "50"
        assert record.currency == "USD"

    def test_revenue_falls_back_to_subtotal(self) -> None:
        """A missing or zero total uses the subtotal for revenue."""
        assert OrderRecord(id="a", total_amount=None, subtotal="12").revenue() == Decimal("12")
        assert OrderRecord(id="b", total_amount="0", subtotal=3).revenue() == Decimal("3")
        assert OrderRecord(id="c", total_amount="8", subtotal=3).revenue() == Decimal("8")
        assert OrderRecord(id="d").revenue() == Decimal("0")


class TestFilterToday:
    def test_matches_date_prefix(self) -> None:
        """Only orders whose timestamp starts with the reference date are kept; null timestamps are excluded."""
        todays = filter_today(_orders(), TODAY)
        assert [o.id for o in todays] == ["1", "2", "5"]

    def test_accepts_datetime_reference(self) -> None:
        todays = filter_today(_orders(), datetime(2024, 6, 14, 9, 0, tzinfo=timezone.utc))
        assert [o.id for o in todays] == ["3"]

    def test_empty(self) -> None:
        assert filter_today([], TODAY) == []


class TestSumRevenue:
    def test_normalizes_amounts(self) -> None:
        """String, number and null totals are summed with parse-or-zero coercion."""
        orders = [
            OrderRecord(id="1", total_amount="25.50"),
            OrderRecord(id="2", total_amount=10),
            OrderRecord(id="3", total_amount=None),
            OrderRecord(id="4", total_amount="oops"),
        ]
        assert sum_revenue(orders) == Decimal("35.50")

    def test_empty_is_zero(self) -> None:
        assert sum_revenue([]) == 0


class TestCountLowStock:
    def test_example(self) -> None:
        """Entries at or below a set reorder point count; a null reorder point never does."""
        inventory = [
            InventoryEntry(quantity=5, reorder_point=10),
            InventoryEntry(quantity=5, reorder_point=None),
            InventoryEntry(quantity=2, reorder_point=2),
        ]
        assert count_low_stock(inventory) == 2

    def test_above_reorder_point(self) -> None:
        assert count_low_stock([InventoryEntry(quantity=11, reorder_point=10)]) == 0

    def test_from_dict(self) -> None:
        entries = [
            InventoryEntry.from_dict({"quantity": 0, "reorderPoint": 0}),
            InventoryEntry.from_dict({"quantity": 3, "reorderPoint": None}),
            InventoryEntry.from_dict({"quantity": "4", "reorderPoint": "5"}),
        ]
        assert [e.is_low_stock() for e in entries] == [True, False, True]


class TestBuildDashboard:
    def test_combines_cards(self) -> None:
        summary = build_dashboard(
            _orders(),
            [InventoryEntry(quantity=1, reorder_point=3), InventoryEntry(quantity=9, reorder_point=3)],
            TODAY,
        )
        assert summary.orders_today == 3
        assert summary.revenue_today == Decimal("35.50")
        assert summary.low_stock_items == 1
