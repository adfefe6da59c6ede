"""Dashboard reporting step definitions."""

from datetime import date
from decimal import Decimal

from pytest_bdd import scenarios, given, when, then, parsers

from slipsync.helpers import parse_timestamp
from slipsync.reports import InventoryEntry, OrderRecord, build_daily_series, build_dashboard, series_totals

# Link to feature file
scenarios("../../../features/dashboard_reporting.feature")


def _orders(context):
    return context.setdefault("orders", [])


def _inventory(context):
    return context.setdefault("inventory", [])


# --- Given steps ---


@given(parsers.parse('the reporting clock reads "{iso}"'))
def given_clock(context, iso):
    context["now"] = parse_timestamp(iso)


@given(parsers.parse('an order "{order_id}" placed at "{placed_at}" totalling "{amount}"'))
def given_order(context, order_id, placed_at, amount):
    _orders(context).append(OrderRecord(id=order_id, placed_at=placed_at, total_amount=amount))


@given(parsers.parse("an inventory entry with {quantity:d} on hand and reorder point {reorder_point:d}"))
def given_inventory_with_reorder_point(context, quantity, reorder_point):
    _inventory(context).append(InventoryEntry(quantity=quantity, reorder_point=reorder_point))


@given(parsers.parse("an inventory entry with {quantity:d} on hand and no reorder point"))
def given_inventory_without_reorder_point(context, quantity):
    _inventory(context).append(InventoryEntry(quantity=quantity, reorder_point=None))


# --- When steps ---


@when(parsers.parse("the {window_days:d} day revenue series is built"))
def when_series_built(context, window_days):
    context["series"] = build_daily_series(_orders(context), window_days, context["now"])


@when("the dashboard is built")
def when_dashboard_built(context):
    context["dashboard"] = build_dashboard(_orders(context), _inventory(context), context["now"])


# --- Then steps ---


@then(parsers.parse("the series has {count:d} buckets"))
def then_bucket_count(context, count):
    assert len(context["series"]) == count


@then(parsers.parse('the bucket for "{day}" has revenue "{revenue}" from {count:d} orders'))
def then_bucket(context, day, revenue, count):
    buckets = {bucket.date: bucket for bucket in context["series"]}
    bucket = buckets[date.fromisoformat(day)]
    assert bucket.revenue == Decimal(revenue)
    assert bucket.order_count == count


@then(parsers.parse('the window totals are "{revenue}" from {count:d} orders'))
def then_window_totals(context, revenue, count):
    totals = series_totals(context["series"])
    assert totals.total_revenue == Decimal(revenue)
    assert totals.total_orders == count


@then(parsers.parse("{count:d} items are low on stock"))
def then_low_stock(context, count):
    assert context["dashboard"].low_stock_items == count


@then(parsers.parse('{count:d} orders were placed today for revenue "{revenue}"'))
def then_today_cards(context, count, revenue):
    dashboard = context["dashboard"]
    assert dashboard.orders_today == count
    assert dashboard.revenue_today == Decimal(revenue)
