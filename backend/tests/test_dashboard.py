from datetime import date

import pytest

from conftest import TENANT, day
from crud.dashboard import get_dashboard_summary


@pytest.fixture()
def mixed_records(make_records, milk_collection, sale, bulk_sale, purchase):
    return make_records(
        milk_collections=[milk_collection(day(1), quantity_ltr=10, total_amount=400)],
        sales=[
            sale(day(2), product_name="Milk", unit="Ltr", quantity=5, total_amount=250, payment_type="Cash"),
            sale(day(2), product_name="Ghee", unit="Kg", quantity=1, total_amount=600, payment_type="Credit"),
            sale(day(2), product_name="Paneer", unit="Kg", quantity=1, total_amount=300, payment_type="Cash"),
            sale(day(3), product_name="Gold Coin Feed", unit="Bags", quantity=2, total_amount=1800, payment_type="Credit"),
        ],
        bulk_sales=[bulk_sale(day(3), quantity_ltr=100, total_amount=4500, payment_type="Credit")],
        purchases=[purchase(day(1), category="Pashu Aahar", product_name="Gold Coin Feed", total_amount=1500)],
    )


def test_category_totals(mixed_records):
    data = get_dashboard_summary(date(2024, 3, 1), date(2024, 3, 3), TENANT, [], mixed_records)
    summary = data.summary

    assert summary.milk_purchased_litres == 10.0
    assert summary.milk_purchased_amount == 400.0
    assert summary.milk_sold_litres == 105.0
    assert summary.milk_sold_amount == 4750.0
    assert summary.ghee_sales_amount == 600.0
    assert summary.pashu_aahar_sales_amount == 1800.0
    assert summary.total_cash_in == 550.0
    assert summary.total_credit_out == 6900.0
    assert summary.total_outstanding_amount == 0.0


def test_chart_series_per_day(mixed_records):
    data = get_dashboard_summary(date(2024, 3, 1), date(2024, 3, 3), TENANT, [], mixed_records)

    assert [p.date for p in data.chart_series] == ["Mar 01", "Mar 02", "Mar 03"]
    assert [p.purchased_value for p in data.chart_series] == [400.0, 0.0, 0.0]
    assert [p.sold_value for p in data.chart_series] == [0.0, 1150.0, 6300.0]


def test_chart_series_is_dense_across_empty_days(make_records, sale):
    records = make_records(sales=[sale(day(1), total_amount=10)])

    data = get_dashboard_summary(date(2024, 2, 27), date(2024, 3, 2), TENANT, [], records)

    assert [p.day for p in data.chart_series] == [
        date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1), date(2024, 3, 2),
    ]
    assert [p.sold_value for p in data.chart_series] == [0.0, 0.0, 0.0, 10.0, 0.0]


def test_single_day_period(make_records, sale):
    records = make_records(sales=[sale(day(5, hour=0)), sale(day(5, hour=23))])

    data = get_dashboard_summary(date(2024, 3, 5), date(2024, 3, 5), TENANT, [], records)

    assert len(data.chart_series) == 1
    assert data.chart_series[0].sold_value == 100.0


def test_records_outside_period_or_tenant_are_ignored(make_records, sale, milk_collection):
    records = make_records(
        sales=[
            sale(day(9), total_amount=999),
            sale(day(2), total_amount=10, company_id="another-company"),
            sale(day(2), total_amount=20, company_id=TENANT),
        ],
        milk_collections=[milk_collection(date(2024, 2, 29), total_amount=77)],
    )

    data = get_dashboard_summary(date(2024, 3, 1), date(2024, 3, 3), TENANT, [], records)

    assert data.summary.total_cash_in == 20.0
    assert data.summary.milk_purchased_amount == 0.0


def test_party_dues_as_of_period_end(make_party, make_records, milk_collection, sale, purchase, payment):
    parties = [
        make_party("Ramesh", type="Customer", opening_balance=1000, as_of=day(1)),
        # not yet in effect at the end of the period
        make_party("Feed Supplier", type="Supplier", opening_balance=-500, as_of=day(20)),
    ]
    records = make_records(
        sales=[sale(day(2), customer_name="Ramesh", total_amount=200), sale(day(10), customer_name="Ramesh", total_amount=999)],
        milk_collections=[milk_collection(day(2), customer_name="Ramesh", total_amount=400)],
        payments=[payment(day(3), party_name="Ramesh", amount=100), payment(day(3), party_name="Nobody", amount=5000)],
        purchases=[purchase(day(3), supplier_name="Feed Supplier", total_amount=1000)],
    )

    data = get_dashboard_summary(date(2024, 3, 1), date(2024, 3, 3), TENANT, parties, records)

    # Ramesh: 1000 + 200 - 400 - 100, Feed Supplier: -1000
    assert data.summary.total_outstanding_amount == -300.0


def test_party_without_opening_date_counts_its_opening_balance(make_party, make_records):
    parties = [make_party("Ramesh", opening_balance=250)]

    data = get_dashboard_summary(date(2024, 3, 1), date(2024, 3, 3), TENANT, parties, make_records())

    assert data.summary.total_outstanding_amount == 250.0


def test_missing_tenant_returns_empty_summary(mixed_records):
    data = get_dashboard_summary(date(2024, 3, 1), date(2024, 3, 3), None, [], mixed_records)

    assert data.chart_series == []
    assert data.summary.milk_sold_amount == 0.0


def test_inverted_period_returns_empty_summary(mixed_records):
    data = get_dashboard_summary(date(2024, 3, 3), date(2024, 3, 1), TENANT, [], mixed_records)

    assert data.chart_series == []
    assert data.summary.total_cash_in == 0.0
