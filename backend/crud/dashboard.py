import logging
from datetime import date
from typing import Dict, List, Optional

from crud.party_ledger import LEDGER_SOURCES_BY_NAME, opening_balance_date
from schemas.dashboard import ChartDataPoint, DailySummary, DashboardData
from schemas.parties import Party
from schemas.sales import SalePaymentType
from schemas.transactions import TransactionRecords
from utils.dates import day_label, days_in_range, parse_entry_date, period_bounds, to_day
from utils.formatting import round_currency, round_quantity
from utils.party_join import PartyNameResolver
from utils.product_lines import ProductLine, ProductLineClassifier
from utils.tenancy import belongs_to_tenant

logger = logging.getLogger(__name__)

_CURRENCY_FIELDS = (
    "milk_purchased_amount",
    "milk_sold_amount",
    "ghee_sales_amount",
    "pashu_aahar_sales_amount",
    "total_cash_in",
    "total_credit_out",
    "total_outstanding_amount",
)
_QUANTITY_FIELDS = ("milk_purchased_litres", "milk_sold_litres")


def empty_dashboard() -> DashboardData:
    return DashboardData(summary=DailySummary(), chart_series=[])


def _seed_party_balances(parties: List[Party], period_end) -> Dict[str, float]:
    # Opening balances count only when they were already in effect at the end
    # of the period: dues are reported "as of period end".
    balances = {}
    for party in parties:
        key = PartyNameResolver.key_for(party.name)
        if not key or key in balances:
            continue
        opening = party.opening_balance or 0.0
        balances[key] = opening if opening and opening_balance_date(party) <= period_end else 0.0
    return balances


def get_dashboard_summary(
    start_date: date,
    end_date: date,
    tenant_id: Optional[str],
    parties: List[Party],
    records: TransactionRecords,
) -> DashboardData:
    """
    Calculates the dashboard summary and daily chart series for a period.

    All record types are streamed once. Each record updates its day bucket,
    the category totals and, when its counterparty is a known party, that
    party's running balance. The party balances are summed into the net
    party dues figure (total_outstanding_amount).
    """
    if not tenant_id:
        logger.warning("Dashboard requested without a company id, returning an empty summary.")
        return empty_dashboard()
    if to_day(start_date) > to_day(end_date):
        logger.warning(f"Dashboard requested for an inverted period {start_date} to {end_date}, returning an empty summary.")
        return empty_dashboard()

    period_start, period_end = period_bounds(start_date, end_date)
    days = days_in_range(start_date, end_date)
    daily_aggregator = {day: {"purchased_value": 0.0, "sold_value": 0.0} for day in days}

    totals = {field: 0.0 for field in _CURRENCY_FIELDS + _QUANTITY_FIELDS}

    tenant_parties = [p for p in parties if belongs_to_tenant(p, tenant_id)]
    resolver = PartyNameResolver(tenant_parties)
    party_balances = _seed_party_balances(tenant_parties, period_end)

    classifier = ProductLineClassifier.from_purchases(
        p for p in records.purchases if belongs_to_tenant(p, tenant_id)
    )

    def in_period(source_name: str):
        source = LEDGER_SOURCES_BY_NAME[source_name]
        for entry in getattr(records, source.records_field):
            if not belongs_to_tenant(entry, tenant_id):
                continue
            entry_date = parse_entry_date(entry.date)
            if not period_start <= entry_date <= period_end:
                continue
            yield source, entry, entry_date

    def apply_to_party(source, entry):
        party = resolver.resolve(source.counterparty(entry))
        if party is None or not source.applies_to(party):
            return
        line = source.to_line(entry)
        party_balances[PartyNameResolver.key_for(party.name)] += line["credit"] - line["debit"]

    def add_cash_or_credit(entry, amount):
        if entry.payment_type == SalePaymentType.CASH:
            totals["total_cash_in"] += amount
        elif entry.payment_type == SalePaymentType.CREDIT:
            totals["total_credit_out"] += amount

    counts = {}

    for source, entry, entry_date in in_period("milk_collection"):
        totals["milk_purchased_litres"] += entry.quantity_ltr
        totals["milk_purchased_amount"] += entry.total_amount
        daily_aggregator[entry_date.date()]["purchased_value"] += entry.total_amount
        apply_to_party(source, entry)
        counts["milk_collections"] = counts.get("milk_collections", 0) + 1

    for source, entry, entry_date in in_period("sale"):
        amount = entry.total_amount
        line = classifier.classify(entry.unit, entry.product_name)
        if line == ProductLine.MILK:
            totals["milk_sold_litres"] += entry.quantity
            totals["milk_sold_amount"] += amount
        elif line == ProductLine.GHEE:
            totals["ghee_sales_amount"] += amount
        elif line == ProductLine.PASHU_AAHAR:
            totals["pashu_aahar_sales_amount"] += amount
        add_cash_or_credit(entry, amount)
        daily_aggregator[entry_date.date()]["sold_value"] += amount
        apply_to_party(source, entry)
        counts["sales"] = counts.get("sales", 0) + 1

    for source, entry, entry_date in in_period("bulk_sale"):
        totals["milk_sold_litres"] += entry.quantity_ltr
        totals["milk_sold_amount"] += entry.total_amount
        add_cash_or_credit(entry, entry.total_amount)
        daily_aggregator[entry_date.date()]["sold_value"] += entry.total_amount
        apply_to_party(source, entry)
        counts["bulk_sales"] = counts.get("bulk_sales", 0) + 1

    # Purchases and payments only move party balances.
    for source_name in ("purchase", "payment"):
        for source, entry, _ in in_period(source_name):
            apply_to_party(source, entry)
            counts[source.records_field] = counts.get(source.records_field, 0) + 1

    totals["total_outstanding_amount"] = sum(party_balances.values())

    summary = DailySummary(
        **{field: round_currency(totals[field]) for field in _CURRENCY_FIELDS},
        **{field: round_quantity(totals[field]) for field in _QUANTITY_FIELDS},
    )
    chart_series = [
        ChartDataPoint(
            date=day_label(day),
            day=day,
            purchased_value=round_currency(daily_aggregator[day]["purchased_value"]),
            sold_value=round_currency(daily_aggregator[day]["sold_value"]),
        )
        for day in days
    ]

    logger.info(f"Dashboard for tenant {tenant_id} from {start_date} to {end_date}: records in period {counts}, {len(chart_series)} chart points")
    return DashboardData(summary=summary, chart_series=chart_series)
