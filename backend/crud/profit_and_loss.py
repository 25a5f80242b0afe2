"""
Profit & loss for an arbitrary period, with weighted-average closing stock.

No stock is carried over from before the period: each product line's closing
stock is what was bought in the period and not sold in it, valued at the
period's average purchase cost.

The daily chart applies those same period-average unit costs to each day's
sold quantity. It is an approximation for charting only; the summary is the
authoritative figure.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from schemas.financial_reports import ClosingStockLine, PlChartDataPoint, ProfitLossReport, ProfitLossSummary
from schemas.transactions import TransactionRecords
from utils.dates import day_label, days_in_range, parse_entry_date, period_bounds, to_day
from utils.formatting import round_currency, round_quantity
from utils.product_lines import ProductLine, ProductLineClassifier, normalize_name
from utils.tenancy import belongs_to_tenant

logger = logging.getLogger(__name__)


@dataclass
class StockAccumulator:
    product_line: ProductLine
    product_name: str
    unit: str
    purchased_quantity: float = 0.0
    purchase_cost: float = 0.0
    sold_quantity: float = 0.0

    @property
    def average_unit_cost(self) -> float:
        if self.purchased_quantity <= 0:
            return 0.0
        return self.purchase_cost / self.purchased_quantity

    @property
    def remaining_quantity(self) -> float:
        return max(0.0, self.purchased_quantity - self.sold_quantity)

    @property
    def closing_stock_value(self) -> float:
        return self.remaining_quantity * self.average_unit_cost

    @property
    def cost_of_goods_sold(self) -> float:
        return self.purchase_cost - self.closing_stock_value

    def to_schema(self) -> ClosingStockLine:
        return ClosingStockLine(
            product_line=self.product_line.value,
            product_name=self.product_name,
            unit=self.unit,
            purchased_quantity=round_quantity(self.purchased_quantity),
            purchase_cost=round_currency(self.purchase_cost),
            sold_quantity=round_quantity(self.sold_quantity),
            remaining_quantity=round_quantity(self.remaining_quantity),
            average_unit_cost=round_currency(self.average_unit_cost),
            closing_stock_value=round_currency(self.closing_stock_value),
        )


@dataclass
class DayBucket:
    revenue: float = 0.0
    purchases: float = 0.0
    milk_sold: float = 0.0
    ghee_sold: float = 0.0
    feed_sold: Dict[str, float] = field(default_factory=lambda: defaultdict(float))


def empty_profit_and_loss() -> ProfitLossReport:
    return ProfitLossReport(summary=ProfitLossSummary(), closing_stock=[], chart_series=[])


def get_profit_and_loss(
    start_date: date,
    end_date: date,
    tenant_id: Optional[str],
    records: TransactionRecords,
) -> ProfitLossReport:
    if not tenant_id:
        logger.warning("Profit & loss requested without a company id, returning an empty report.")
        return empty_profit_and_loss()
    if to_day(start_date) > to_day(end_date):
        logger.warning(f"Profit & loss requested for an inverted period {start_date} to {end_date}, returning an empty report.")
        return empty_profit_and_loss()

    period_start, period_end = period_bounds(start_date, end_date)
    days = days_in_range(start_date, end_date)
    daily_aggregator = {day: DayBucket() for day in days}

    def in_period(entries):
        for entry in entries:
            if not belongs_to_tenant(entry, tenant_id):
                continue
            entry_date = parse_entry_date(entry.date)
            if period_start <= entry_date <= period_end:
                yield entry, daily_aggregator[entry_date.date()]

    # 1. Discovery: feed product names come from feed-category purchases
    classifier = ProductLineClassifier.from_purchases(
        p for p in records.purchases if belongs_to_tenant(p, tenant_id)
    )

    # 2. Aggregation
    revenue = defaultdict(float)
    milk = StockAccumulator(ProductLine.MILK, "Milk", "Ltr")
    ghee = StockAccumulator(ProductLine.GHEE, "Ghee", "Kg")
    feed: Dict[str, StockAccumulator] = {}

    def feed_stock(product_name: str) -> StockAccumulator:
        key = normalize_name(product_name)
        if key not in feed:
            feed[key] = StockAccumulator(ProductLine.PASHU_AAHAR, product_name.strip(), "Bags")
        return feed[key]

    for entry, bucket in in_period(records.sales):
        amount = entry.total_amount
        revenue["total"] += amount
        bucket.revenue += amount
        line = classifier.classify(entry.unit, entry.product_name)
        if line == ProductLine.MILK:
            revenue["milk_retail"] += amount
            milk.sold_quantity += entry.quantity
            bucket.milk_sold += entry.quantity
        elif line == ProductLine.GHEE:
            revenue["ghee"] += amount
            ghee.sold_quantity += entry.quantity
            bucket.ghee_sold += entry.quantity
        elif line == ProductLine.PASHU_AAHAR:
            revenue["pashu_aahar"] += amount
            feed_stock(entry.product_name).sold_quantity += entry.quantity
            bucket.feed_sold[normalize_name(entry.product_name)] += entry.quantity

    for entry, bucket in in_period(records.bulk_sales):
        revenue["total"] += entry.total_amount
        revenue["milk_bulk"] += entry.total_amount
        bucket.revenue += entry.total_amount
        milk.sold_quantity += entry.quantity_ltr
        bucket.milk_sold += entry.quantity_ltr

    for entry, bucket in in_period(records.milk_collections):
        milk.purchased_quantity += entry.quantity_ltr
        milk.purchase_cost += entry.total_amount
        bucket.purchases += entry.total_amount

    for entry, bucket in in_period(records.purchases):
        line = classifier.classify_purchase(entry.category, entry.unit, entry.product_name)
        if line == ProductLine.GHEE:
            stock = ghee
        elif line == ProductLine.PASHU_AAHAR:
            stock = feed_stock(entry.product_name or "Unknown Pashu Aahar")
        else:
            logger.debug(f"Purchase {entry.id!r} ({entry.category}/{entry.product_name}) is not a stocked product line, skipped.")
            continue
        stock.purchased_quantity += entry.quantity
        stock.purchase_cost += entry.total_amount
        bucket.purchases += entry.total_amount

    # 3. Closing stock at weighted-average cost
    feed_lines = sorted(feed.values(), key=lambda s: s.product_name.lower())
    stock_lines: List[StockAccumulator] = [milk, ghee] + feed_lines

    total_purchases = sum(s.purchase_cost for s in stock_lines)
    total_closing_stock = sum(s.closing_stock_value for s in stock_lines)

    # 4. Summary
    cost_of_goods_sold = total_purchases - total_closing_stock
    gross_profit = revenue["total"] - cost_of_goods_sold
    # Expenses are not tracked yet.
    operating_expenses = 0.0
    net_profit_loss = gross_profit - operating_expenses

    summary = ProfitLossSummary(
        total_revenue=round_currency(revenue["total"]),
        milk_sales_retail=round_currency(revenue["milk_retail"]),
        milk_sales_bulk=round_currency(revenue["milk_bulk"]),
        ghee_sales=round_currency(revenue["ghee"]),
        pashu_aahar_sales=round_currency(revenue["pashu_aahar"]),
        total_purchases=round_currency(total_purchases),
        closing_stock_value=round_currency(total_closing_stock),
        cost_of_goods_sold=round_currency(cost_of_goods_sold),
        cogs_milk=round_currency(milk.cost_of_goods_sold),
        cogs_ghee=round_currency(ghee.cost_of_goods_sold),
        cogs_pashu_aahar=round_currency(sum(s.cost_of_goods_sold for s in feed_lines)),
        gross_profit=round_currency(gross_profit),
        operating_expenses=round_currency(operating_expenses),
        net_profit_loss=round_currency(net_profit_loss),
        period_days=len(days),
    )

    # 5. Daily series, costed with the period-average unit costs
    chart_series = []
    for day in days:
        bucket = daily_aggregator[day]
        daily_cogs = bucket.milk_sold * milk.average_unit_cost + bucket.ghee_sold * ghee.average_unit_cost
        for key, quantity in bucket.feed_sold.items():
            daily_cogs += quantity * feed[key].average_unit_cost
        chart_series.append(PlChartDataPoint(
            date=day_label(day),
            day=day,
            revenue=round_currency(bucket.revenue),
            purchases=round_currency(bucket.purchases),
            cogs=round_currency(daily_cogs),
            net_profit=round_currency(bucket.revenue - daily_cogs),
        ))

    logger.info(f"Profit & loss for tenant {tenant_id} from {start_date} to {end_date}: revenue {summary.total_revenue}, COGS {summary.cost_of_goods_sold}, net {summary.net_profit_loss}")
    return ProfitLossReport(
        summary=summary,
        closing_stock=[s.to_schema() for s in stock_lines],
        chart_series=chart_series,
    )
