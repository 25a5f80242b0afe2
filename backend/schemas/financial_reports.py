from pydantic import BaseModel
from datetime import date
from typing import List


class ClosingStockLine(BaseModel):
    """Weighted-average valuation of one product line over the period."""
    product_line: str
    product_name: str
    unit: str
    purchased_quantity: float = 0.0
    purchase_cost: float = 0.0
    sold_quantity: float = 0.0
    remaining_quantity: float = 0.0
    average_unit_cost: float = 0.0
    closing_stock_value: float = 0.0


class ProfitLossSummary(BaseModel):
    total_revenue: float = 0.0
    milk_sales_retail: float = 0.0
    milk_sales_bulk: float = 0.0
    ghee_sales: float = 0.0
    pashu_aahar_sales: float = 0.0
    total_purchases: float = 0.0
    closing_stock_value: float = 0.0
    cost_of_goods_sold: float = 0.0
    cogs_milk: float = 0.0
    cogs_ghee: float = 0.0
    cogs_pashu_aahar: float = 0.0
    gross_profit: float = 0.0
    operating_expenses: float = 0.0
    net_profit_loss: float = 0.0
    period_days: int = 0


class PlChartDataPoint(BaseModel):
    # cogs uses period-average unit costs, not day-by-day stock costing
    date: str
    day: date
    revenue: float = 0.0
    purchases: float = 0.0
    cogs: float = 0.0
    net_profit: float = 0.0


class ProfitLossReport(BaseModel):
    summary: ProfitLossSummary
    closing_stock: List[ClosingStockLine]
    chart_series: List[PlChartDataPoint]
