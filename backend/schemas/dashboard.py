from pydantic import BaseModel
from datetime import date
from typing import List


class DailySummary(BaseModel):
    milk_purchased_litres: float = 0.0
    milk_purchased_amount: float = 0.0
    milk_sold_litres: float = 0.0
    milk_sold_amount: float = 0.0
    ghee_sales_amount: float = 0.0
    pashu_aahar_sales_amount: float = 0.0
    total_cash_in: float = 0.0
    total_credit_out: float = 0.0
    # Net party dues as of the end of the period (positive: owed to the business)
    total_outstanding_amount: float = 0.0


class ChartDataPoint(BaseModel):
    date: str  # display label, e.g. "Oct 05"
    day: date
    purchased_value: float = 0.0
    sold_value: float = 0.0


class DashboardData(BaseModel):
    summary: DailySummary
    chart_series: List[ChartDataPoint]
