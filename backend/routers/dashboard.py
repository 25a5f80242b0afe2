from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from datetime import date
import logging
from schemas.dashboard import DashboardData
from schemas.transactions import DashboardRequest
from crud import dashboard as crud_dashboard
from utils.tenancy import get_tenant_id

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)
logger = logging.getLogger("dashboard")

@router.post("/summary", response_model=DashboardData)
def get_dashboard_summary(
    start_date: date,
    end_date: date,
    request: DashboardRequest,
    tenant_id: Optional[str] = Depends(get_tenant_id)
):
    """
    Summary totals and a per-day purchased/sold series for the period.
    total_outstanding_amount is the net of all party balances as of end_date.
    """
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="Start date cannot be after the end date")
    logger.info(f"Dashboard requested for tenant {tenant_id} from {start_date} to {end_date} with {len(request.parties)} parties")
    return crud_dashboard.get_dashboard_summary(
        start_date=start_date,
        end_date=end_date,
        tenant_id=tenant_id,
        parties=request.parties,
        records=request
    )
