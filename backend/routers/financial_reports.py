from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from datetime import date
import logging
from schemas.financial_reports import ProfitLossReport
from schemas.transactions import ProfitLossRequest
from crud import profit_and_loss as crud_profit_and_loss
from utils.tenancy import get_tenant_id

router = APIRouter(
    prefix="/financial-reports",
    tags=["Financial Reports"],
)
logger = logging.getLogger("financial_reports")

@router.post("/profit-and-loss", response_model=ProfitLossReport)
def get_profit_and_loss(
    start_date: date,
    end_date: date,
    records: ProfitLossRequest,
    tenant_id: Optional[str] = Depends(get_tenant_id)
):
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="Start date cannot be after the end date")
    logger.info(f"Profit & loss requested for tenant {tenant_id} from {start_date} to {end_date}")
    return crud_profit_and_loss.get_profit_and_loss(
        start_date=start_date,
        end_date=end_date,
        tenant_id=tenant_id,
        records=records
    )
