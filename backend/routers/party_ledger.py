from fastapi import APIRouter, Depends
from typing import Optional
import logging
from schemas.ledgers import PartyLedger
from schemas.transactions import PartyLedgerRequest
from crud import party_ledger as crud_party_ledger
from utils.tenancy import get_tenant_id

router = APIRouter(prefix="/party-ledger", tags=["Party Ledger"])
logger = logging.getLogger("party_ledger")

@router.post("/", response_model=PartyLedger)
def get_party_ledger(request: PartyLedgerRequest, tenant_id: Optional[str] = Depends(get_tenant_id)):
    logger.info(f"Ledger requested for party '{request.party.name}' for tenant {tenant_id}")
    return crud_party_ledger.get_party_ledger(party=request.party, records=request, tenant_id=tenant_id)
