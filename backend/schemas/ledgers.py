from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from schemas.parties import PartyType


# Party Ledger
# balance is what the party owes the business after the entry:
# balance = previous balance + credit - debit
class PartyLedgerEntry(BaseModel):
    date: datetime
    source: str  # opening_balance, milk_collection, sale, bulk_sale, purchase, payment
    reference_id: Optional[str] = None
    description: str
    milk_quantity_ltr: Optional[float] = None
    fat_percentage: Optional[float] = None
    rate: Optional[float] = None
    debit: float = 0.0
    credit: float = 0.0
    balance: float


class PartyLedger(BaseModel):
    title: str
    party_id: Optional[str] = None
    party_name: str
    party_type: PartyType
    opening_balance: float
    entries: List[PartyLedgerEntry]
    total_debit: float
    total_credit: float
    closing_balance: float
    closing_balance_display: str
