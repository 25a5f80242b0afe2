from pydantic import BaseModel
from typing import Any, Optional
import enum
from schemas.common import Amount, lenient_enum
from schemas.parties import PartyType


class PaymentDirection(str, enum.Enum):
    RECEIVED = "Received"
    PAID = "Paid"


class PaymentMode(str, enum.Enum):
    CASH = "Cash"
    BANK = "Bank"
    UPI = "UPI"


class PaymentEntry(BaseModel):
    id: Optional[str] = None
    date: Any = None
    type: lenient_enum(PaymentDirection, PaymentDirection.RECEIVED) = PaymentDirection.RECEIVED
    party_name: Optional[str] = None
    party_type: lenient_enum(PartyType, None) = None
    amount: Amount = 0.0
    mode: lenient_enum(PaymentMode, PaymentMode.CASH) = PaymentMode.CASH
    notes: Optional[str] = None
    company_id: Optional[str] = None

    class Config:
        from_attributes = True
