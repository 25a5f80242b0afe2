from pydantic import BaseModel
from typing import Any, Optional
import enum
from schemas.common import Amount, Text, lenient_enum


class PartyType(str, enum.Enum):
    CUSTOMER = "Customer"
    SUPPLIER = "Supplier"
    EMPLOYEE = "Employee"


class Party(BaseModel):
    # Positive opening balance: the party owes the business.
    # Negative: the business owes the party.
    id: Optional[str] = None
    name: Text
    type: lenient_enum(PartyType, PartyType.CUSTOMER) = PartyType.CUSTOMER
    opening_balance: Amount = 0.0
    opening_balance_as_of_date: Any = None
    company_id: Optional[str] = None

    class Config:
        from_attributes = True
