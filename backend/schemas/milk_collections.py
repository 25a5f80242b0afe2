from pydantic import BaseModel
from typing import Any, Optional
import enum
from schemas.common import Amount, lenient_enum


class Shift(str, enum.Enum):
    MORNING = "Morning"
    EVENING = "Evening"


class MilkCollectionEntry(BaseModel):
    id: Optional[str] = None
    date: Any = None
    shift: lenient_enum(Shift, Shift.MORNING) = Shift.MORNING
    customer_name: Optional[str] = None
    quantity_ltr: Amount = 0.0
    fat_percentage: Amount = 0.0
    rate_per_ltr: Amount = 0.0
    total_amount: Amount = 0.0
    # Amount owed to the supplier after deductions; None means total_amount
    net_amount_payable: Optional[Amount] = None
    company_id: Optional[str] = None

    class Config:
        from_attributes = True

    @property
    def amount_payable(self) -> float:
        if self.net_amount_payable is None:
            return self.total_amount
        return self.net_amount_payable
