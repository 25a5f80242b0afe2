from pydantic import BaseModel
from typing import Any, Optional
from schemas.common import Amount, Text
from schemas.sales import PaymentTypeField


class PurchaseEntry(BaseModel):
    id: Optional[str] = None
    date: Any = None
    category: Text = ""  # e.g. "Ghee", "Pashu Aahar"
    product_name: Text = ""
    supplier_name: Optional[str] = None
    quantity: Amount = 0.0
    unit: Text = ""
    price_per_unit: Amount = 0.0
    total_amount: Amount = 0.0
    payment_type: PaymentTypeField = None
    company_id: Optional[str] = None

    class Config:
        from_attributes = True
