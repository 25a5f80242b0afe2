from pydantic import BaseModel
from typing import Any, Optional
import enum
from schemas.common import Amount, Text, lenient_enum


class SalePaymentType(str, enum.Enum):
    CASH = "Cash"
    CREDIT = "Credit"


# Unknown payment types count as neither cash nor credit.
PaymentTypeField = lenient_enum(SalePaymentType, None)


class SaleEntry(BaseModel):
    id: Optional[str] = None
    date: Any = None
    customer_name: Optional[str] = None
    product_name: Text = ""
    quantity: Amount = 0.0
    unit: Text = ""  # "Ltr", "Kg" or "Bags"
    rate: Amount = 0.0
    total_amount: Amount = 0.0
    payment_type: PaymentTypeField = None
    company_id: Optional[str] = None

    class Config:
        from_attributes = True


class BulkSaleEntry(BaseModel):
    """Milk sold in bulk (always litres of milk)."""
    id: Optional[str] = None
    date: Any = None
    customer_name: Optional[str] = None
    quantity_ltr: Amount = 0.0
    fat_percentage: Amount = 0.0
    rate: Amount = 0.0
    total_amount: Amount = 0.0
    payment_type: PaymentTypeField = None
    company_id: Optional[str] = None

    class Config:
        from_attributes = True
