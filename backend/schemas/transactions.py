from pydantic import BaseModel
from typing import List
from schemas.milk_collections import MilkCollectionEntry
from schemas.parties import Party
from schemas.payments import PaymentEntry
from schemas.purchases import PurchaseEntry
from schemas.sales import BulkSaleEntry, SaleEntry


class TransactionRecords(BaseModel):
    """Already-fetched records of one company, one list per source collection."""
    milk_collections: List[MilkCollectionEntry] = []
    sales: List[SaleEntry] = []
    bulk_sales: List[BulkSaleEntry] = []
    purchases: List[PurchaseEntry] = []
    payments: List[PaymentEntry] = []


class PartyLedgerRequest(TransactionRecords):
    party: Party


class DashboardRequest(TransactionRecords):
    parties: List[Party] = []


class ProfitLossRequest(TransactionRecords):
    pass
