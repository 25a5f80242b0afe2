import os
import pathlib
import sys
import tempfile
from datetime import datetime

import pytest


BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_ROOT))

os.environ.setdefault("DAIRY_TIMEZONE", "Asia/Kolkata")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="dairy-tests-logs-"))

TENANT = "company-1"


def day(d: int, hour: int = 9) -> datetime:
    return datetime(2024, 3, d, hour, 0)


@pytest.fixture()
def api_client():
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)


@pytest.fixture()
def make_party():
    from schemas.parties import Party

    def _make(name="Ramesh", type="Customer", opening_balance=0.0, as_of=None, **kwargs):
        return Party(
            id=kwargs.pop("id", name.lower()),
            name=name,
            type=type,
            opening_balance=opening_balance,
            opening_balance_as_of_date=as_of,
            **kwargs,
        )

    return _make


@pytest.fixture()
def make_records():
    from schemas.transactions import TransactionRecords

    def _make(**lists):
        return TransactionRecords(**lists)

    return _make


@pytest.fixture()
def milk_collection():
    from schemas.milk_collections import MilkCollectionEntry

    def _make(date, customer_name="Ramesh", quantity_ltr=10.0, total_amount=400.0, **kwargs):
        return MilkCollectionEntry(
            date=date,
            customer_name=customer_name,
            quantity_ltr=quantity_ltr,
            total_amount=total_amount,
            **kwargs,
        )

    return _make


@pytest.fixture()
def sale():
    from schemas.sales import SaleEntry

    def _make(date, product_name="Milk", quantity=1.0, unit="Ltr", total_amount=50.0, customer_name="Ramesh", payment_type="Cash", **kwargs):
        return SaleEntry(
            date=date,
            customer_name=customer_name,
            product_name=product_name,
            quantity=quantity,
            unit=unit,
            total_amount=total_amount,
            payment_type=payment_type,
            **kwargs,
        )

    return _make


@pytest.fixture()
def bulk_sale():
    from schemas.sales import BulkSaleEntry

    def _make(date, quantity_ltr=100.0, total_amount=4500.0, customer_name="City Dairy", payment_type="Credit", **kwargs):
        return BulkSaleEntry(
            date=date,
            customer_name=customer_name,
            quantity_ltr=quantity_ltr,
            total_amount=total_amount,
            payment_type=payment_type,
            **kwargs,
        )

    return _make


@pytest.fixture()
def purchase():
    from schemas.purchases import PurchaseEntry

    def _make(date, category="Pashu Aahar", product_name="Gold Coin Feed", quantity=10.0, unit="Bags", total_amount=1000.0, supplier_name="Feed Supplier", **kwargs):
        return PurchaseEntry(
            date=date,
            category=category,
            product_name=product_name,
            supplier_name=supplier_name,
            quantity=quantity,
            unit=unit,
            total_amount=total_amount,
            **kwargs,
        )

    return _make


@pytest.fixture()
def payment():
    from schemas.payments import PaymentEntry

    def _make(date, type="Received", amount=100.0, party_name="Ramesh", mode="Cash", **kwargs):
        return PaymentEntry(date=date, type=type, amount=amount, party_name=party_name, mode=mode, **kwargs)

    return _make
