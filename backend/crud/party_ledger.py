"""
Party ledger reconstruction.

A party's ledger is never stored. It is rebuilt on every request by replaying
every transaction that names the party, seeded with a synthetic opening
balance entry.

Sign convention, shared with the dashboard's party dues:
the running balance is what the party owes the business.

    balance = previous balance + credit - debit

    credit: opening balance owed to the business, sales and bulk sales to the
            party, payments Paid to the party
    debit:  opening balance owed by the business, milk collected from the
            party, purchases from the party, payments Received from the party
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from schemas.ledgers import PartyLedger, PartyLedgerEntry
from schemas.parties import Party, PartyType
from schemas.payments import PaymentDirection
from schemas.transactions import TransactionRecords
from utils.dates import EPOCH, parse_entry_date
from utils.formatting import format_indian_currency, round_currency, round_quantity
from utils.party_join import PartyNameResolver
from utils.tenancy import belongs_to_tenant

logger = logging.getLogger(__name__)

OPENING_BALANCE_DESCRIPTION = "Opening Balance"


def _quantity_text(quantity: float, unit: str) -> str:
    return f"{quantity:g} {unit}".strip()


def _milk_collection_line(entry) -> dict:
    return {
        "description": f"Milk Collection ({entry.shift.value})",
        "milk_quantity_ltr": entry.quantity_ltr,
        "fat_percentage": entry.fat_percentage,
        "rate": entry.rate_per_ltr,
        "debit": entry.amount_payable,
        "credit": 0.0,
    }


def _sale_line(entry) -> dict:
    return {
        "description": f"Sale: {entry.product_name or 'Unknown Product'} ({_quantity_text(entry.quantity, entry.unit)})",
        "rate": entry.rate,
        "debit": 0.0,
        "credit": entry.total_amount,
    }


def _bulk_sale_line(entry) -> dict:
    return {
        "description": "Bulk Milk Sale",
        "milk_quantity_ltr": entry.quantity_ltr,
        "fat_percentage": entry.fat_percentage,
        "rate": entry.rate,
        "debit": 0.0,
        "credit": entry.total_amount,
    }


def _purchase_line(entry) -> dict:
    return {
        "description": f"Purchase: {entry.product_name or 'Unknown Product'} ({_quantity_text(entry.quantity, entry.unit)})",
        "rate": entry.price_per_unit,
        "debit": entry.total_amount,
        "credit": 0.0,
    }


def _payment_line(entry) -> dict:
    received = entry.type == PaymentDirection.RECEIVED
    return {
        "description": f"Payment {entry.type.value} ({entry.mode.value})",
        "debit": entry.amount if received else 0.0,
        "credit": 0.0 if received else entry.amount,
    }


@dataclass(frozen=True)
class LedgerSource:
    name: str
    records_field: str
    counterparty_field: str
    to_line: Callable[[object], dict]
    # Milk suppliers are recorded as Customer-type parties.
    customers_only: bool = False

    def counterparty(self, entry) -> Optional[str]:
        return getattr(entry, self.counterparty_field)

    def applies_to(self, party: Party) -> bool:
        return not self.customers_only or party.type == PartyType.CUSTOMER


# Enumeration order is also the tie-break order for entries on the same date.
LEDGER_SOURCES: List[LedgerSource] = [
    LedgerSource("milk_collection", "milk_collections", "customer_name", _milk_collection_line, customers_only=True),
    LedgerSource("sale", "sales", "customer_name", _sale_line),
    LedgerSource("bulk_sale", "bulk_sales", "customer_name", _bulk_sale_line),
    LedgerSource("purchase", "purchases", "supplier_name", _purchase_line),
    LedgerSource("payment", "payments", "party_name", _payment_line),
]

LEDGER_SOURCES_BY_NAME: Dict[str, LedgerSource] = {source.name: source for source in LEDGER_SOURCES}


def opening_balance_date(party: Party):
    if party.opening_balance_as_of_date is None:
        return EPOCH
    return parse_entry_date(party.opening_balance_as_of_date)


def _opening_line(party: Party) -> Optional[dict]:
    opening = party.opening_balance or 0.0
    if opening == 0:
        return None
    return {
        "date": opening_balance_date(party),
        "source": "opening_balance",
        "reference_id": None,
        "description": OPENING_BALANCE_DESCRIPTION,
        "debit": max(0.0, -opening),
        "credit": max(0.0, opening),
    }


def compute_party_ledger(party: Party, records: TransactionRecords, tenant_id: Optional[str] = None) -> List[PartyLedgerEntry]:
    """
    Rebuild the running-balance ledger of one party.

    Entries are sorted ascending by date; entries sharing a date keep the
    order opening balance, milk collections, sales, bulk sales, purchases,
    payments. A party with a zero opening balance and no transactions gets an
    empty ledger.
    """
    resolver = PartyNameResolver([party])
    transactions = []

    opening = _opening_line(party)
    if opening:
        transactions.append(opening)

    for source in LEDGER_SOURCES:
        if not source.applies_to(party):
            continue
        for entry in getattr(records, source.records_field):
            if tenant_id is not None and not belongs_to_tenant(entry, tenant_id):
                continue
            if resolver.resolve(source.counterparty(entry)) is not party:
                continue
            line = source.to_line(entry)
            line["date"] = parse_entry_date(entry.date)
            line["source"] = source.name
            line["reference_id"] = entry.id
            transactions.append(line)

    transactions.sort(key=lambda x: x['date'])

    balance = 0.0
    entries = []
    for t in transactions:
        balance += t['credit'] - t['debit']
        entries.append(PartyLedgerEntry(
            date=t['date'],
            source=t['source'],
            reference_id=t.get('reference_id'),
            description=t['description'],
            milk_quantity_ltr=round_quantity(t['milk_quantity_ltr']) if t.get('milk_quantity_ltr') is not None else None,
            fat_percentage=t.get('fat_percentage'),
            rate=t.get('rate'),
            debit=round_currency(t['debit']),
            credit=round_currency(t['credit']),
            balance=round_currency(balance),
        ))

    logger.debug(f"Ledger for party '{party.name}' rebuilt with {len(entries)} entries, closing balance {balance:.2f}")
    return entries


def get_party_ledger(party: Party, records: TransactionRecords, tenant_id: Optional[str]) -> PartyLedger:
    """Party ledger report: entries plus opening/closing balance and column totals."""
    if not tenant_id or not belongs_to_tenant(party, tenant_id):
        logger.warning(f"Party ledger for '{party.name}' requested without a matching company, returning an empty ledger.")
        entries = []
    else:
        entries = compute_party_ledger(party, records, tenant_id)

    closing_balance = entries[-1].balance if entries else 0.0
    return PartyLedger(
        title=f"Party Ledger for {party.name}",
        party_id=party.id,
        party_name=party.name,
        party_type=party.type,
        opening_balance=round_currency(party.opening_balance),
        entries=entries,
        total_debit=round_currency(sum(e.debit for e in entries)),
        total_credit=round_currency(sum(e.credit for e in entries)),
        closing_balance=closing_balance,
        closing_balance_display=format_indian_currency(closing_balance),
    )
