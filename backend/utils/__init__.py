from .dates import parse_entry_date
from .formatting import round_currency, round_quantity

__all__ = ['parse_entry_date', 'round_currency', 'round_quantity']
