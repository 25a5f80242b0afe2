import logging
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class PartyNameResolver:
    """
    Joins transactions to parties.

    Stored transactions reference their counterparty by free-text name, not by
    id, so the join key is the exact name string. Callers only go through
    `resolve`, which keeps the key choice in this one place.
    """

    def __init__(self, parties: Iterable):
        self._parties: Dict[str, object] = {}
        for party in parties:
            key = self.key_for(party.name)
            if not key:
                logger.warning(f"Party {party.id!r} has no name and cannot be matched to transactions.")
                continue
            if key in self._parties:
                logger.warning(f"Duplicate party name '{party.name}'; transactions will be matched to the first party only.")
                continue
            self._parties[key] = party

    @staticmethod
    def key_for(name: Optional[str]) -> str:
        return name or ""

    def resolve(self, name: Optional[str]):
        """The party a transaction counterparty name refers to, or None."""
        key = self.key_for(name)
        if not key:
            return None
        return self._parties.get(key)
