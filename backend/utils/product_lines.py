"""
Product line classification.

Milk and ghee are recognised by a fixed (unit, name) convention. Feed
("Pashu Aahar") products carry free-text names, so their vocabulary is
discovered from purchase records tagged with the feed category and injected
into a classifier built once per request.
"""

import enum
import logging
from typing import Iterable, Optional, Set

import config

logger = logging.getLogger(__name__)

MILK_PRODUCT_NAME = "milk"
GHEE_PRODUCT_NAME = "ghee"
FEED_NAME_MARKER = "pashu aahar"

UNIT_LITRE = "ltr"
UNIT_KG = "kg"
UNIT_BAGS = "bags"


class ProductLine(str, enum.Enum):
    MILK = "Milk"
    GHEE = "Ghee"
    PASHU_AAHAR = "Pashu Aahar"
    OTHER = "Other"


def normalize_name(text: Optional[str]) -> str:
    return (text or "").strip().lower()


def discover_feed_products(purchases: Iterable, feed_category: Optional[str] = None) -> Set[str]:
    """Lower-cased names of every purchased product tagged with the feed category."""
    category = normalize_name(feed_category or config.FEED_PURCHASE_CATEGORY)
    names = set()
    for purchase in purchases:
        if normalize_name(purchase.category) == category and normalize_name(purchase.product_name):
            names.add(normalize_name(purchase.product_name))
    logger.debug(f"Discovered {len(names)} feed product names: {sorted(names)}")
    return names


class ProductLineClassifier:
    def __init__(
        self,
        feed_products: Iterable[str] = (),
        feed_category: Optional[str] = None,
        ghee_category: Optional[str] = None,
    ):
        self.feed_products = frozenset(normalize_name(name) for name in feed_products)
        self.feed_category = normalize_name(feed_category or config.FEED_PURCHASE_CATEGORY)
        self.ghee_category = normalize_name(ghee_category or config.GHEE_PURCHASE_CATEGORY)

    @classmethod
    def from_purchases(cls, purchases: Iterable, feed_category: Optional[str] = None) -> "ProductLineClassifier":
        return cls(discover_feed_products(purchases, feed_category), feed_category=feed_category)

    def is_feed_product(self, product_name: Optional[str]) -> bool:
        name = normalize_name(product_name)
        return bool(name) and (name in self.feed_products or FEED_NAME_MARKER in name)

    def classify(self, unit: Optional[str], product_name: Optional[str]) -> ProductLine:
        """Product line of a sold item."""
        unit = normalize_name(unit)
        name = normalize_name(product_name)
        if unit == UNIT_LITRE and name == MILK_PRODUCT_NAME:
            return ProductLine.MILK
        if unit == UNIT_KG and name == GHEE_PRODUCT_NAME:
            return ProductLine.GHEE
        if unit == UNIT_BAGS and self.is_feed_product(name):
            return ProductLine.PASHU_AAHAR
        return ProductLine.OTHER

    def classify_purchase(self, category: Optional[str], unit: Optional[str], product_name: Optional[str]) -> ProductLine:
        """Product line of a purchased item; the category wins over the name."""
        category = normalize_name(category)
        line = self.classify(unit, product_name)
        if category == self.ghee_category or line == ProductLine.GHEE:
            return ProductLine.GHEE
        if category == self.feed_category or line == ProductLine.PASHU_AAHAR:
            return ProductLine.PASHU_AAHAR
        # Milk is bought through milk collections, not purchase entries.
        return ProductLine.OTHER
