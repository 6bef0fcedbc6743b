"""Deterministic quick-add parser for grocery entry.

Parses the single-line syntax ``name [quantity] [@store]`` without any AI call.
It must be deterministic: same input -> same output.

The store is extracted before the quantity so that digits inside a store name
are never read as a quantity. Only the first quantity token is used
("2 Coke 2L @Store" keeps "2").
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Optional

from wpclife.models.constants import DEFAULT_GROCERY_CATEGORY


@dataclass(frozen=True)
class QuickAddResult:
    name: str
    quantity: str = ""
    store: Optional[str] = None


_STORE_RE = re.compile(r"@\s*(.+)$", re.I)
_QUANTITY_RE = re.compile(r"\b(\d+(\.\d+)?\s*(kg|g|l|ml|lb|oz|pack|pcs|L)?)\b", re.I)
_WHITESPACE_RE = re.compile(r"\s+")


def parse_quick_add(text: str) -> Optional[QuickAddResult]:
    """Parse a quick-add line into name, quantity and store.

    Returns None for blank input or when no item name remains.
    """
    remaining = (text or "").strip()
    if not remaining:
        return None

    store: Optional[str] = None
    m = _STORE_RE.search(remaining)
    if m:
        store = m.group(1).strip()
        remaining = remaining[: m.start()].strip()

    quantity = ""
    q = _QUANTITY_RE.search(remaining)
    if q:
        quantity = q.group(1).strip()
        remaining = (remaining[: q.start()] + remaining[q.end():]).strip()

    name = _WHITESPACE_RE.sub(" ", remaining).strip()
    if not name:
        return None
    return QuickAddResult(name=name, quantity=quantity, store=store)


# Priority order matters: first matching list wins.
_CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("Fruits", ("apple", "banana", "orange", "grape", "mango", "strawberry", "blueberry")),
    ("Vegetables", ("carrot", "potato", "onion", "tomato", "lettuce", "spinach", "broccoli", "cucumber")),
    ("Dairy", ("milk", "cheese", "yogurt", "butter", "cream")),
    ("Snacks", ("chips", "cookie", "candy", "chocolate", "popcorn")),
    ("Medicine", ("medicine", "vitamin", "aspirin", "tylenol")),
    ("Beverages", ("water", "juice", "soda", "coffee", "tea")),
    ("Meat", ("chicken", "beef", "pork", "fish", "salmon", "shrimp")),
    ("Pantry", ("rice", "pasta", "flour", "sugar", "oil", "salt")),
    ("Frozen", ("frozen", "ice cream", "pizza")),
]


def guess_category(name: str) -> str:
    """Guess a grocery category from keywords in the item name."""
    lower = (name or "").lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(k in lower for k in keywords):
            return category
    return DEFAULT_GROCERY_CATEGORY
