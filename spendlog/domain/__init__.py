"""Domain models and types for spendlog.

This package contains the functional core:
- No I/O operations
- Ledger and price catalog are plain in-memory structures
- Easy to test
- Business logic separated from the interactive shell
"""

from spendlog.domain.ledger import CategorySummary, CategoryTotal, ExpenseLedger, ExpenseRecord
from spendlog.domain.models import CategoryName, Description, ExpenseDate, ItemName, Money, StoreName
from spendlog.domain.prices import PriceCatalog, PriceQuote

__all__ = [
    # Types
    "CategoryName",
    "Description",
    "ExpenseDate",
    "ItemName",
    "Money",
    "StoreName",
    # Ledger
    "CategorySummary",
    "CategoryTotal",
    "ExpenseLedger",
    "ExpenseRecord",
    # Prices
    "PriceCatalog",
    "PriceQuote",
]
