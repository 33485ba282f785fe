"""Domain type definitions for spendlog.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in minor units (cents/paise)
- ExpenseDate: Calendar date in YYYY-MM-DD format
- CategoryName: Free-form expense category label
- Description: Expense description text
- ItemName: Shopping item tracked in the price catalog
- StoreName: Store a price was observed at
"""

from typing import NewType

# Money amounts are stored as minor units to avoid floating point errors
Money = NewType("Money", int)

# Dates are kept as ISO strings (e.g., "2024-01-05") so they sort lexically
ExpenseDate = NewType("ExpenseDate", str)

# Category labels are case-sensitive and never normalized
CategoryName = NewType("CategoryName", str)

# Expense description text
Description = NewType("Description", str)

# Price catalog keys
ItemName = NewType("ItemName", str)
StoreName = NewType("StoreName", str)
