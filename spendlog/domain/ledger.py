"""In-memory expense ledger.

The ledger keeps one canonical store of expense records keyed by id, plus two
key-only indexes over it:
- by category: ids in insertion order
- by date: (date, id) keys kept sorted on every insert

Records are immutable and never removed, so the indexes only ever grow.
No I/O happens here. All monetary amounts are in minor units (Money type).
"""

from bisect import insort
from dataclasses import dataclass

from spendlog.domain.models import CategoryName, Description, ExpenseDate, Money
from spendlog.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExpenseRecord:
    """Immutable expense record."""

    id: int
    date: ExpenseDate
    amount: Money
    category: CategoryName
    description: Description


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable total for one category."""

    category: CategoryName
    total: Money


@dataclass(frozen=True)
class CategorySummary:
    """Immutable per-category totals plus the grand total."""

    categories: list[CategoryTotal]
    total: Money


class ExpenseLedger:
    """Expense records queryable by id, by category and by date."""

    def __init__(self) -> None:
        self._records: dict[int, ExpenseRecord] = {}
        self._by_category: dict[CategoryName, list[int]] = {}
        self._by_date: list[tuple[ExpenseDate, int]] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def add_expense(
        self,
        date: ExpenseDate,
        amount: Money,
        category: CategoryName,
        description: Description,
    ) -> int:
        """Record a new expense.

        No validation is performed; callers pass already-parsed values.

        Args:
            date: Expense date (YYYY-MM-DD).
            amount: Amount in minor units.
            category: Category label (case-sensitive).
            description: Free-form description.

        Returns:
            The id assigned to the new record (1 for the first expense).
        """
        expense_id = self._next_id
        record = ExpenseRecord(
            id=expense_id,
            date=date,
            amount=amount,
            category=category,
            description=description,
        )

        self._next_id += 1
        self._records[expense_id] = record
        self._by_category.setdefault(category, []).append(expense_id)
        # (date, id) is unique because ids are
        insort(self._by_date, (date, expense_id))

        logger.debug("Added expense %d: %s %s %d", expense_id, date, category, amount)
        return expense_id

    def get(self, expense_id: int) -> ExpenseRecord | None:
        """Look up a record by id."""
        return self._records.get(expense_id)

    def categories(self) -> list[CategoryName]:
        """Return every category that has at least one expense, in lexical order."""
        return sorted(self._by_category)

    def list_by_category(self, category: CategoryName) -> list[ExpenseRecord]:
        """List expenses for a category in the order they were added.

        Args:
            category: Category label (exact, case-sensitive match).

        Returns:
            Matching records, or an empty list if the category was never used.
        """
        return [self._records[expense_id] for expense_id in self._by_category.get(category, [])]

    def list_all_by_date(self) -> list[ExpenseRecord]:
        """List all expenses ordered by date, then by id for same-day entries."""
        return [self._records[expense_id] for _, expense_id in self._by_date]

    def category_totals(self) -> CategorySummary:
        """Sum expenses per category.

        Categories are ordered by label in ascending lexical order. Only
        categories with at least one expense appear.

        Returns:
            CategorySummary with per-category totals and the grand total.
        """
        categories = [
            CategoryTotal(
                category=category,
                total=Money(sum(self._records[expense_id].amount for expense_id in self._by_category[category])),
            )
            for category in self.categories()
        ]

        return CategorySummary(
            categories=categories,
            total=Money(sum(item.total for item in categories)),
        )
