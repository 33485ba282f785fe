"""In-memory price catalog for comparing item prices across stores.

All prices are in minor units (Money type).
"""

from dataclasses import dataclass

from spendlog.domain.models import ItemName, Money, StoreName
from spendlog.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PriceQuote:
    """Immutable price observed at one store."""

    store: StoreName
    price: Money


def pick_cheapest(quotes: list[PriceQuote]) -> PriceQuote | None:
    """Pick the lowest-priced quote.

    Only a strictly lower price replaces the current pick, so for quotes
    ordered by store name, ties go to the smallest store name.

    Args:
        quotes: Quotes ordered by store name.

    Returns:
        Cheapest PriceQuote, or None if quotes is empty.
    """
    best: PriceQuote | None = None

    for quote in quotes:
        if best is None or quote.price < best.price:
            best = quote

    return best


class PriceCatalog:
    """Latest known price of each item at each store."""

    def __init__(self) -> None:
        self._prices: dict[ItemName, dict[StoreName, Money]] = {}

    def set_price(self, item: ItemName, store: StoreName, price: Money) -> None:
        """Record a price, replacing any earlier price for the same item and store."""
        self._prices.setdefault(item, {})[store] = price
        logger.debug("Set price of %s at %s to %d", item, store, price)

    def items(self) -> list[ItemName]:
        """Return all items with at least one price, in lexical order."""
        return sorted(self._prices)

    def prices_for(self, item: ItemName) -> list[PriceQuote]:
        """List all recorded prices for an item.

        Args:
            item: Item name (exact match).

        Returns:
            Quotes ordered by store name, or an empty list if the item is unknown.
        """
        stores = self._prices.get(item, {})
        return [PriceQuote(store=store, price=stores[store]) for store in sorted(stores)]

    def cheapest(self, item: ItemName) -> PriceQuote | None:
        """Find the store with the lowest price for an item.

        Args:
            item: Item name (exact match).

        Returns:
            Cheapest PriceQuote, or None if no price was ever recorded for item.
        """
        return pick_cheapest(self.prices_for(item))
