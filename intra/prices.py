"""Unit prices of traded items, in credits."""

from decimal import Decimal


class PriceBook:
    """Item name -> unit price. A price, once set, never changes."""

    def __init__(self, prices=None):
        self._prices = {item: Decimal(price) for item, price in (prices or {}).items()}

    def get(self, item):
        """Unit price of item, or None if it has never been priced."""
        return self._prices.get(item)

    def insert_if_absent(self, item, price):
        """Store price for item. Returns False (and stores nothing) if already priced."""
        if item in self._prices:
            return False
        self._prices[item] = price
        return True

    def __contains__(self, item):
        return item in self._prices

    def __len__(self):
        return len(self._prices)

    def __repr__(self):
        return f"PriceBook({self._prices!r})"
