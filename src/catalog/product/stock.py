"""Stock status classification of on-hand quantities."""

from enum import Enum


class StockStatus(Enum):
    """Derived stock label for a product quantity."""

    OUT_OF_STOCK = "OUT_OF_STOCK"
    CRITICAL_STOCK = "CRITICAL_STOCK"
    LOW_STOCK = "LOW_STOCK"
    IN_STOCK = "IN_STOCK"
    OVERSTOCKED = "OVERSTOCKED"


# Lower bound (inclusive) of each band, highest first.
_BANDS = (
    (51, StockStatus.OVERSTOCKED),
    (10, StockStatus.IN_STOCK),
    (5, StockStatus.LOW_STOCK),
    (1, StockStatus.CRITICAL_STOCK),
    (0, StockStatus.OUT_OF_STOCK),
)


def classify(quantity: int) -> StockStatus:
    """Map a quantity to exactly one stock status.

    Bands: 0 out of stock, 1-4 critical, 5-9 low, 10-50 in stock,
    above 50 overstocked.
    """
    if quantity < 0:
        raise ValueError(f"Quantity cannot be negative, got {quantity}")

    for lower_bound, status in _BANDS:
        if quantity >= lower_bound:
            return status

    # Unreachable: the last band starts at zero
    raise AssertionError(quantity)
