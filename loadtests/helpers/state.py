"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state. State tracks the product
id returned by creation so follow-up operations can reference it.
"""

from dataclasses import dataclass


@dataclass
class ProductState:
    """Tracks state for a single simulated product lifecycle."""

    product_id: str | None = None
    name: str | None = None
    price: float = 0.0
    quantity: int = 0
    deleted: bool = False
