"""Environment-driven settings for the catalog.

Values are read on every call so that a changed environment (or a test
monkeypatching it) takes effect without re-importing anything.

    CATALOG_LOW_STOCK_THRESHOLD   quantity below which a product counts as low stock (5)
    CATALOG_DEGRADED_THRESHOLD    low-stock count above which health is DEGRADED (10)
    CATALOG_DOWN_THRESHOLD        out-of-stock count above which health is DOWN (5)
    CATALOG_UPDATE_POLICY         "replace" or "patch" (replace)
"""

import os
from dataclasses import dataclass
from enum import Enum


class UpdatePolicy(Enum):
    """How an update request is applied to an existing product."""

    REPLACE = "replace"  # all five mutable fields supplied and overwritten
    PATCH = "patch"  # only supplied fields change


@dataclass(frozen=True)
class HealthThresholds:
    """Knobs feeding the health aggregator.

    ``low_stock`` drives the low-stock *count*; ``degraded`` and ``down``
    gate the *verdict*. They are independent.
    """

    low_stock: int = 5
    degraded: int = 10
    down: int = 5

    def __post_init__(self):
        for name in ("low_stock", "degraded", "down"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"Health threshold '{name}' must be a non-negative integer, got {value!r}")


def _int_from_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def get_health_thresholds() -> HealthThresholds:
    """Thresholds for the health aggregator, from the environment."""
    return HealthThresholds(
        low_stock=_int_from_env("CATALOG_LOW_STOCK_THRESHOLD", 5),
        degraded=_int_from_env("CATALOG_DEGRADED_THRESHOLD", 10),
        down=_int_from_env("CATALOG_DOWN_THRESHOLD", 5),
    )


def get_update_policy() -> UpdatePolicy:
    """Configured update policy. Defaults to full replacement."""
    raw = (os.getenv("CATALOG_UPDATE_POLICY") or UpdatePolicy.REPLACE.value).strip().lower()
    try:
        return UpdatePolicy(raw)
    except ValueError:
        allowed = ", ".join(p.value for p in UpdatePolicy)
        raise ValueError(f"Unknown CATALOG_UPDATE_POLICY {raw!r}; expected one of: {allowed}") from None
