"""Inventory health: a point-in-time operational verdict over the catalog.

``evaluate`` is a pure function of counts and thresholds. ``check_health``
reads the counts from the store and never raises: a failed read is reported
as a DOWN verdict instead. ``inventory_health`` also loads the thresholds,
so unusable configuration is reported the same way.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

import structlog

from catalog.config import HealthThresholds, get_health_thresholds

logger = structlog.get_logger(__name__)


class HealthStatus(Enum):
    UP = "UP"
    DEGRADED = "DEGRADED"
    DOWN = "DOWN"


class AggregationFailure(Exception):
    """Aggregate counts could not be read from the store."""


@dataclass(frozen=True)
class StockCounts:
    total: int
    low_stock: int
    out_of_stock: int

    @property
    def in_stock(self) -> int:
        return self.total - self.out_of_stock


@dataclass(frozen=True)
class HealthReport:
    """Verdict plus every input needed to reproduce it."""

    status: HealthStatus
    message: str
    evaluated_at: datetime
    thresholds: HealthThresholds
    counts: StockCounts | None = None
    stock_availability_rate: float | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        counts = self.counts
        return {
            "timestamp": self.evaluated_at.isoformat(),
            "status": self.status.value,
            "message": self.message,
            "total_products": counts.total if counts else None,
            "in_stock_products": counts.in_stock if counts else None,
            "low_stock_products": counts.low_stock if counts else None,
            "out_of_stock_products": counts.out_of_stock if counts else None,
            "stock_availability_rate": self.stock_availability_rate,
            "low_stock_threshold": self.thresholds.low_stock,
            "degraded_threshold": self.thresholds.degraded,
            "down_threshold": self.thresholds.down,
        }


def availability_rate(total: int, out_of_stock: int) -> float:
    """Percentage of products with stock, rounded half-up to 2 places.

    An empty catalog has a rate of 0.
    """
    if total == 0:
        return 0.0
    rate = Decimal(total - out_of_stock) / Decimal(total) * 100
    return float(rate.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def evaluate(
    counts: StockCounts,
    thresholds: HealthThresholds,
    evaluated_at: datetime | None = None,
) -> HealthReport:
    """Compute the verdict. First matching rule wins: DOWN, DEGRADED, UP."""
    if counts.out_of_stock > thresholds.down:
        status = HealthStatus.DOWN
        message = f"Too many products out of stock: {counts.out_of_stock}"
    elif counts.low_stock > thresholds.degraded:
        status = HealthStatus.DEGRADED
        message = f"Too many products with low stock: {counts.low_stock}"
    else:
        status = HealthStatus.UP
        message = "All systems operational"

    return HealthReport(
        status=status,
        message=message,
        evaluated_at=evaluated_at or datetime.now(),
        thresholds=thresholds,
        counts=counts,
        stock_availability_rate=availability_rate(counts.total, counts.out_of_stock),
    )


def collect_counts(store, low_stock_threshold: int) -> StockCounts:
    """Read the aggregate counts from a ``ProductRepository``-like store."""
    try:
        return StockCounts(
            total=store.count_all(),
            low_stock=store.count_quantity_less_than(low_stock_threshold),
            out_of_stock=store.count_out_of_stock(),
        )
    except Exception as exc:
        raise AggregationFailure(str(exc)) from exc


def check_health(
    store,
    thresholds: HealthThresholds,
    clock: Callable[[], datetime] = datetime.now,
) -> HealthReport:
    """Collect counts and evaluate them; failures become a DOWN report."""
    try:
        counts = collect_counts(store, thresholds.low_stock)
    except AggregationFailure as exc:
        logger.error("Failed to aggregate inventory health", error=str(exc))
        return HealthReport(
            status=HealthStatus.DOWN,
            message=f"Error retrieving metrics: {exc}",
            evaluated_at=clock(),
            thresholds=thresholds,
            error=str(exc),
        )

    report = evaluate(counts, thresholds, evaluated_at=clock())
    if report.status is not HealthStatus.UP:
        logger.warning(
            "Inventory health degraded",
            status=report.status.value,
            total=counts.total,
            low_stock=counts.low_stock,
            out_of_stock=counts.out_of_stock,
        )
    return report


def inventory_health(
    store,
    load_thresholds: Callable[[], HealthThresholds] = get_health_thresholds,
    clock: Callable[[], datetime] = datetime.now,
) -> HealthReport:
    """Load the configured thresholds, then ``check_health``.

    Thresholds that cannot be loaded give a DOWN report evaluated against
    the default thresholds, with ``error`` set.
    """
    try:
        thresholds = load_thresholds()
    except ValueError as exc:
        logger.error("Invalid inventory health configuration", error=str(exc))
        return HealthReport(
            status=HealthStatus.DOWN,
            message=f"Invalid health configuration: {exc}",
            evaluated_at=clock(),
            thresholds=HealthThresholds(),
            error=str(exc),
        )

    return check_health(store, thresholds, clock=clock)
