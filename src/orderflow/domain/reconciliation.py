"""Reconciliation hook for stock that no longer matches the order store.

The order store and the catalog's stock counters cannot be updated
atomically.  When a workflow fails after some stock mutation already
went through, the listener is told exactly what was applied so an
operator (or a job) can reconcile.  Nothing is rolled back in-process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class StockAdjustment:
    """A stock change that reached the catalog (negative = reduced)."""

    product_id: int
    delta: int


@dataclass(frozen=True)
class StockDriftEvent:
    operation: str  # "create" | "update" | "delete"
    order_id: int | None
    reason: str
    applied: tuple[StockAdjustment, ...] = field(default_factory=tuple)
    order_saved: bool = False


class ReconciliationListener(ABC):

    @abstractmethod
    def stock_out_of_sync(self, event: StockDriftEvent) -> None:
        """Record that remote stock and local orders may disagree."""
