"""Reconciliation listener that writes drift events to the log."""

from __future__ import annotations

import logging

from orderflow.domain.reconciliation import ReconciliationListener, StockDriftEvent

logger = logging.getLogger(__name__)


class LoggingReconciliationListener(ReconciliationListener):

    def stock_out_of_sync(self, event: StockDriftEvent) -> None:
        applied = ", ".join(
            f"#{adj.product_id}:{adj.delta:+d}" for adj in event.applied
        ) or "none"
        logger.error(
            "Stock out of sync after failed %s (order=%s, saved=%s): "
            "applied [%s]; reason: %s",
            event.operation,
            event.order_id if event.order_id is not None else "-",
            event.order_saved,
            applied,
            event.reason,
        )
