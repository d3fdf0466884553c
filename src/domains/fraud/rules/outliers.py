"""Statistical outlier rule over the scorer's rolling history."""

import statistics
from datetime import timedelta

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import RiskFactor, Severity, Transaction
from .base import FraudRule


class StatisticalOutlierRule(FraudRule):
    """Triggers when the amount sits far outside the recent spending pattern.

    Uses the population standard deviation of amounts in the retention window.
    """

    rule_id = "statistical_outlier"
    category = "statistics"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        window = timedelta(hours=config.history.retention_hours)
        amounts = [e.amount for e in history.recent(window, transaction.transaction_time)]
        if len(amounts) < config.statistics.min_history:
            return self._not_triggered()

        mean = statistics.fmean(amounts)
        stddev = statistics.pstdev(amounts)
        deviation = abs(transaction.amount - mean)
        if deviation <= config.statistics.zscore_threshold * stddev:
            return self._not_triggered()

        return self._triggered(
            name="Statistical Anomaly",
            score=config.statistics.outlier_score,
            description=(
                f"Amount {transaction.amount:,.2f} deviates from recent mean {mean:,.2f}"
                f" (stddev {stddev:,.2f})"
            ),
            severity=Severity.HIGH,
        )
