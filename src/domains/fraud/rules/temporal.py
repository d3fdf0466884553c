"""Time-of-day fraud rules."""

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import RiskFactor, Severity, Transaction
from .base import FraudRule


class UnusualHourRule(FraudRule):
    """Triggers for transactions during late-night hours.

    Hours are read from the transaction's own wall-clock time.
    """

    rule_id = "unusual_hour"
    category = "time"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        hour = transaction.transaction_time.hour
        t = config.time
        very_late_start, very_late_end = t.very_late_hours

        if very_late_start <= hour < very_late_end:
            return self._triggered(
                name="Very Late Night Transaction",
                score=t.very_late_score,
                description=(
                    f"Transaction between {very_late_start}:00 and {very_late_end}:00"
                    " - highest risk hours"
                ),
                severity=Severity.HIGH,
            )

        if hour >= t.late_start_hour or hour < t.late_end_hour:
            return self._triggered(
                name="Late Night Transaction",
                score=t.late_score,
                description=f"Transaction during unusual hours ({hour}:00)",
                severity=Severity.MEDIUM,
            )

        return self._not_triggered()
