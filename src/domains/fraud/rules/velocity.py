"""Velocity-based fraud rules."""

from datetime import timedelta

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import RiskFactor, Severity, Transaction
from .base import FraudRule


class TransactionVelocityRule(FraudRule):
    """Triggers on bursts of transactions inside the short velocity window.

    The count includes the transaction being scored.
    """

    rule_id = "transaction_velocity"
    category = "velocity"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        window = config.velocity.window_minutes
        prior = history.recent(timedelta(minutes=window), transaction.transaction_time)
        count = len(prior) + 1

        if count >= config.velocity.high_count:
            return self._triggered(
                name="High Transaction Velocity",
                score=config.velocity.high_score,
                description=f"{count} transactions in {window} minutes - possible card testing",
                severity=Severity.CRITICAL,
            )

        if count >= config.velocity.elevated_count:
            return self._triggered(
                name="Elevated Transaction Velocity",
                score=config.velocity.elevated_score,
                description=f"{count} transactions in {window} minutes",
                severity=Severity.HIGH,
            )

        return self._not_triggered()
