"""Amount-based fraud rules."""

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import MerchantCategory, RiskFactor, Severity, Transaction
from .base import FraudRule


class TransactionAmountRule(FraudRule):
    """Scores very large amounts and the tiny amounts typical of card testing."""

    rule_id = "transaction_amount"
    category = "amount"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        amount = transaction.amount
        t = config.amount

        if amount > t.very_high_min:
            return self._triggered(
                name="Very High Transaction Amount",
                score=t.very_high_score,
                description=f"Extremely large transaction: {amount:,.2f}",
                severity=Severity.CRITICAL,
            )
        if amount > t.high_min:
            return self._triggered(
                name="High Transaction Amount",
                score=t.high_score,
                description=f"Large transaction: {amount:,.2f}",
                severity=Severity.HIGH,
            )
        if amount > t.elevated_min:
            return self._triggered(
                name="Elevated Transaction Amount",
                score=t.elevated_score,
                description=f"Above-average transaction: {amount:,.2f}",
                severity=Severity.MEDIUM,
            )
        if amount < t.micro_max:
            return self._triggered(
                name="Micro Transaction",
                score=t.micro_score,
                description="Very small amounts often used for card testing by fraudsters",
                severity=Severity.LOW,
            )
        if amount < t.small_max:
            return self._triggered(
                name="Small Amount",
                score=t.small_score,
                description="Small transactions can indicate initial fraud attempts",
                severity=Severity.LOW,
            )

        return self._not_triggered()


class WeekendHighValueRule(FraudRule):
    """Triggers for high-value transactions made on a Saturday or Sunday."""

    rule_id = "weekend_high_value"
    category = "amount"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        if transaction.transaction_time.weekday() < 5:
            return self._not_triggered()
        if transaction.amount <= config.amount.elevated_min:
            return self._not_triggered()

        return self._triggered(
            name="Large Weekend Transaction",
            score=config.amount.weekend_score,
            description="High-value transaction on weekend",
            severity=Severity.MEDIUM,
        )


class HighValueMerchantRule(FraudRule):
    """Triggers for large amounts at merchant types favored by fraudsters."""

    rule_id = "high_value_merchant"
    category = "merchant"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        if transaction.amount <= config.amount.elevated_min:
            return self._not_triggered()

        risky = {MerchantCategory(c) for c in config.merchant.high_value_categories}
        if transaction.merchant_category not in risky:
            return self._not_triggered()

        return self._triggered(
            name="High-Value High-Risk Merchant",
            score=config.amount.high_value_merchant_score,
            description="Large transaction at merchant type commonly targeted by fraudsters",
            severity=Severity.CRITICAL,
        )
