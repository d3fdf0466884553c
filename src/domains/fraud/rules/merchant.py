"""Merchant category rules."""

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import RiskFactor, Severity, Transaction
from .base import FraudRule

_CATEGORY_REASONS = {
    "gas_station": "Gas stations are prime targets for card skimmers and cloned cards",
    "online_shopping": "Card-not-present transactions have higher fraud rates",
    "travel": "Travel bookings are high-value and frequently targeted",
    "entertainment": "Digital goods and subscriptions enable anonymous fraud",
    "utilities": "Lower risk but still monitored",
}


def _severity_for(score: int) -> Severity:
    if score > 12:
        return Severity.HIGH
    if score > 8:
        return Severity.MEDIUM
    return Severity.LOW


class MerchantCategoryRule(FraudRule):
    """Adds the fixed risk weight of the merchant's category."""

    rule_id = "merchant_category"
    category = "merchant"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        category = transaction.merchant_category.value
        score = config.merchant.category_scores.get(category)
        if not score:
            return self._not_triggered()

        return self._triggered(
            name="Merchant Category Risk",
            score=score,
            description=_CATEGORY_REASONS.get(category, f"Elevated risk category: {category}"),
            severity=_severity_for(score),
        )
