"""Card number rules."""

from ..card import validate_card
from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import CardIssuer, RiskFactor, Severity, Transaction
from .base import FraudRule


class CardValidityRule(FraudRule):
    """Flags card numbers that fail the Luhn check or belong to no known issuer."""

    rule_id = "card_validity"
    category = "card"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        validation = validate_card(transaction.card_number)

        if not validation.valid:
            return self._triggered(
                name="Invalid Card Number",
                score=config.identity.invalid_card_score,
                description="Card number failed Luhn algorithm validation - potentially fake card",
                severity=Severity.CRITICAL,
            )

        if validation.issuer == CardIssuer.UNKNOWN:
            return self._triggered(
                name="Unrecognized Card Issuer",
                score=config.identity.unknown_issuer_score,
                description="Card issuer could not be identified",
                severity=Severity.MEDIUM,
            )

        return self._not_triggered()
