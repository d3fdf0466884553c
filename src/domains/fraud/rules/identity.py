"""Cardholder name rules."""

import re

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import RiskFactor, Severity, Transaction
from .base import FraudRule


class IncompleteNameRule(FraudRule):
    rule_id = "incomplete_name"
    category = "identity"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        if len(transaction.cardholder_name.split()) >= config.identity.min_name_tokens:
            return self._not_triggered()

        return self._triggered(
            name="Single Name Detected",
            score=config.identity.incomplete_name_score,
            description="Cardholder name appears incomplete - possible data entry error or fraud",
            severity=Severity.LOW,
        )


class SuspiciousNameRule(FraudRule):
    """Triggers for placeholder names such as "Test User" or "Admin"."""

    rule_id = "suspicious_name"
    category = "identity"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        keywords = config.identity.suspicious_keywords
        if not keywords:
            return self._not_triggered()

        pattern = "|".join(re.escape(k) for k in keywords)
        if not re.search(pattern, transaction.cardholder_name, re.IGNORECASE):
            return self._not_triggered()

        return self._triggered(
            name="Suspicious Cardholder Name",
            score=config.identity.suspicious_name_score,
            description="Name contains test/fraud keywords",
            severity=Severity.CRITICAL,
        )
