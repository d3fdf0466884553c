"""Abstract base class for fraud scoring rules."""

from abc import ABC, abstractmethod

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import RiskFactor, Severity, Transaction


class FraudRule(ABC):
    """Base class for all fraud rules.

    Rules are pure: they read the transaction, the scorer's history window
    (which never contains the transaction being scored) and the config, and
    emit at most one RiskFactor.
    """

    rule_id: str
    category: str  # "card" | "velocity" | "amount" | "time" | "geo" | "merchant" | "identity" | "statistics"

    @abstractmethod
    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        """Evaluate this rule and return a RiskFactor, or None if it does not fire."""
        ...

    def _not_triggered(self) -> None:
        return None

    def _triggered(
        self,
        name: str,
        score: int,
        description: str,
        severity: Severity = Severity.MEDIUM,
    ) -> RiskFactor:
        """Convenience: build the factor this rule contributes."""
        return RiskFactor(
            name=name,
            severity=severity,
            score=score,
            description=description,
            rule_id=self.rule_id,
            category=self.category,
        )
