"""Transaction risk scorer: rules -> recommendations -> history update."""

import threading
from datetime import UTC, datetime

import structlog

from .config import FraudConfig, default_config
from .history import HistoryWindow
from .models import FraudAnalysis, HistoryEntry, Transaction
from .recommendations import generate_recommendations
from .rules_engine import RulesEngine

logger = structlog.get_logger()


class TransactionRiskScorer:
    """Scores transactions for one account and owns that account's history.

    ``evaluate`` scores against the history as it stood before the call, then
    records the transaction. The whole read-score-append sequence holds the
    scorer's lock, so concurrent calls for the same account are serialized.
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        history: HistoryWindow | None = None,
    ) -> None:
        self._config = config or default_config
        self._history = history or HistoryWindow(self._config.history)
        self._rules_engine = RulesEngine(config=self._config)
        self._lock = threading.Lock()

    @property
    def history(self) -> HistoryWindow:
        return self._history

    def evaluate(self, transaction: Transaction) -> FraudAnalysis:
        """Run the full scoring pipeline for a transaction."""
        with self._lock:
            context = self._rules_engine.evaluate(transaction, self._history, self._config)
            self._history.record(HistoryEntry.from_transaction(transaction))
            history_size = len(self._history)

        recommendations = generate_recommendations(
            context.risk_factors, context.is_fraudulent, context.risk_level
        )

        analysis = FraudAnalysis(
            overall_risk_score=context.overall_risk_score,
            risk_level=context.risk_level,
            is_fraudulent=context.is_fraudulent,
            confidence=context.confidence,
            risk_factors=context.risk_factors,
            recommendations=recommendations,
            timestamp=datetime.now(UTC),
        )

        logger.info(
            "transaction_evaluated",
            overall_risk_score=analysis.overall_risk_score,
            raw_score=context.raw_score,
            risk_level=analysis.risk_level.value,
            is_fraudulent=analysis.is_fraudulent,
            confidence=analysis.confidence,
            factor_count=len(analysis.risk_factors),
            history_size=history_size,
        )

        return analysis

    def reset(self) -> None:
        with self._lock:
            self._history.clear()
