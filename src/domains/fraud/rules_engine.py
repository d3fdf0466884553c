"""Rule-based scoring engine: run rules, sum points, map to a tier."""

import structlog

from .config import FraudConfig, ScoringPolicy, default_config
from .history import HistoryWindow
from .models import RiskFactor, RiskLevel, ScoringContext, Severity, Transaction
from .rules import ALL_RULES, FraudRule

logger = structlog.get_logger()


def classify_risk_level(score: int, policy: ScoringPolicy) -> RiskLevel:
    if score >= policy.critical_threshold:
        return RiskLevel.CRITICAL
    if score >= policy.high_threshold:
        return RiskLevel.HIGH
    if score >= policy.medium_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def compute_confidence(factors: list[RiskFactor], policy: ScoringPolicy) -> int:
    """Confidence grows with the number and severity of fired factors.

    Informational only; the fraud verdict never depends on it.
    """
    critical = sum(1 for f in factors if f.severity == Severity.CRITICAL)
    high = sum(1 for f in factors if f.severity == Severity.HIGH)
    boost = (
        critical * policy.critical_confidence_boost
        + high * policy.high_confidence_boost
        + len(factors) * policy.factor_confidence_boost
    )
    return min(policy.max_confidence, policy.base_confidence + boost)


class RulesEngine:
    """Evaluates a transaction against the fixed rule pipeline.

    Scoring is additive:
    1. Run all rules in order -> list[RiskFactor]
    2. Sum factor scores, clamp to [0, max_score]
    3. Map the clamped score to a risk level by ascending cut points
    4. Fraud verdict = clamped score >= fraud threshold
    5. Confidence = f(critical count, high count, factor count)
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        rules: list[FraudRule] | None = None,
    ) -> None:
        self._rules = list(rules if rules is not None else ALL_RULES)
        self._config = config or default_config

    @property
    def rules(self) -> list[FraudRule]:
        return list(self._rules)

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig | None = None,
    ) -> ScoringContext:
        """Evaluate a transaction against all rules. Never raises for a valid Transaction."""
        cfg = config or self._config
        factors: list[RiskFactor] = []

        for rule in self._rules:
            try:
                factor = rule.evaluate(transaction, history, cfg)
            except Exception:
                logger.exception("rule_evaluation_error", rule_id=rule.rule_id)
                continue
            if factor is not None and factor.score > 0:
                factors.append(factor)

        policy = cfg.scoring
        raw_score = sum(f.score for f in factors)
        score = max(0, min(raw_score, policy.max_score))
        risk_level = classify_risk_level(score, policy)
        is_fraudulent = score >= policy.fraud_threshold

        context = ScoringContext(
            raw_score=raw_score,
            overall_risk_score=score,
            risk_level=risk_level,
            is_fraudulent=is_fraudulent,
            confidence=compute_confidence(factors, policy),
            risk_factors=factors,
        )

        logger.debug(
            "rules_evaluated",
            raw_score=raw_score,
            risk_level=risk_level.value,
            is_fraudulent=is_fraudulent,
            triggered_count=len(factors),
            rule_ids=[f.rule_id for f in factors],
        )

        return context
