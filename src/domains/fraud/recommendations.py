"""Recommended actions for a scored transaction."""

from .models import (
    Recommendation,
    RecommendationAction,
    RiskFactor,
    RiskLevel,
    Severity,
)

A = RecommendationAction

_FRAUD_BLOCK = [
    (A.DECLINE, Severity.CRITICAL, "DECLINE this transaction immediately - high fraud probability"),
    (A.CONTACT_CARDHOLDER, Severity.CRITICAL, "Contact cardholder urgently via verified phone number"),
    (A.BLOCK_CARD, Severity.CRITICAL, "Block card temporarily and issue fraud alert"),
    (A.REVIEW_HISTORY, Severity.HIGH, "Review all recent transactions on this card"),
    (A.INVESTIGATE, Severity.HIGH, "Check for related fraudulent patterns across accounts"),
    (A.REPORT, Severity.HIGH, "File fraud report and notify payment network"),
]

_HIGH_BLOCK = [
    (A.HOLD, Severity.HIGH, "HOLD transaction for manual review"),
    (A.STEP_UP_AUTH, Severity.HIGH, "Require step-up authentication (OTP + CVV)"),
    (A.CONTACT_CARDHOLDER, Severity.HIGH, "Attempt to contact cardholder before approval"),
    (A.MONITOR, Severity.MEDIUM, "Monitor next 3 transactions closely"),
]

_MEDIUM_BLOCK = [
    (A.VERIFY, Severity.MEDIUM, "Request additional verification (CVV/OTP)"),
    (A.SET_ALERT, Severity.MEDIUM, "Set alert for similar transaction patterns"),
    (A.MONITOR, Severity.MEDIUM, "Monitor account activity for next 24 hours"),
    (A.VELOCITY_LIMIT, Severity.LOW, "Consider velocity limits for this card"),
]

_LOW_BLOCK = [
    (A.APPROVE, Severity.LOW, "Transaction appears legitimate - proceed normally"),
    (A.MONITOR, Severity.LOW, "Continue standard fraud monitoring"),
    (A.APPROVE, Severity.LOW, "Low risk - minimal additional action required"),
]

_TIER_BLOCKS = {
    RiskLevel.CRITICAL: _HIGH_BLOCK,
    RiskLevel.HIGH: _HIGH_BLOCK,
    RiskLevel.MEDIUM: _MEDIUM_BLOCK,
    RiskLevel.LOW: _LOW_BLOCK,
}

# One extra recommendation per named factor, appended after the tier block
FACTOR_RECOMMENDATIONS: dict[str, tuple[RecommendationAction, Severity, str]] = {
    "Invalid Card Number": (
        A.DECLINE,
        Severity.CRITICAL,
        "Reject transaction immediately - card number failed checksum validation",
    ),
    "High Transaction Velocity": (
        A.VELOCITY_LIMIT,
        Severity.CRITICAL,
        "Apply velocity limits and review the card for card-testing activity",
    ),
    "High-Risk Geographic Location": (
        A.VERIFY,
        Severity.HIGH,
        "Verify cardholder travel before authorizing transactions from this region",
    ),
    "Impossible Travel Velocity": (
        A.BLOCK_CARD,
        Severity.CRITICAL,
        "Confirm card possession - location changed faster than physically possible",
    ),
    "Suspicious Cardholder Name": (
        A.DECLINE,
        Severity.CRITICAL,
        "Reject transactions that use test or placeholder cardholder names",
    ),
    "Statistical Anomaly": (
        A.REVIEW_HISTORY,
        Severity.HIGH,
        "Compare the amount against the cardholder's recent spending before approval",
    ),
}


def generate_recommendations(
    factors: list[RiskFactor],
    is_fraudulent: bool,
    risk_level: RiskLevel,
) -> list[Recommendation]:
    """Tier block first (fraud overrides the tier), then targeted per-factor actions.

    The result is append-only: nothing is removed or reordered once added.
    """
    block = _FRAUD_BLOCK if is_fraudulent else _TIER_BLOCKS[risk_level]
    recommendations = [
        Recommendation(action=action, severity=severity, text=text)
        for action, severity, text in block
    ]

    for factor in factors:
        targeted = FACTOR_RECOMMENDATIONS.get(factor.name)
        if targeted is None:
            continue
        action, severity, text = targeted
        recommendations.append(Recommendation(action=action, severity=severity, text=text))

    return recommendations
