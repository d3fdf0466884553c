"""Geography-based fraud rules."""

from datetime import timedelta

from ..config import FraudConfig
from ..history import HistoryWindow
from ..models import RiskFactor, Severity, Transaction, as_utc_naive
from .base import FraudRule


def country_of(location: str) -> str | None:
    """Country part of a "City, Country" string, lowercased.

    Returns None when the location has no comma-separated country part.
    """
    if "," not in location:
        return None
    country = location.rsplit(",", 1)[1].strip().lower()
    return country or None


def same_location(a: str, b: str) -> bool:
    return " ".join(a.lower().split()) == " ".join(b.lower().split())


class LocationRiskRule(FraudRule):
    """Scores the transaction's region: high-risk, medium-risk, or abroad.

    Risk lists match as case-insensitive substrings of the whole location.
    """

    rule_id = "location_risk"
    category = "geo"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        location = transaction.location
        lowered = location.lower()
        geo = config.geo

        if any(c in lowered for c in geo.high_risk_countries):
            return self._triggered(
                name="High-Risk Geographic Location",
                score=geo.high_risk_score,
                description=f"Transaction from high-fraud region: {location}",
                severity=Severity.CRITICAL,
            )

        if any(c in lowered for c in geo.medium_risk_countries):
            return self._triggered(
                name="Medium-Risk Geographic Location",
                score=geo.medium_risk_score,
                description=f"Transaction from elevated-risk region: {location}",
                severity=Severity.MEDIUM,
            )

        country = country_of(location)
        if country is not None and country not in geo.home_countries:
            return self._triggered(
                name="International Transaction",
                score=geo.international_score,
                description=f"Transaction outside home countries: {location}",
                severity=Severity.MEDIUM,
            )

        return self._not_triggered()


class ImpossibleTravelRule(FraudRule):
    """Triggers when the location changed since the previous transaction faster
    than anyone could travel."""

    rule_id = "impossible_travel"
    category = "geo"

    def evaluate(
        self,
        transaction: Transaction,
        history: HistoryWindow,
        config: FraudConfig,
    ) -> RiskFactor | None:
        previous = history.previous(transaction.transaction_time)
        if previous is None or same_location(previous.location, transaction.location):
            return self._not_triggered()

        gap = as_utc_naive(transaction.transaction_time) - previous.transaction_time
        limit = timedelta(minutes=config.geo.impossible_travel_minutes)
        if gap >= limit:
            return self._not_triggered()

        minutes = round(gap.total_seconds() / 60)
        return self._triggered(
            name="Impossible Travel Velocity",
            score=config.geo.impossible_travel_score,
            description=(
                f"Location changed from {previous.location} to {transaction.location}"
                f" in {minutes} minutes"
            ),
            severity=Severity.CRITICAL,
        )
