"""Fraud scoring rules package.

Exports ALL_RULES (list of all rule instances) and individual rule classes
for direct use.
"""

from .amount import HighValueMerchantRule, TransactionAmountRule, WeekendHighValueRule
from .base import FraudRule
from .card import CardValidityRule
from .geo import ImpossibleTravelRule, LocationRiskRule, country_of
from .identity import IncompleteNameRule, SuspiciousNameRule
from .merchant import MerchantCategoryRule
from .outliers import StatisticalOutlierRule
from .temporal import UnusualHourRule
from .velocity import TransactionVelocityRule

# All rule instances in evaluation order; factor order in an analysis follows it
ALL_RULES: list[FraudRule] = [
    CardValidityRule(),
    TransactionVelocityRule(),
    TransactionAmountRule(),
    UnusualHourRule(),
    WeekendHighValueRule(),
    LocationRiskRule(),
    ImpossibleTravelRule(),
    MerchantCategoryRule(),
    HighValueMerchantRule(),
    IncompleteNameRule(),
    SuspiciousNameRule(),
    StatisticalOutlierRule(),
]

__all__ = [
    "ALL_RULES",
    "FraudRule",
    "country_of",
    # Card and identity
    "CardValidityRule",
    "IncompleteNameRule",
    "SuspiciousNameRule",
    # Velocity and history
    "TransactionVelocityRule",
    "StatisticalOutlierRule",
    # Amount
    "TransactionAmountRule",
    "WeekendHighValueRule",
    "HighValueMerchantRule",
    # Time and place
    "UnusualHourRule",
    "LocationRiskRule",
    "ImpossibleTravelRule",
    "MerchantCategoryRule",
]
