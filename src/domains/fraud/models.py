"""Pydantic models for the fraud domain."""

import re
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_CARD_CHARS = re.compile(r"^[\d\s-]+$")


class MerchantCategory(StrEnum):
    RETAIL = "retail"
    ONLINE_SHOPPING = "online_shopping"
    GAS_STATION = "gas_station"
    RESTAURANT = "restaurant"
    TRAVEL = "travel"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    HEALTHCARE = "healthcare"
    OTHER = "other"


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CardIssuer(StrEnum):
    VISA = "Visa"
    MASTERCARD = "Mastercard"
    AMEX = "Amex"
    DISCOVER = "Discover"
    JCB = "JCB"
    RUPAY = "RuPay"
    UNKNOWN = "unknown"


class RecommendationAction(StrEnum):
    DECLINE = "decline"
    CONTACT_CARDHOLDER = "contact_cardholder"
    BLOCK_CARD = "block_card"
    REVIEW_HISTORY = "review_history"
    INVESTIGATE = "investigate"
    REPORT = "report"
    HOLD = "hold"
    STEP_UP_AUTH = "step_up_auth"
    VERIFY = "verify"
    SET_ALERT = "set_alert"
    MONITOR = "monitor"
    VELOCITY_LIMIT = "velocity_limit"
    APPROVE = "approve"


class Transaction(BaseModel):
    """A single submitted card transaction.

    Construction runs every input check; a Transaction that exists is
    well-formed and safe to hand to the scorer.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    card_number: str = Field(min_length=1)
    cardholder_name: str = Field(min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False)
    merchant_name: str = Field(min_length=1)
    merchant_category: MerchantCategory
    location: str = Field(min_length=1)
    transaction_time: datetime
    device_id: str | None = None

    @field_validator("card_number")
    @classmethod
    def _card_number_is_numeric(cls, value: str) -> str:
        if not _CARD_CHARS.match(value) or not any(ch.isdigit() for ch in value):
            raise ValueError("card number may only contain digits, spaces and dashes")
        return value

    @field_validator("transaction_time")
    @classmethod
    def _not_in_future(cls, value: datetime) -> datetime:
        now = datetime.now(UTC) if value.tzinfo else datetime.now()
        if value > now:
            raise ValueError("transaction time cannot be in the future")
        return value


class CardValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    issuer: CardIssuer = CardIssuer.UNKNOWN


class RiskFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    severity: Severity
    score: int = Field(ge=0)
    description: str
    rule_id: str = ""
    category: str = ""


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: RecommendationAction
    severity: Severity
    text: str


class FraudAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    is_fraudulent: bool
    confidence: int = Field(ge=0, le=100)
    risk_factors: list[RiskFactor] = []
    recommendations: list[Recommendation] = []
    timestamp: datetime


def as_utc_naive(value: datetime) -> datetime:
    """Comparable form of a timestamp. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class HistoryEntry(BaseModel):
    """What the rolling window keeps about a past transaction (no card data)."""

    model_config = ConfigDict(frozen=True)

    amount: float
    transaction_time: datetime
    location: str
    merchant_category: MerchantCategory

    @field_validator("transaction_time")
    @classmethod
    def _normalize_time(cls, value: datetime) -> datetime:
        return as_utc_naive(value)

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "HistoryEntry":
        return cls(
            amount=transaction.amount,
            transaction_time=transaction.transaction_time,
            location=transaction.location,
            merchant_category=transaction.merchant_category,
        )


class ScoringContext(BaseModel):
    """Aggregated rule output before recommendations are attached."""

    raw_score: int = Field(ge=0)
    overall_risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    is_fraudulent: bool
    confidence: int = Field(ge=0, le=100)
    risk_factors: list[RiskFactor] = []
