"""Fraud scoring configuration with sensible defaults."""

import os
from dataclasses import dataclass, field


@dataclass
class VelocityThresholds:
    window_minutes: int = 5
    elevated_count: int = 4
    high_count: int = 6
    elevated_score: int = 15
    high_score: int = 25


@dataclass
class AmountThresholds:
    very_high_min: float = 200_000.0
    high_min: float = 100_000.0
    elevated_min: float = 50_000.0
    micro_max: float = 50.0
    small_max: float = 100.0
    very_high_score: int = 25
    high_score: int = 20
    elevated_score: int = 12
    micro_score: int = 8
    small_score: int = 4
    weekend_score: int = 8
    high_value_merchant_score: int = 15


@dataclass
class TimeThresholds:
    # Half-open hour ranges [start, end)
    very_late_hours: tuple[int, int] = (2, 5)
    late_start_hour: int = 23
    late_end_hour: int = 6
    very_late_score: int = 15
    late_score: int = 10


@dataclass
class GeoThresholds:
    high_risk_countries: tuple[str, ...] = (
        "russia",
        "nigeria",
        "ghana",
        "pakistan",
        "ukraine",
        "belarus",
    )
    medium_risk_countries: tuple[str, ...] = (
        "china",
        "vietnam",
        "indonesia",
        "romania",
        "bulgaria",
    )
    home_countries: tuple[str, ...] = ("india", "usa", "united states")
    high_risk_score: int = 25
    medium_risk_score: int = 12
    international_score: int = 15
    impossible_travel_minutes: int = 60
    impossible_travel_score: int = 30


@dataclass
class MerchantThresholds:
    category_scores: dict[str, int] = field(
        default_factory=lambda: {
            "gas_station": 18,
            "online_shopping": 14,
            "travel": 12,
            "entertainment": 8,
            "utilities": 3,
        }
    )
    high_value_categories: tuple[str, ...] = ("gas_station", "online_shopping")


@dataclass
class IdentityThresholds:
    min_name_tokens: int = 2
    suspicious_keywords: tuple[str, ...] = ("test", "fraud", "admin", "user")
    incomplete_name_score: int = 5
    suspicious_name_score: int = 35
    invalid_card_score: int = 30
    unknown_issuer_score: int = 10


@dataclass
class StatisticsThresholds:
    min_history: int = 6
    zscore_threshold: float = 3.0
    outlier_score: int = 18


@dataclass
class HistorySettings:
    retention_hours: int = 24
    max_entries: int = 500


@dataclass
class RegistrySettings:
    max_accounts: int = 10_000
    idle_ttl_seconds: int = 86_400


@dataclass
class ScoringPolicy:
    medium_threshold: int = 35
    high_threshold: int = 60
    critical_threshold: int = 80
    fraud_threshold: int = 60
    max_score: int = 100
    base_confidence: int = 65
    critical_confidence_boost: int = 8
    high_confidence_boost: int = 5
    factor_confidence_boost: int = 2
    max_confidence: int = 98


@dataclass
class FraudConfig:
    velocity: VelocityThresholds = field(default_factory=VelocityThresholds)
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    time: TimeThresholds = field(default_factory=TimeThresholds)
    geo: GeoThresholds = field(default_factory=GeoThresholds)
    merchant: MerchantThresholds = field(default_factory=MerchantThresholds)
    identity: IdentityThresholds = field(default_factory=IdentityThresholds)
    statistics: StatisticsThresholds = field(default_factory=StatisticsThresholds)
    history: HistorySettings = field(default_factory=HistorySettings)
    registry: RegistrySettings = field(default_factory=RegistrySettings)
    scoring: ScoringPolicy = field(default_factory=ScoringPolicy)

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        # Velocity overrides
        if v := os.getenv("FRAUD_VELOCITY_WINDOW_MINUTES"):
            config.velocity.window_minutes = int(v)
        if v := os.getenv("FRAUD_VELOCITY_HIGH_COUNT"):
            config.velocity.high_count = int(v)

        # Amount overrides
        if v := os.getenv("FRAUD_AMOUNT_VERY_HIGH_MIN"):
            config.amount.very_high_min = float(v)
        if v := os.getenv("FRAUD_AMOUNT_HIGH_MIN"):
            config.amount.high_min = float(v)
        if v := os.getenv("FRAUD_AMOUNT_ELEVATED_MIN"):
            config.amount.elevated_min = float(v)

        # Geo overrides (comma-separated lists)
        if v := os.getenv("FRAUD_HOME_COUNTRIES"):
            config.geo.home_countries = tuple(
                c.strip().lower() for c in v.split(",") if c.strip()
            )
        if v := os.getenv("FRAUD_HIGH_RISK_COUNTRIES"):
            config.geo.high_risk_countries = tuple(
                c.strip().lower() for c in v.split(",") if c.strip()
            )

        # History overrides
        if v := os.getenv("FRAUD_HISTORY_RETENTION_HOURS"):
            config.history.retention_hours = int(v)
        if v := os.getenv("FRAUD_HISTORY_MAX_ENTRIES"):
            config.history.max_entries = int(v)

        # Registry overrides
        if v := os.getenv("FRAUD_REGISTRY_MAX_ACCOUNTS"):
            config.registry.max_accounts = int(v)
        if v := os.getenv("FRAUD_REGISTRY_IDLE_TTL_SECONDS"):
            config.registry.idle_ttl_seconds = int(v)

        # Scoring overrides
        if v := os.getenv("FRAUD_THRESHOLD"):
            config.scoring.fraud_threshold = int(v)

        return config


# Module-level default instance
default_config = FraudConfig()
