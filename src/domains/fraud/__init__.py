"""Card transaction fraud scoring domain."""

from .card import mask_card_number, validate_card
from .config import FraudConfig
from .exceptions import AnalysisPersistenceError, TransactionValidationError
from .history import HistoryWindow
from .models import (
    FraudAnalysis,
    MerchantCategory,
    Recommendation,
    RiskFactor,
    RiskLevel,
    Severity,
    Transaction,
)
from .registry import ScorerRegistry
from .rules import ALL_RULES
from .rules_engine import RulesEngine
from .scorer import TransactionRiskScorer
from .validation import validate_transaction

__all__ = [
    "ALL_RULES",
    "AnalysisPersistenceError",
    "FraudAnalysis",
    "FraudConfig",
    "HistoryWindow",
    "MerchantCategory",
    "Recommendation",
    "RiskFactor",
    "RiskLevel",
    "RulesEngine",
    "ScorerRegistry",
    "Severity",
    "Transaction",
    "TransactionRiskScorer",
    "TransactionValidationError",
    "mask_card_number",
    "validate_card",
    "validate_transaction",
]
