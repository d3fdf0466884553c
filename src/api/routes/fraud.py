"""Fraud analysis endpoints: score a transaction and save it to history."""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_current_user_id, get_scorer_registry
from src.db.database import get_session
from src.domains.fraud.exceptions import AnalysisPersistenceError
from src.domains.fraud.persistence import AnalysisRepository
from src.domains.fraud.registry import ScorerRegistry, account_key
from src.domains.fraud.rules import ALL_RULES
from src.domains.fraud.validation import validate_transaction

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/fraud", tags=["fraud"])

SAVE_FAILED_WARNING = "Analysis complete but failed to save to history"


@router.post("/analyze")
async def analyze_transaction(
    payload: dict[str, Any] = Body(...),  # noqa: B008
    user_id: str | None = Depends(get_current_user_id),  # noqa: B008
    x_session_id: str | None = Header(default=None),
    registry: ScorerRegistry = Depends(get_scorer_registry),  # noqa: B008
    session: AsyncSession = Depends(get_session),  # noqa: B008
) -> dict:
    transaction = validate_transaction(payload)

    # Each account (or anonymous browser session) gets its own history
    scorer = registry.get(account_key(user_id, x_session_id))
    analysis = scorer.evaluate(transaction)

    saved = False
    record_id = None
    warning = None
    if user_id:
        try:
            record = await AnalysisRepository(session).save(user_id, transaction, analysis)
            saved = True
            record_id = record.id
        except AnalysisPersistenceError:
            warning = SAVE_FAILED_WARNING

    return {
        "analysis": analysis.model_dump(mode="json"),
        "saved": saved,
        "record_id": record_id,
        "warning": warning,
    }


@router.get("/rules")
async def list_rules(
    registry: ScorerRegistry = Depends(get_scorer_registry),  # noqa: B008
) -> dict:
    """Return rule ids, categories and the tier policy in force."""
    policy = registry.config.scoring

    return {
        "ruleset": "rules-24h-v1",
        "rule_count": len(ALL_RULES),
        "rules": [
            {"rule_id": rule.rule_id, "category": rule.category} for rule in ALL_RULES
        ],
        "tiers": {
            "medium": policy.medium_threshold,
            "high": policy.high_threshold,
            "critical": policy.critical_threshold,
        },
        "fraud_threshold": policy.fraud_threshold,
        "max_confidence": policy.max_confidence,
    }
