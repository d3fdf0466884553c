"""Persistence of masked analysis records for a user's history."""

import uuid
from datetime import UTC, datetime
from typing import Any

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.models import FraudAnalysisRecord

from .card import mask_card_number
from .exceptions import AnalysisPersistenceError
from .models import FraudAnalysis, Transaction

logger = structlog.get_logger()


def build_record_payload(
    user_id: str,
    transaction: Transaction,
    analysis: FraudAnalysis,
) -> dict[str, Any]:
    """Flatten a transaction and its analysis into a storable row.

    The card number is masked here; nothing downstream ever sees the full PAN.
    """
    return {
        "user_id": user_id,
        "card_number_masked": mask_card_number(transaction.card_number),
        "cardholder_name": transaction.cardholder_name,
        "amount": transaction.amount,
        "merchant_name": transaction.merchant_name,
        "merchant_category": transaction.merchant_category.value,
        "location": transaction.location,
        "transaction_time": transaction.transaction_time,
        "overall_risk_score": analysis.overall_risk_score,
        "risk_level": analysis.risk_level.value,
        "is_fraudulent": analysis.is_fraudulent,
        "confidence": analysis.confidence,
        "risk_factors": [f.model_dump(mode="json") for f in analysis.risk_factors],
        "recommendations": [r.model_dump(mode="json") for r in analysis.recommendations],
        "analyzed_at": analysis.timestamp,
    }


def record_to_dict(record: FraudAnalysisRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "card_number_masked": record.card_number_masked,
        "cardholder_name": record.cardholder_name,
        "amount": record.amount,
        "merchant_name": record.merchant_name,
        "merchant_category": record.merchant_category,
        "location": record.location,
        "transaction_time": record.transaction_time.isoformat(),
        "overall_risk_score": record.overall_risk_score,
        "risk_level": record.risk_level,
        "is_fraudulent": record.is_fraudulent,
        "confidence": record.confidence,
        "risk_factors": record.risk_factors,
        "recommendations": record.recommendations,
        "analyzed_at": record.analyzed_at.isoformat(),
        "created_at": record.created_at.isoformat() if record.created_at else None,
    }


class AnalysisRepository:
    """Reads and writes FraudAnalysisRecord rows scoped to one user."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(
        self,
        user_id: str,
        transaction: Transaction,
        analysis: FraudAnalysis,
    ) -> FraudAnalysisRecord:
        record = FraudAnalysisRecord(
            id=str(uuid.uuid4()),
            created_at=datetime.now(UTC),
            **build_record_payload(user_id, transaction, analysis),
        )
        try:
            self._session.add(record)
            await self._session.commit()
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("analysis_save_failed", user_id=user_id, error=str(exc))
            try:
                await self._session.rollback()
            except (SQLAlchemyError, OSError) as rollback_exc:
                logger.warning(
                    "analysis_rollback_failed", user_id=user_id, error=str(rollback_exc)
                )
            raise AnalysisPersistenceError("failed to save analysis") from exc

        logger.info(
            "analysis_saved",
            record_id=record.id,
            user_id=user_id,
            risk_level=record.risk_level,
        )
        return record

    async def list_for_user(
        self,
        user_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[FraudAnalysisRecord], int]:
        """Newest first. Returns (page, total)."""
        count_stmt = (
            select(func.count())
            .select_from(FraudAnalysisRecord)
            .where(FraudAnalysisRecord.user_id == user_id)
        )
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(FraudAnalysisRecord)
            .where(FraudAnalysisRecord.user_id == user_id)
            .order_by(FraudAnalysisRecord.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all()), total

    async def delete_for_user(self, user_id: str, record_id: str) -> bool:
        stmt = delete(FraudAnalysisRecord).where(
            FraudAnalysisRecord.id == record_id,
            FraudAnalysisRecord.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.commit()
        deleted = (result.rowcount or 0) > 0
        logger.info("analysis_deleted", record_id=record_id, user_id=user_id, deleted=deleted)
        return deleted
