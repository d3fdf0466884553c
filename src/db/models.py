"""SQLAlchemy ORM models for persisted fraud analyses."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class FraudAnalysisRecord(Base):
    """One saved analysis. Card numbers are stored masked (last 4 digits only)."""

    __tablename__ = "fraud_analyses"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, index=True)
    card_number_masked: Mapped[str] = mapped_column(String)
    cardholder_name: Mapped[str] = mapped_column(String)
    amount: Mapped[float] = mapped_column(Float)
    merchant_name: Mapped[str] = mapped_column(String)
    merchant_category: Mapped[str] = mapped_column(String)
    location: Mapped[str] = mapped_column(String)
    transaction_time: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    overall_risk_score: Mapped[int] = mapped_column(Integer)
    risk_level: Mapped[str] = mapped_column(String, index=True)
    is_fraudulent: Mapped[bool] = mapped_column(Boolean, default=False)
    confidence: Mapped[int] = mapped_column(Integer)
    risk_factors: Mapped[list] = mapped_column(JSONB, default=list)
    recommendations: Mapped[list] = mapped_column(JSONB, default=list)
    analyzed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
