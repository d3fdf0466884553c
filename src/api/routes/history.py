"""Saved analysis history for the current user."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import require_user_id
from src.db.database import get_session
from src.domains.fraud.persistence import AnalysisRepository, record_to_dict

router = APIRouter(prefix="/api/v1/fraud/history", tags=["history"])


@router.get("")
async def list_history(
    user_id: str = Depends(require_user_id),  # noqa: B008
    session: AsyncSession = Depends(get_session),  # noqa: B008
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> dict:
    records, total = await AnalysisRepository(session).list_for_user(
        user_id, limit=limit, offset=offset
    )
    return {
        "items": [record_to_dict(r) for r in records],
        "total": total,
        "limit": limit,
        "offset": offset,
    }


@router.delete("/{record_id}")
async def delete_history_entry(
    record_id: str,
    user_id: str = Depends(require_user_id),  # noqa: B008
    session: AsyncSession = Depends(get_session),  # noqa: B008
) -> dict:
    deleted = await AnalysisRepository(session).delete_for_user(user_id, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Analysis {record_id} not found")
    return {"id": record_id, "deleted": True}
