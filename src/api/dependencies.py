"""Shared FastAPI dependencies: caller identity and the scorer registry."""

from fastapi import Header, HTTPException, Request

from src.domains.fraud.registry import ScorerRegistry


async def get_current_user_id(
    x_user_id: str | None = Header(default=None),
) -> str | None:
    """User id resolved by the upstream identity provider, if any."""
    if x_user_id is None:
        return None
    return x_user_id.strip() or None


async def require_user_id(
    x_user_id: str | None = Header(default=None),
) -> str:
    user_id = await get_current_user_id(x_user_id)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return user_id


def get_scorer_registry(request: Request) -> ScorerRegistry:
    return request.app.state.scorer_registry
