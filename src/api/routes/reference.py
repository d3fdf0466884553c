"""Reference catalog endpoints used to populate input forms."""

from fastapi import APIRouter

from src.domains.fraud.reference import LOCATIONS, MERCHANT_CATEGORY_LABELS

router = APIRouter(prefix="/api/v1/reference", tags=["reference"])


@router.get("/locations")
async def list_locations() -> dict:
    return {"groups": LOCATIONS}


@router.get("/merchant-categories")
async def list_merchant_categories() -> dict:
    return {
        "items": [
            {"value": category.value, "label": label}
            for category, label in MERCHANT_CATEGORY_LABELS.items()
        ]
    }
