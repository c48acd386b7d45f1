"""
Catalog API routes - operators per column type and the color palette
"""
from fastapi import APIRouter

from ...engine.operators import family_for_column_type, operators_for_column_type
from ...engine.palette import HIGHLIGHT_COLORS

router = APIRouter(tags=["catalog"])


@router.get("/operators/{column_type}")
async def get_operators(column_type: str):
    """Operators available for a column type, in display order"""
    return {
        "column_type": column_type,
        "family": family_for_column_type(column_type).value,
        "operators": [
            {**spec.to_dict(), "requires_value": spec.requires_value}
            for spec in operators_for_column_type(column_type)
        ]
    }


@router.get("/colors")
async def get_colors():
    """The highlight palette - returns array directly"""
    return [color.to_dict() for color in HIGHLIGHT_COLORS]
