"""
Highlights API routes
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter
from pydantic import BaseModel

from ...engine.palette import is_dark_theme
from ...engine.resolver import HighlightResolver
from ...models import Column, Item, Rule

router = APIRouter(prefix="/highlights", tags=["highlights"])


class HighlightRequest(BaseModel):
    """Explicit board snapshot to highlight"""
    columns: List[Column]
    items: List[Item]
    rules: List[Rule]
    dark_mode: bool = False
    theme: Optional[str] = None  # "dark"/"black" imply dark_mode
    today: Optional[date] = None


def serialize_highlights(highlights) -> dict:
    return {
        item_id: result.to_dict() if result else None
        for item_id, result in highlights.items()
    }


@router.post("")
async def compute_highlights(request: HighlightRequest):
    """Highlight of every item, keyed by item id (null when no rule matches)"""
    dark_mode = request.dark_mode or is_dark_theme(request.theme)
    highlights = HighlightResolver.resolve_items(
        request.items,
        request.rules,
        request.columns,
        dark_mode=dark_mode,
        today=request.today
    )
    return {
        "highlights": serialize_highlights(highlights),
        "highlighted_count": sum(1 for result in highlights.values() if result),
        "dark_mode": dark_mode
    }
