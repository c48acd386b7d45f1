"""
Boards API routes - highlight a live board
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...engine.palette import is_dark_theme
from ...engine.resolver import HighlightResolver
from ...models import Rule
from ...services.monday import MondayAPIError, MondayClient, get_monday_client
from .highlights import serialize_highlights

router = APIRouter(prefix="/boards", tags=["boards"])


class BoardHighlightRequest(BaseModel):
    rules: List[Rule]
    dark_mode: bool = False
    theme: Optional[str] = None
    today: Optional[date] = None


@router.post("/{board_id}/highlights")
async def highlight_board(
    board_id: str,
    request: BoardHighlightRequest,
    client: MondayClient = Depends(get_monday_client)
):
    """Fetch the board's columns and items, then resolve highlights"""
    try:
        columns, items = await client.get_board(board_id)
    except MondayAPIError as e:
        raise HTTPException(status_code=502, detail=str(e))

    dark_mode = request.dark_mode or is_dark_theme(request.theme)
    highlights = HighlightResolver.resolve_items(
        items, request.rules, columns, dark_mode=dark_mode, today=request.today
    )
    return {
        "board_id": board_id,
        "item_count": len(items),
        "highlights": serialize_highlights(highlights)
    }
