"""
monday.com Board Service

Thin GraphQL client for the board data the highlighter consumes:
- Board items with their column values (one items_page)
- Board columns with their settings

The API is treated as an opaque data source; responses are parsed into
Item and Column models.
"""
import asyncio
import logging
from typing import Optional, Any, List, Dict, Tuple, Union
import httpx
from pydantic import ValidationError

from ..core.config import settings
from ..models.board import Column, Item

logger = logging.getLogger(__name__)

ITEMS_QUERY = """
query ($boardId: [ID!], $limit: Int!) {
  boards(ids: $boardId) {
    items_page(limit: $limit) {
      items {
        id
        name
        group {
          id
          title
          color
        }
        column_values {
          id
          type
          text
          value
        }
      }
    }
  }
}
"""

COLUMNS_QUERY = """
query ($boardId: [ID!]) {
  boards(ids: $boardId) {
    columns {
      id
      title
      type
      settings_str
    }
  }
}
"""


class MondayAPIError(Exception):
    """Board API request failed or returned GraphQL errors"""

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class MondayClient:
    """
    monday.com GraphQL client

    Handles:
    - Authenticated GraphQL requests
    - Board items (items_page, capped at MONDAY_ITEMS_LIMIT)
    - Board columns (the built-in ``name`` column is dropped)
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        token: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            api_url: GraphQL endpoint (defaults to env MONDAY_API_URL)
            token: API token (defaults to env MONDAY_API_TOKEN)
            api_version: API-Version header (defaults to env MONDAY_API_VERSION)
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests)
        """
        self.api_url = api_url or settings.MONDAY_API_URL
        self.token = token or settings.MONDAY_API_TOKEN
        self.api_version = api_version or settings.MONDAY_API_VERSION
        self.timeout = timeout or settings.MONDAY_TIMEOUT_SECONDS
        self.transport = transport

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": self.token or "",
            "API-Version": self.api_version
        }

    async def _query(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Run a GraphQL query and return its ``data`` object"""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json={"query": query, "variables": variables},
                    headers=self._get_headers()
                )
        except httpx.HTTPError as e:
            logger.error(f"Board API request failed: {e}")
            raise MondayAPIError(f"Board API request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"Board API error: {response.status_code} - {response.text[:500]}")
            raise MondayAPIError(
                f"Board API returned HTTP {response.status_code}",
                status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise MondayAPIError("Board API returned invalid JSON", status_code=response.status_code) from e

        if body.get("errors"):
            logger.error(f"Board API GraphQL errors: {body['errors']}")
            raise MondayAPIError("Board API returned errors", status_code=response.status_code, errors=body["errors"])

        return body.get("data") or {}

    @staticmethod
    def _first_board(data: Dict[str, Any]) -> Dict[str, Any]:
        boards = data.get("boards") or []
        return boards[0] if boards and isinstance(boards[0], dict) else {}

    async def get_board_items(self, board_id: Union[str, int], limit: Optional[int] = None) -> List[Item]:
        """Fetch the board's items (first page only)"""
        data = await self._query(ITEMS_QUERY, {
            "boardId": [str(board_id)],
            "limit": limit or settings.MONDAY_ITEMS_LIMIT
        })
        raw_items = (self._first_board(data).get("items_page") or {}).get("items") or []

        items: List[Item] = []
        for raw in raw_items:
            try:
                items.append(Item.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping malformed item on board {board_id}: {e.error_count()} error(s)")

        logger.info(f"Loaded {len(items)} item(s) from board {board_id}")
        return items

    async def get_board_columns(self, board_id: Union[str, int], include_name: bool = False) -> List[Column]:
        """Fetch the board's columns"""
        data = await self._query(COLUMNS_QUERY, {"boardId": [str(board_id)]})
        raw_columns = self._first_board(data).get("columns") or []

        columns: List[Column] = []
        for raw in raw_columns:
            try:
                column = Column.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Skipping malformed column on board {board_id}: {e.error_count()} error(s)")
                continue
            if column.type == "name" and not include_name:
                continue
            columns.append(column)

        return columns

    async def get_board(self, board_id: Union[str, int]) -> Tuple[List[Column], List[Item]]:
        """Fetch columns and items concurrently"""
        columns, items = await asyncio.gather(
            self.get_board_columns(board_id),
            self.get_board_items(board_id)
        )
        return columns, items


def get_monday_client() -> MondayClient:
    """Client configured from settings"""
    return MondayClient()
