"""
Unit tests for the board API client (no network: httpx.MockTransport).
"""
import json
import httpx
import pytest

from highlighter.services.monday import MondayAPIError, MondayClient


BOARD_COLUMNS = [
    {"id": "name", "title": "Name", "type": "name", "settings_str": "{}"},
    {"id": "status", "title": "Status", "type": "status",
     "settings_str": '{"labels": {"1": "Done"}}'},
    {"id": "due", "title": "Due date", "type": "date", "settings_str": "{}"},
]

BOARD_ITEMS = [
    {
        "id": "101",
        "name": "Write report",
        "group": {"id": "topics", "title": "Group", "color": "#579bfc"},
        "column_values": [
            {"id": "status", "type": "status", "text": "Done", "value": '{"index": 1}'},
            {"id": "due", "type": "date", "text": "2024-05-01", "value": '{"date": "2024-05-01"}'},
        ],
    },
    {"name": "no id, skipped"},
]


def make_client(handler, **kwargs):
    return MondayClient(
        api_url="https://board.test/v2",
        token="secret-token",
        api_version="2024-10",
        transport=httpx.MockTransport(handler),
        **kwargs
    )


def board_handler(requests):
    """Answer column and item queries, recording each request."""
    def _handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        requests.append((request, body))
        if "items_page" in body["query"]:
            board = {"items_page": {"items": BOARD_ITEMS}}
        else:
            board = {"columns": BOARD_COLUMNS}
        return httpx.Response(200, json={"data": {"boards": [board]}})
    return _handler


class TestBoardQueries:
    """Tests for parsing board responses."""

    @pytest.mark.asyncio
    async def test_columns_drop_name_column(self):
        client = make_client(board_handler([]))
        columns = await client.get_board_columns(42)

        assert [c.id for c in columns] == ["status", "due"]
        assert columns[0].settings == {"labels": {"1": "Done"}}

    @pytest.mark.asyncio
    async def test_columns_keep_name_on_request(self):
        client = make_client(board_handler([]))
        columns = await client.get_board_columns(42, include_name=True)
        assert columns[0].type == "name"

    @pytest.mark.asyncio
    async def test_items_parsed_and_malformed_skipped(self):
        client = make_client(board_handler([]))
        items = await client.get_board_items(42)

        assert len(items) == 1
        item = items[0]
        assert item.id == "101"
        assert item.get_column_value("status").text == "Done"
        assert item.get_column_value("due").raw_value == '{"date": "2024-05-01"}'

    @pytest.mark.asyncio
    async def test_request_shape(self):
        requests = []
        client = make_client(board_handler(requests))
        await client.get_board_items(42, limit=25)

        request, body = requests[0]
        assert str(request.url) == "https://board.test/v2"
        assert request.headers["Authorization"] == "secret-token"
        assert request.headers["API-Version"] == "2024-10"
        assert body["variables"] == {"boardId": ["42"], "limit": 25}

    @pytest.mark.asyncio
    async def test_default_items_limit(self):
        requests = []
        client = make_client(board_handler(requests))
        await client.get_board_items("42")
        assert requests[0][1]["variables"]["limit"] == 500

    @pytest.mark.asyncio
    async def test_get_board(self):
        client = make_client(board_handler([]))
        columns, items = await client.get_board(42)
        assert len(columns) == 2
        assert [i.id for i in items] == ["101"]

    @pytest.mark.asyncio
    async def test_missing_board_is_empty(self):
        client = make_client(lambda request: httpx.Response(200, json={"data": {"boards": []}}))
        assert await client.get_board_items(42) == []
        assert await client.get_board_columns(42) == []


class TestErrors:
    """Tests for failed requests."""

    @pytest.mark.asyncio
    async def test_graphql_errors(self):
        client = make_client(lambda request: httpx.Response(
            200, json={"errors": [{"message": "Board not found"}]}
        ))
        with pytest.raises(MondayAPIError) as exc_info:
            await client.get_board_items(42)
        assert exc_info.value.errors == [{"message": "Board not found"}]

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        client = make_client(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(MondayAPIError) as exc_info:
            await client.get_board_columns(42)
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(MondayAPIError, match="invalid JSON"):
            await client.get_board_columns(42)

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def _handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(_handler)
        with pytest.raises(MondayAPIError, match="request failed"):
            await client.get_board(42)
