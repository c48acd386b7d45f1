"""
Pytest configuration and shared fixtures for highlighter tests.
"""
import json
import pytest
from datetime import date
from typing import Any, Dict, List

from highlighter.models import Column, Item, Rule

# Wednesday; its week runs Sunday 2024-05-12 .. Saturday 2024-05-18
REFERENCE_DAY = date(2024, 5, 15)


@pytest.fixture
def today() -> date:
    """Fixed reference date for relative date operators."""
    return REFERENCE_DAY


@pytest.fixture
def board_columns() -> List[Column]:
    """One column of each family plus an unrecognised type."""
    return [
        Column(id="status", title="Status", type="status",
               settings={"labels": {"0": "Working on it", "1": "Done", "2": "Stuck"}}),
        Column(id="text", title="Notes", type="text"),
        Column(id="budget", title="Budget", type="numbers"),
        Column(id="due", title="Due date", type="date"),
        Column(id="approved", title="Approved", type="checkbox"),
        Column(id="owner", title="Owner", type="person"),
        Column(id="rating", title="Rating", type="rating"),
        Column(id="link", title="Link", type="link"),
    ]


@pytest.fixture
def make_item():
    """Build an Item from {column_id: text} or {column_id: (text, raw_value)}."""
    def _make(values: Dict[str, Any], item_id: str = "i1", name: str = "Task") -> Item:
        column_values = []
        for column_id, entry in values.items():
            text, raw = entry if isinstance(entry, tuple) else (entry, None)
            column_values.append({"columnId": column_id, "text": text, "rawValue": raw})
        return Item(id=item_id, name=name, columnValues=column_values)
    return _make


@pytest.fixture
def date_payload():
    """JSON-encoded date payload as the board API ships it."""
    def _payload(value: Any) -> str:
        if isinstance(value, date):
            value = value.isoformat()
        return json.dumps({"date": value})
    return _payload


@pytest.fixture
def checkbox_payload():
    def _payload(checked: Any) -> str:
        return json.dumps({"checked": checked})
    return _payload


@pytest.fixture
def done_rule() -> Rule:
    return Rule(
        id="r-done",
        name="Done",
        colorId="green",
        conditions=[{"columnId": "status", "operator": "equals", "value": "Done"}]
    )


@pytest.fixture
def stuck_or_overdue_rule() -> Rule:
    return Rule(
        id="r-stuck",
        name="Needs attention",
        colorId="red",
        conditionLogic="OR",
        conditions=[
            {"columnId": "status", "operator": "equals", "value": "Stuck"},
            {"columnId": "due", "operator": "is_overdue"},
        ]
    )


@pytest.fixture
def sample_rule_documents() -> List[Dict[str, Any]]:
    """Stored rule documents, one in the legacy single-condition shape."""
    return [
        {
            "id": "r1",
            "name": "Big budget",
            "colorId": "purple",
            "enabled": True,
            "conditions": [
                {"columnId": "budget", "operator": "greater_than", "value": "1000"},
                {"columnId": "approved", "operator": "is_checked", "value": ""},
            ],
            "conditionLogic": "AND",
        },
        {
            "id": "r2",
            "name": "Legacy empty owner",
            "columnId": "owner",
            "operator": "is_empty",
            "value": "",
            "colorId": "gray",
            "enabled": False,
        },
    ]
