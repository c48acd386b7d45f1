"""
Raw value payload decoding.

Column raw values are JSON documents, sometimes JSON-encoded twice. Every
decoder here returns None instead of raising; callers treat None as absent.
"""
import json
import logging
import re
from datetime import date, datetime
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def decode_payload(raw_value: Any) -> Optional[Dict[str, Any]]:
    """
    Decode a raw payload into a dict.

    Accepts an already-decoded dict, a JSON string, or a JSON string whose
    content is itself a JSON string.
    """
    value = raw_value
    # At most two layers of encoding are unwrapped
    for _ in range(2):
        if isinstance(value, dict):
            return value
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            value = json.loads(value)
        except ValueError:
            logger.debug(f"Undecodable payload: {str(raw_value)[:100]!r}")
            return None
    return value if isinstance(value, dict) else None


def decode_checked(raw_value: Any) -> Optional[bool]:
    """Checkbox payload ``{"checked": true}``; None when undecodable"""
    payload = decode_payload(raw_value)
    if payload is None:
        return None
    return payload.get("checked") is True


def parse_date(value: Any) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` or an ISO datetime string into a date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def decode_date_string(raw_value: Any) -> Optional[str]:
    """The raw ``date`` string of a date payload ``{"date": "YYYY-MM-DD"}``"""
    payload = decode_payload(raw_value)
    if payload is None:
        return None
    date_value = payload.get("date")
    if not isinstance(date_value, str) or not date_value.strip():
        return None
    return date_value.strip()


def decode_date(raw_value: Any) -> Optional[date]:
    """Date payload as a date; None when absent or unparseable"""
    date_string = decode_date_string(raw_value)
    if date_string is None:
        return None
    return parse_date(date_string)


def parse_number(value: Any) -> Optional[float]:
    """
    Parse the leading number of a string (``"12.5 kg"`` -> 12.5).

    Returns None when no number is present.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_NUMBER.match(value.strip())
    if not match:
        return None
    try:
        return float(match.group(0))
    except ValueError:
        return None
