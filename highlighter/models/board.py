"""
Board data models - columns, items and their column values.

These mirror what the board API returns. Field names accept both the
board API shape (``id``/``value``/``column_values``) and the camelCase shape
used by rule documents and test fixtures (``columnId``/``rawValue``/``columnValues``).
"""
import json
import logging
from typing import Optional, Any, List, Dict
from pydantic import BaseModel, Field, AliasChoices, field_validator

logger = logging.getLogger(__name__)


class Column(BaseModel):
    """Board column definition (read-only)"""

    model_config = {"populate_by_name": True, "extra": "allow"}

    id: str
    title: str = ""
    type: str = "text"
    settings: Optional[Dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("settings", "settings_str"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("settings", mode="before")
    @classmethod
    def decode_settings(cls, value: Any) -> Any:
        """The board API ships settings as a JSON string (settings_str)"""
        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                decoded = json.loads(value)
            except ValueError:
                logger.warning(f"Ignoring unparseable column settings: {value[:100]!r}")
                return None
            return decoded if isinstance(decoded, dict) else None
        return value


class ColumnValue(BaseModel):
    """One column value of an item"""

    model_config = {"populate_by_name": True, "extra": "allow"}

    column_id: str = Field(
        validation_alias=AliasChoices("columnId", "column_id", "id"),
        serialization_alias="columnId",
    )
    type: Optional[str] = None
    text: Optional[str] = None
    # Opaque type-specific payload, usually a JSON-encoded string
    raw_value: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("rawValue", "raw_value", "value"),
        serialization_alias="rawValue",
    )

    @field_validator("column_id", mode="before")
    @classmethod
    def coerce_column_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class Item(BaseModel):
    """Board item (a table row)"""

    model_config = {"populate_by_name": True, "extra": "allow"}

    id: str
    name: str = ""
    column_values: List[ColumnValue] = Field(
        default_factory=list,
        validation_alias=AliasChoices("columnValues", "column_values"),
        serialization_alias="columnValues",
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    def get_column_value(self, column_id: str) -> Optional[ColumnValue]:
        """Return the value for a column, or None when the item has none"""
        for column_value in self.column_values:
            if column_value.column_id == column_id:
                return column_value
        return None
