"""
Highlight rule models.

Rules are stored and exchanged as camelCase JSON documents. Two shapes exist
in stored data: the current multi-condition shape
(``{conditions: [...], conditionLogic}``) and the legacy single-condition
shape where ``columnId``/``operator``/``value`` sit directly on the rule.
``normalize_rule_data`` migrates the legacy shape once, at parse time, so
nothing downstream ever sees it.
"""
import uuid
import logging
from enum import Enum
from typing import Optional, Any, List, Dict
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

LEGACY_CONDITION_KEYS = ("columnId", "column_id", "operator", "value")


class ConditionLogic(str, Enum):
    """How a rule combines its conditions"""
    AND = "AND"
    OR = "OR"


def new_rule_id() -> str:
    """Generate a fresh rule id"""
    return uuid.uuid4().hex


class Condition(BaseModel):
    """A single predicate: column + operator + optional comparison value"""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    column_id: str = Field(alias="columnId")
    operator: str
    value: Optional[str] = None

    @field_validator("column_id", mode="before")
    @classmethod
    def coerce_column_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, value: Any) -> Any:
        # Number inputs in the editor may arrive as JSON numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columnId": self.column_id,
            "operator": self.operator,
            "value": self.value,
        }


def _normalize_logic(value: Any) -> str:
    if isinstance(value, ConditionLogic):
        return value.value
    if isinstance(value, str) and value.strip().upper() in ConditionLogic.__members__:
        return value.strip().upper()
    if value is not None:
        logger.warning(f"Unknown condition logic {value!r}, using AND")
    return ConditionLogic.AND.value


def normalize_rule_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Migrate a raw rule document to the canonical multi-condition shape.

    - Legacy ``{columnId, operator, value}`` on the rule becomes a single
      condition with AND logic.
    - ``conditionLogic`` is upper-cased; anything unrecognised becomes AND.

    The input is never modified.
    """
    normalized = dict(data)

    conditions = normalized.get("conditions")
    if conditions is None:
        legacy_column = normalized.get("columnId", normalized.get("column_id"))
        if legacy_column is not None or "operator" in normalized:
            normalized["conditions"] = [{
                "columnId": legacy_column,
                "operator": normalized.get("operator"),
                "value": normalized.get("value"),
            }]
            normalized["conditionLogic"] = ConditionLogic.AND.value
        else:
            normalized["conditions"] = []

    for key in LEGACY_CONDITION_KEYS:
        normalized.pop(key, None)

    logic = normalized.pop("condition_logic", None)
    normalized["conditionLogic"] = _normalize_logic(normalized.get("conditionLogic", logic))

    if normalized.get("id") is not None:
        normalized["id"] = str(normalized["id"])
    elif "id" in normalized:
        normalized.pop("id")

    return normalized


class Rule(BaseModel):
    """
    A highlighting rule.

    Lenient on purpose for values the engine can fail closed on: unknown
    color ids, unknown operators and empty condition lists all parse.
    ``RuleValidator`` reports those as configuration errors.
    """

    model_config = {"populate_by_name": True, "extra": "ignore"}

    id: str = Field(default_factory=new_rule_id)
    name: str = ""
    color_id: str = Field(default="yellow", alias="colorId")
    enabled: bool = True
    conditions: List[Condition] = Field(default_factory=list)
    condition_logic: ConditionLogic = Field(default=ConditionLogic.AND, alias="conditionLogic")

    @model_validator(mode="before")
    @classmethod
    def migrate_legacy_shape(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return normalize_rule_data(data)
        return data

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def effective_logic(self) -> ConditionLogic:
        """Logic actually applied; a single condition is always AND"""
        if len(self.conditions) == 1:
            return ConditionLogic.AND
        return self.condition_logic

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        """Serialize to the camelCase rule document shape"""
        data: Dict[str, Any] = {}
        if include_id:
            data["id"] = self.id
        data.update({
            "name": self.name,
            "colorId": self.color_id,
            "enabled": self.enabled,
            "conditions": [condition.to_dict() for condition in self.conditions],
            "conditionLogic": self.condition_logic.value,
        })
        return data


def parse_rules(raw_rules: List[Any]) -> List[Rule]:
    """Parse a list of stored rule documents (or Rule instances) into Rules"""
    rules: List[Rule] = []
    for raw in raw_rules:
        if isinstance(raw, Rule):
            rules.append(raw)
        else:
            rules.append(Rule.model_validate(raw))
    return rules
