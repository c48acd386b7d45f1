from .board import Column, ColumnValue, Item
from .rule import (
    Condition,
    ConditionLogic,
    Rule,
    new_rule_id,
    normalize_rule_data,
    parse_rules
)

__all__ = [
    # Board
    "Column", "ColumnValue", "Item",

    # Rules
    "Condition", "ConditionLogic", "Rule",
    "new_rule_id", "normalize_rule_data", "parse_rules"
]
