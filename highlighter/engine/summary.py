"""
Human-readable rule summaries for rule lists.
"""
from typing import Optional

from ..models.rule import Condition, ConditionLogic, Rule
from .evaluator import ColumnsArg, index_columns
from .operators import get_operator, operator_needs_value

UNNAMED_RULE = "Unnamed Rule"


def display_name(rule: Rule) -> str:
    return rule.name or UNNAMED_RULE


def describe_condition(condition: Condition, columns: ColumnsArg) -> str:
    """e.g. ``"Status" is "Done"`` or ``"Due date" is overdue``"""
    column = index_columns(columns).get(condition.column_id)
    column_title = (column.title if column else None) or condition.column_id

    spec = get_operator(column.type if column else None, condition.operator)
    label = spec.label if spec else condition.operator

    text = f'"{column_title}" {label}'
    if operator_needs_value(condition.operator) and condition.value:
        text += f' "{condition.value}"'
    return text


def describe_rule(rule: Rule, columns: ColumnsArg, prefix: Optional[str] = "If") -> str:
    """All conditions joined by the rule's logic keyword"""
    if not rule.conditions:
        return "No conditions"
    columns_by_id = index_columns(columns)
    joiner = " or " if rule.effective_logic == ConditionLogic.OR else " and "
    body = joiner.join(describe_condition(c, columns_by_id) for c in rule.conditions)
    return f"{prefix} {body}" if prefix else body
