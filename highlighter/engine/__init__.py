"""
Engine Module - Rule evaluation for row highlighting

This module provides:
- Operator catalog per column type family
- Deterministic condition evaluation with fail-closed semantics
- AND/OR rule matching over an ordered rule list
- First-match-wins highlight resolution against the color palette
- Rule validation and human-readable summaries
"""

from .operators import (
    ColumnFamily,
    OperatorSpec,
    COLUMN_TYPE_FAMILIES,
    FAMILY_OPERATORS,
    VALUELESS_OPERATORS,
    family_for_column_type,
    operators_for_column_type,
    get_operator,
    operator_needs_value
)
from .evaluator import ConditionEvaluator, evaluator, evaluate_condition
from .matcher import RuleMatcher, matching_rules
from .palette import HighlightColor, HIGHLIGHT_COLORS, get_color, color_hex, is_dark_theme
from .result import HighlightResult
from .resolver import HighlightResolver, resolve_highlight, resolve_items
from .validator import RuleValidator, RuleValidationError, validate_rule, validate_rules
from .summary import describe_condition, describe_rule, display_name

__all__ = [
    # Operators
    "ColumnFamily",
    "OperatorSpec",
    "COLUMN_TYPE_FAMILIES",
    "FAMILY_OPERATORS",
    "VALUELESS_OPERATORS",
    "family_for_column_type",
    "operators_for_column_type",
    "get_operator",
    "operator_needs_value",

    # Evaluation
    "ConditionEvaluator",
    "evaluator",
    "evaluate_condition",
    "RuleMatcher",
    "matching_rules",

    # Resolution
    "HighlightColor",
    "HIGHLIGHT_COLORS",
    "get_color",
    "color_hex",
    "is_dark_theme",
    "HighlightResult",
    "HighlightResolver",
    "resolve_highlight",
    "resolve_items",

    # Validation
    "RuleValidator",
    "RuleValidationError",
    "validate_rule",
    "validate_rules",

    # Summaries
    "describe_condition",
    "describe_rule",
    "display_name"
]
