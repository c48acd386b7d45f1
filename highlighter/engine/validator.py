"""
Rule Validator - Reports configuration problems in highlight rules.

The engine itself tolerates every problem listed here by failing closed;
this module exists so editors and importers can tell the user why a rule
never matches.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models.board import Column
from ..models.rule import Condition, Rule
from .evaluator import ColumnsArg, index_columns
from .operators import (
    ColumnFamily,
    family_for_column_type,
    get_all_operator_ids,
    get_operator,
    operator_needs_value,
)
from .palette import get_color
from .payload import parse_date, parse_number

logger = logging.getLogger(__name__)

NUMERIC_OPERATORS = ("greater_than", "less_than", "greater_or_equal", "less_or_equal")
DATE_VALUE_OPERATORS = ("before", "after")


class RuleValidationError:
    """Represents a validation error"""

    def __init__(
        self,
        code: str,
        message: str,
        rule_id: Optional[str] = None,
        condition_index: Optional[int] = None,
        severity: str = "error"  # error, warning
    ):
        self.code = code
        self.message = message
        self.rule_id = rule_id
        self.condition_index = condition_index
        self.severity = severity
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "rule_id": self.rule_id,
            "condition_index": self.condition_index,
            "severity": self.severity,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        rule_info = f" [Rule: {self.rule_id}]" if self.rule_id else ""
        condition_info = f" [Condition: {self.condition_index}]" if self.condition_index is not None else ""
        return f"[{self.severity.upper()}] {self.code}: {self.message}{rule_info}{condition_info}"


class RuleValidator:
    """
    Validates highlight rules against a board's columns.

    Checks:
    - At least one condition
    - Conditions reference existing columns
    - Operators belong to the column type's catalog
    - Value present unless the operator is valueless
    - Numeric and date values parse
    - Color exists in the palette
    - Rule ids are unique within a list
    """

    @classmethod
    def validate(cls, rule: Rule, columns: ColumnsArg) -> Tuple[bool, List[RuleValidationError]]:
        """
        Validate a single rule.

        Args:
            rule: The rule to check
            columns: Board columns

        Returns:
            Tuple of (is_valid, list of errors)
        """
        columns_by_id = index_columns(columns)
        errors: List[RuleValidationError] = []

        if not rule.conditions:
            errors.append(RuleValidationError(
                "NO_CONDITIONS",
                "Rule must have at least one condition",
                rule_id=rule.id
            ))

        for index, condition in enumerate(rule.conditions):
            errors.extend(cls._validate_condition(rule, index, condition, columns_by_id))

        if get_color(rule.color_id) is None:
            errors.append(RuleValidationError(
                "UNKNOWN_COLOR",
                f"Color '{rule.color_id}' is not in the highlight palette",
                rule_id=rule.id
            ))

        return cls._finish(errors)

    @classmethod
    def validate_rules(
        cls,
        rules: Sequence[Rule],
        columns: ColumnsArg
    ) -> Tuple[bool, List[RuleValidationError]]:
        """Validate a whole rule list, including id uniqueness"""
        columns_by_id = index_columns(columns)
        errors: List[RuleValidationError] = []
        seen_ids = set()

        for rule in rules:
            if rule.id in seen_ids:
                errors.append(RuleValidationError(
                    "DUPLICATE_RULE_ID",
                    f"Rule id '{rule.id}' is used more than once",
                    rule_id=rule.id
                ))
            seen_ids.add(rule.id)

            _, rule_errors = cls.validate(rule, columns_by_id)
            errors.extend(rule_errors)

        return cls._finish(errors, log=False)

    @classmethod
    def _validate_condition(
        cls,
        rule: Rule,
        index: int,
        condition: Condition,
        columns_by_id: Dict[str, Column]
    ) -> List[RuleValidationError]:
        errors: List[RuleValidationError] = []
        column = columns_by_id.get(condition.column_id)

        if column is None:
            errors.append(RuleValidationError(
                "UNKNOWN_COLUMN",
                f"Column '{condition.column_id}' does not exist on this board",
                rule_id=rule.id,
                condition_index=index
            ))
            if condition.operator not in get_all_operator_ids():
                errors.append(RuleValidationError(
                    "INVALID_OPERATOR",
                    f"Unknown operator '{condition.operator}'",
                    rule_id=rule.id,
                    condition_index=index
                ))
            return errors

        family = family_for_column_type(column.type)
        if get_operator(family, condition.operator) is None:
            errors.append(RuleValidationError(
                "INVALID_OPERATOR",
                f"Operator '{condition.operator}' is not available for "
                f"'{column.title or column.id}' ({column.type})",
                rule_id=rule.id,
                condition_index=index
            ))
            return errors

        if not operator_needs_value(condition.operator):
            return errors

        if condition.value is None or condition.value == "":
            errors.append(RuleValidationError(
                "MISSING_VALUE",
                f"Operator '{condition.operator}' requires a value",
                rule_id=rule.id,
                condition_index=index
            ))
            return errors

        if family == ColumnFamily.NUMBER and condition.operator in NUMERIC_OPERATORS:
            if parse_number(condition.value) is None:
                errors.append(RuleValidationError(
                    "INVALID_NUMBER",
                    f"'{condition.value}' is not a number; the condition never matches",
                    rule_id=rule.id,
                    condition_index=index,
                    severity="warning"
                ))

        if condition.operator in DATE_VALUE_OPERATORS and parse_date(condition.value) is None:
            errors.append(RuleValidationError(
                "INVALID_DATE",
                f"'{condition.value}' is not a date (YYYY-MM-DD); the condition never matches",
                rule_id=rule.id,
                condition_index=index,
                severity="warning"
            ))

        return errors

    @staticmethod
    def _finish(
        errors: List[RuleValidationError],
        log: bool = True
    ) -> Tuple[bool, List[RuleValidationError]]:
        is_valid = not any(e.severity == "error" for e in errors)

        if errors and log:
            for error in errors:
                if error.severity == "error":
                    logger.info(str(error))
                else:
                    logger.debug(str(error))

        return is_valid, errors


def validate_rule(rule: Rule, columns: ColumnsArg) -> Tuple[bool, List[RuleValidationError]]:
    """Convenience function to validate a rule"""
    return RuleValidator.validate(rule, columns)


def validate_rules(rules: Sequence[Rule], columns: ColumnsArg) -> Tuple[bool, List[RuleValidationError]]:
    """Convenience function to validate a rule list"""
    return RuleValidator.validate_rules(rules, columns)
