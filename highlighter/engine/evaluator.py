"""
Condition Evaluator - Deterministic evaluation of one rule condition against one item.

Every failure resolves to False: unknown columns, operators outside the
column's catalog, unknown operators, malformed payloads and non-numeric
text never raise.
"""
import logging
from datetime import date, timedelta
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from ..models.board import Column, ColumnValue, Item
from ..models.rule import Condition
from .operators import family_for_column_type, is_operator_allowed, operator_needs_value
from .payload import decode_checked, decode_date, decode_date_string, parse_date, parse_number

logger = logging.getLogger(__name__)

ColumnsArg = Union[Mapping[str, Column], Iterable[Column]]

# (text, raw_value, expected, today) -> bool
OperatorFunc = Callable[[str, Any, Optional[str], date], bool]


def index_columns(columns: ColumnsArg) -> Mapping[str, Column]:
    """Index columns by id; a mapping is returned unchanged"""
    if isinstance(columns, Mapping):
        return columns
    return {column.id: column for column in columns}


class ConditionEvaluator:
    """
    Deterministic condition evaluator for highlight rules.

    Text operators work on the column value's display text; checkbox and
    date operators decode the raw payload. Operators are looked up in
    OPERATORS; anything not listed there evaluates to False.
    """

    # =========================================================================
    # OPERATOR DEFINITIONS
    # =========================================================================

    OPERATORS: Dict[str, OperatorFunc] = {
        # ----- Text -----
        "equals": lambda text, raw, expected, today: ConditionEvaluator._text_equals(text, expected),
        "not_equals": lambda text, raw, expected, today: not ConditionEvaluator._text_equals(text, expected),
        "contains": lambda text, raw, expected, today: ConditionEvaluator._text_contains(text, expected),
        "not_contains": lambda text, raw, expected, today: not ConditionEvaluator._text_contains(text, expected),

        # ----- Emptiness -----
        "is_empty": lambda text, raw, expected, today: ConditionEvaluator._is_empty(text),
        "is_not_empty": lambda text, raw, expected, today: not ConditionEvaluator._is_empty(text),

        # ----- Numeric -----
        "greater_than": lambda text, raw, expected, today: ConditionEvaluator._compare_numbers(text, expected, lambda a, b: a > b),
        "less_than": lambda text, raw, expected, today: ConditionEvaluator._compare_numbers(text, expected, lambda a, b: a < b),
        "greater_or_equal": lambda text, raw, expected, today: ConditionEvaluator._compare_numbers(text, expected, lambda a, b: a >= b),
        "less_or_equal": lambda text, raw, expected, today: ConditionEvaluator._compare_numbers(text, expected, lambda a, b: a <= b),

        # ----- Checkbox -----
        "is_checked": lambda text, raw, expected, today: decode_checked(raw) is True,
        "is_not_checked": lambda text, raw, expected, today: decode_checked(raw) is not True,

        # ----- Dates -----
        "is_overdue": lambda text, raw, expected, today: ConditionEvaluator._is_overdue(raw, today),
        "is_today": lambda text, raw, expected, today: decode_date_string(raw) == today.isoformat(),
        "is_this_week": lambda text, raw, expected, today: ConditionEvaluator._is_this_week(raw, today),
        "before": lambda text, raw, expected, today: ConditionEvaluator._compare_dates(raw, expected, lambda a, b: a < b),
        "after": lambda text, raw, expected, today: ConditionEvaluator._compare_dates(raw, expected, lambda a, b: a > b),
    }

    # =========================================================================
    # MAIN EVALUATION METHOD
    # =========================================================================

    @classmethod
    def evaluate(
        cls,
        condition: Condition,
        item: Item,
        columns: ColumnsArg,
        today: Optional[date] = None
    ) -> bool:
        """
        Evaluate a condition against an item.

        Args:
            condition: Column + operator + optional value
            item: The item (row) being highlighted
            columns: Board columns, as a list or an id -> Column mapping
            today: Reference date for relative date operators (default: local today)

        Returns:
            True if the condition holds, False otherwise (including every
            configuration or data error)

        Example:
            >>> status = Column(id="c1", type="status")
            >>> row = Item(id="1", columnValues=[{"columnId": "c1", "text": "done"}])
            >>> ConditionEvaluator.evaluate(Condition(columnId="c1", operator="equals", value="Done"), row, [status])
            True
        """
        operator = condition.operator
        operator_func = cls.OPERATORS.get(operator)

        if operator_func is None:
            logger.warning(
                f"Unknown operator: '{operator}'. "
                f"Available operators: {sorted(cls.OPERATORS.keys())}"
            )
            return False

        column = index_columns(columns).get(condition.column_id)
        if column is None:
            logger.warning(f"Condition references unknown column '{condition.column_id}'")
            return False

        if not is_operator_allowed(column.type, operator):
            logger.warning(
                f"Operator '{operator}' is not valid for column '{column.id}' "
                f"of type '{column.type}' ({family_for_column_type(column.type).value} family)"
            )
            return False

        column_value = item.get_column_value(condition.column_id)

        # Absent data only ever satisfies is_empty
        if column_value is None:
            return operator == "is_empty"

        if operator_needs_value(operator) and not condition.value:
            logger.debug(f"Operator '{operator}' on column '{column.id}' has no value")
            return False

        result = operator_func(
            cls._text_of(column_value),
            column_value.raw_value,
            condition.value,
            today or date.today()
        )

        logger.debug(
            f"Condition evaluated: item='{item.id}', column='{column.id}', "
            f"text={column_value.text!r}, operator='{operator}', "
            f"value={condition.value!r} -> {result}"
        )

        return result

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    @staticmethod
    def _text_of(column_value: ColumnValue) -> str:
        return column_value.text or ""

    @staticmethod
    def _is_empty(text: str) -> bool:
        """Empty means missing or whitespace only"""
        return not text or text.strip() == ""

    @staticmethod
    def _text_equals(text: str, expected: Optional[str]) -> bool:
        """Case-insensitive exact comparison"""
        if expected is None:
            return False
        return text.lower() == expected.lower()

    @staticmethod
    def _text_contains(text: str, expected: Optional[str]) -> bool:
        """Case-insensitive substring test"""
        if expected is None:
            return False
        return expected.lower() in text.lower()

    @staticmethod
    def _compare_numbers(
        text: str,
        expected: Optional[str],
        comparator: Callable[[float, float], bool]
    ) -> bool:
        """
        Numeric comparison.

        Returns False if either side cannot be read as a number.
        """
        actual_num = parse_number(text)
        expected_num = parse_number(expected)

        if actual_num is None or expected_num is None:
            logger.debug(
                f"Numeric comparison failed: actual={text!r} -> {actual_num}, "
                f"expected={expected!r} -> {expected_num}"
            )
            return False

        return comparator(actual_num, expected_num)

    @staticmethod
    def _compare_dates(
        raw_value: Any,
        expected: Optional[str],
        comparator: Callable[[date, date], bool]
    ) -> bool:
        actual_date = decode_date(raw_value)
        expected_date = parse_date(expected)

        if actual_date is None or expected_date is None:
            return False

        return comparator(actual_date, expected_date)

    @staticmethod
    def _is_overdue(raw_value: Any, today: date) -> bool:
        """Strictly before the start of today"""
        due = decode_date(raw_value)
        return due is not None and due < today

    @staticmethod
    def _is_this_week(raw_value: Any, today: date) -> bool:
        """Within Sunday..Saturday of the current week, inclusive"""
        value = decode_date(raw_value)
        if value is None:
            return False
        # date.weekday(): Monday == 0, Sunday == 6
        week_start = today - timedelta(days=(today.weekday() + 1) % 7)
        week_end = week_start + timedelta(days=6)
        return week_start <= value <= week_end

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    @classmethod
    def get_available_operators(cls):
        """Return list of all operator names the evaluator understands."""
        return sorted(cls.OPERATORS.keys())


# Singleton instance for convenience
evaluator = ConditionEvaluator()


def evaluate_condition(
    condition: Condition,
    item: Item,
    columns: ColumnsArg,
    today: Optional[date] = None
) -> bool:
    """Functional alias for ConditionEvaluator.evaluate"""
    return ConditionEvaluator.evaluate(condition, item, columns, today=today)
