"""
Operator Catalog - maps a column type to the comparison operators it supports.

Every raw column type is classified into exactly one ColumnFamily through
COLUMN_TYPE_FAMILIES. Adding a column type is a single table edit; unknown
types fall back to the TEXT family.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, FrozenSet, Union


class ColumnFamily(str, Enum):
    """Operator-relevant classification of a column type"""
    TEXT = "text"
    NUMBER = "number"
    CHOICE = "choice"
    DATE = "date"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class OperatorSpec:
    """An operator as offered to the rule editor"""
    id: str
    label: str

    @property
    def requires_value(self) -> bool:
        return operator_needs_value(self.id)

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "label": self.label}


# Column type -> family. Anything missing here is TEXT.
COLUMN_TYPE_FAMILIES: Dict[str, ColumnFamily] = {
    "status": ColumnFamily.CHOICE,
    "color": ColumnFamily.CHOICE,
    "dropdown": ColumnFamily.CHOICE,
    "person": ColumnFamily.CHOICE,
    "priority": ColumnFamily.CHOICE,
    "text": ColumnFamily.TEXT,
    "long_text": ColumnFamily.TEXT,
    "numbers": ColumnFamily.NUMBER,
    "rating": ColumnFamily.NUMBER,
    "date": ColumnFamily.DATE,
    "checkbox": ColumnFamily.CHECKBOX,
}

FAMILY_OPERATORS: Dict[ColumnFamily, List[OperatorSpec]] = {
    ColumnFamily.TEXT: [
        OperatorSpec("equals", "equals"),
        OperatorSpec("not_equals", "does not equal"),
        OperatorSpec("contains", "contains"),
        OperatorSpec("not_contains", "does not contain"),
        OperatorSpec("is_empty", "is empty"),
        OperatorSpec("is_not_empty", "is not empty"),
    ],
    ColumnFamily.NUMBER: [
        OperatorSpec("equals", "equals"),
        OperatorSpec("not_equals", "does not equal"),
        OperatorSpec("greater_than", "is greater than"),
        OperatorSpec("less_than", "is less than"),
        OperatorSpec("greater_or_equal", "is greater than or equal"),
        OperatorSpec("less_or_equal", "is less than or equal"),
        OperatorSpec("is_empty", "is empty"),
        OperatorSpec("is_not_empty", "is not empty"),
    ],
    ColumnFamily.CHOICE: [
        OperatorSpec("equals", "is"),
        OperatorSpec("not_equals", "is not"),
        OperatorSpec("is_empty", "is empty"),
        OperatorSpec("is_not_empty", "is not empty"),
    ],
    ColumnFamily.DATE: [
        OperatorSpec("equals", "is"),
        OperatorSpec("before", "is before"),
        OperatorSpec("after", "is after"),
        OperatorSpec("is_overdue", "is overdue"),
        OperatorSpec("is_today", "is today"),
        OperatorSpec("is_this_week", "is this week"),
        OperatorSpec("is_empty", "is empty"),
        OperatorSpec("is_not_empty", "is not empty"),
    ],
    ColumnFamily.CHECKBOX: [
        OperatorSpec("is_checked", "is checked"),
        OperatorSpec("is_not_checked", "is not checked"),
    ],
}

VALUELESS_OPERATORS: FrozenSet[str] = frozenset({
    "is_empty",
    "is_not_empty",
    "is_checked",
    "is_not_checked",
    "is_overdue",
    "is_today",
    "is_this_week",
})


def family_for_column_type(column_type: Optional[str]) -> ColumnFamily:
    """Classify a raw column type, falling back to TEXT"""
    if not column_type:
        return ColumnFamily.TEXT
    return COLUMN_TYPE_FAMILIES.get(column_type, ColumnFamily.TEXT)


def _family(type_or_family: Union[str, ColumnFamily, None]) -> ColumnFamily:
    if isinstance(type_or_family, ColumnFamily):
        return type_or_family
    return family_for_column_type(type_or_family)


def operators_for_column_type(column_type: Optional[str]) -> List[OperatorSpec]:
    """Ordered operators a column of this type supports"""
    return list(FAMILY_OPERATORS[family_for_column_type(column_type)])


def get_operator(
    type_or_family: Union[str, ColumnFamily, None],
    operator_id: str
) -> Optional[OperatorSpec]:
    """Look up an operator within a column type's catalog, or None"""
    for spec in FAMILY_OPERATORS[_family(type_or_family)]:
        if spec.id == operator_id:
            return spec
    return None


def is_operator_allowed(type_or_family: Union[str, ColumnFamily, None], operator_id: str) -> bool:
    return get_operator(type_or_family, operator_id) is not None


def operator_needs_value(operator_id: str) -> bool:
    """Valueless operators (is_empty, is_checked, ...) take no comparison value"""
    return operator_id not in VALUELESS_OPERATORS


def get_all_operator_ids() -> List[str]:
    """Every operator id known to any family, sorted"""
    return sorted({spec.id for specs in FAMILY_OPERATORS.values() for spec in specs})
