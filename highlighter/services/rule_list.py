"""
Rule list editing.

The rule list order is the priority order. None of these functions modify
their input; each returns a new list.
"""
from typing import List, Sequence

from ..core.config import settings
from ..models.rule import Rule, new_rule_id

UP = "up"
DOWN = "down"


def new_rule(name: str = "") -> Rule:
    """Blank draft rule in the default color"""
    return Rule(name=name, colorId=settings.DEFAULT_COLOR_ID, conditions=[])


def add_rule(rules: Sequence[Rule], rule: Rule) -> List[Rule]:
    """Append a rule with a fresh id (lowest priority)"""
    return [*rules, rule.model_copy(update={"id": new_rule_id()})]


def replace_rule(rules: Sequence[Rule], rule: Rule) -> List[Rule]:
    """Swap in an edited rule, keeping its position"""
    return [rule if existing.id == rule.id else existing for existing in rules]


def delete_rule(rules: Sequence[Rule], rule_id: str) -> List[Rule]:
    return [rule for rule in rules if rule.id != rule_id]


def toggle_rule(rules: Sequence[Rule], rule_id: str) -> List[Rule]:
    return [
        rule.model_copy(update={"enabled": not rule.enabled}) if rule.id == rule_id else rule
        for rule in rules
    ]


def move_rule(rules: Sequence[Rule], rule_id: str, direction: str) -> List[Rule]:
    """
    Move a rule one step up (higher priority) or down.

    Unknown ids and moves past either end leave the order unchanged.
    """
    if direction not in (UP, DOWN):
        raise ValueError(f"direction must be '{UP}' or '{DOWN}', got {direction!r}")

    reordered = list(rules)
    index = next((i for i, rule in enumerate(reordered) if rule.id == rule_id), -1)
    if index == -1:
        return reordered

    new_index = index - 1 if direction == UP else index + 1
    if new_index < 0 or new_index >= len(reordered):
        return reordered

    reordered[index], reordered[new_index] = reordered[new_index], reordered[index]
    return reordered
