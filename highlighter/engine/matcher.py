"""
Rule Matcher - combines a rule's conditions and collects every enabled matching rule.
"""
import logging
from datetime import date
from typing import List, Optional, Sequence

from ..models.board import Item
from ..models.rule import ConditionLogic, Rule
from .evaluator import ColumnsArg, ConditionEvaluator, index_columns

logger = logging.getLogger(__name__)


class RuleMatcher:
    """Matches items against an ordered rule list"""

    @classmethod
    def rule_matches(
        cls,
        rule: Rule,
        item: Item,
        columns: ColumnsArg,
        today: Optional[date] = None
    ) -> bool:
        """
        True if the rule's conditions hold for the item.

        The enabled flag is not consulted here. AND over no conditions is
        vacuously true, OR over no conditions is false.
        """
        columns_by_id = index_columns(columns)
        results = (
            ConditionEvaluator.evaluate(condition, item, columns_by_id, today=today)
            for condition in rule.conditions
        )
        if rule.effective_logic == ConditionLogic.OR:
            return any(results)
        return all(results)

    @classmethod
    def matching_rules(
        cls,
        item: Item,
        rules: Sequence[Rule],
        columns: ColumnsArg,
        today: Optional[date] = None
    ) -> List[Rule]:
        """Every enabled rule that matches the item, in rule-list order"""
        columns_by_id = index_columns(columns)
        today = today or date.today()

        matches = [
            rule for rule in rules
            if rule.enabled and cls.rule_matches(rule, item, columns_by_id, today=today)
        ]

        if matches:
            logger.debug(
                f"Item '{item.id}' matched {len(matches)} rule(s): "
                f"{[rule.id for rule in matches]}"
            )
        return matches


def matching_rules(
    item: Item,
    rules: Sequence[Rule],
    columns: ColumnsArg,
    today: Optional[date] = None
) -> List[Rule]:
    """Functional alias for RuleMatcher.matching_rules"""
    return RuleMatcher.matching_rules(item, rules, columns, today=today)
