"""
Highlight Resolver - first matching rule wins.
"""
import logging
from datetime import date
from typing import Dict, Iterable, Optional, Sequence

from ..models.board import Item
from ..models.rule import Rule
from .evaluator import ColumnsArg, index_columns
from .matcher import RuleMatcher
from .palette import get_color
from .result import HighlightResult

logger = logging.getLogger(__name__)


class HighlightResolver:
    """Turns the matching rules of an item into its display highlight"""

    @classmethod
    def resolve(
        cls,
        item: Item,
        rules: Sequence[Rule],
        columns: ColumnsArg,
        dark_mode: bool = False,
        today: Optional[date] = None
    ) -> Optional[HighlightResult]:
        """
        Resolve the highlight of a single item.

        Returns None when no enabled rule matches.
        """
        matches = RuleMatcher.matching_rules(item, rules, columns, today=today)
        if not matches:
            return None

        winner = matches[0]
        color = get_color(winner.color_id)
        if color is None:
            logger.warning(f"Rule '{winner.id}' uses unknown color '{winner.color_id}'")

        return HighlightResult(
            rule_id=winner.id,
            rule_name=winner.name,
            color_id=winner.color_id,
            color=color.hex_for(dark_mode) if color else None,
            total_matches=len(matches),
            all_matching_rule_ids=[rule.id for rule in matches],
        )

    @classmethod
    def resolve_items(
        cls,
        items: Iterable[Item],
        rules: Sequence[Rule],
        columns: ColumnsArg,
        dark_mode: bool = False,
        today: Optional[date] = None
    ) -> Dict[str, Optional[HighlightResult]]:
        """Resolve every item, keyed by item id"""
        columns_by_id = index_columns(columns)
        today = today or date.today()
        return {
            item.id: cls.resolve(item, rules, columns_by_id, dark_mode=dark_mode, today=today)
            for item in items
        }


def resolve_highlight(
    item: Item,
    rules: Sequence[Rule],
    columns: ColumnsArg,
    dark_mode: bool = False,
    today: Optional[date] = None
) -> Optional[HighlightResult]:
    """Functional alias for HighlightResolver.resolve"""
    return HighlightResolver.resolve(item, rules, columns, dark_mode=dark_mode, today=today)


def resolve_items(
    items: Iterable[Item],
    rules: Sequence[Rule],
    columns: ColumnsArg,
    dark_mode: bool = False,
    today: Optional[date] = None
) -> Dict[str, Optional[HighlightResult]]:
    return HighlightResolver.resolve_items(items, rules, columns, dark_mode=dark_mode, today=today)
