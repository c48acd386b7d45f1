"""
Highlight Result - Data class for a resolved row highlight
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class HighlightResult:
    """
    Highlight of one item.

    The first matching rule is authoritative; ``all_matching_rule_ids``
    keeps every match for "+N more" diagnostics. ``color`` is None when the
    rule's color id is not in the palette; the match still counts.
    """

    rule_id: str
    rule_name: str
    color_id: str
    color: Optional[str] = None
    total_matches: int = 1
    all_matching_rule_ids: List[str] = field(default_factory=list)

    @property
    def has_color(self) -> bool:
        return self.color is not None

    @property
    def additional_matches(self) -> int:
        """Matches beyond the winning rule"""
        return max(self.total_matches - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ruleId": self.rule_id,
            "ruleName": self.rule_name,
            "colorId": self.color_id,
            "color": self.color,
            "totalMatches": self.total_matches,
            "allMatchingRuleIds": list(self.all_matching_rule_ids),
        }
