"""
Highlight Cache - memoizes per-item highlights for one revision of board data.

A revision is the fingerprint of (items, rules, columns, dark mode, date).
Any change recomputes every item; there is no partial invalidation.
"""
import hashlib
import json
import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..engine.resolver import HighlightResolver
from ..engine.result import HighlightResult
from ..models.board import Column, Item
from ..models.rule import Rule

logger = logging.getLogger(__name__)


def compute_revision(
    items: Sequence[Item],
    rules: Sequence[Rule],
    columns: Sequence[Column],
    dark_mode: bool,
    today: date
) -> str:
    """Stable fingerprint of every input that affects highlighting"""
    payload = {
        "items": [item.model_dump(mode="json") for item in items],
        "rules": [rule.to_dict() for rule in rules],
        "columns": [column.model_dump(mode="json") for column in columns],
        "dark_mode": dark_mode,
        "today": today.isoformat(),
    }
    encoded = json.dumps(payload, sort_keys=True, default=str).encode("utf-8")
    return hashlib.sha256(encoded).hexdigest()


class HighlightCache:
    """Caches item id -> HighlightResult for the latest revision"""

    def __init__(self):
        self.revision: Optional[str] = None
        self._results: Dict[str, Optional[HighlightResult]] = {}
        self.hits = 0
        self.misses = 0

    def get_highlights(
        self,
        items: Sequence[Item],
        rules: Sequence[Rule],
        columns: Sequence[Column],
        dark_mode: bool = False,
        today: Optional[date] = None
    ) -> Dict[str, Optional[HighlightResult]]:
        """Highlights for every item, recomputed only when inputs changed"""
        today = today or date.today()
        revision = compute_revision(items, rules, columns, dark_mode, today)

        if revision == self.revision:
            self.hits += 1
            return dict(self._results)

        self.misses += 1
        logger.debug(f"Highlight cache miss, recomputing {len(items)} item(s)")
        self._results = HighlightResolver.resolve_items(
            items, rules, columns, dark_mode=dark_mode, today=today
        )
        self.revision = revision
        return dict(self._results)

    def get(self, item_id: str) -> Optional[HighlightResult]:
        """Cached highlight of one item from the current revision"""
        return self._results.get(item_id)

    def highlighted_item_ids(self) -> List[str]:
        return [item_id for item_id, result in self._results.items() if result is not None]

    def invalidate(self) -> None:
        self.revision = None
        self._results = {}
