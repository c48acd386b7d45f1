"""
Rule documents - storage JSON and import/export.

Storage keeps a bare JSON array of rules per board. The export document
wraps rules as ``{version, exportDate, rules}`` without ids; importing
assigns fresh ids so imported rules never collide with existing ones.
"""
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from ..core.config import settings
from ..models.rule import Rule, new_rule_id

logger = logging.getLogger(__name__)


class RuleImportError(ValueError):
    """Raised when an import document cannot be turned into rules"""


def storage_key(board_id: Union[str, int]) -> str:
    """Storage key holding a board's rule list"""
    return f"{settings.RULES_STORAGE_PREFIX}{board_id}"


def dump_rules_json(rules: Sequence[Rule]) -> str:
    return json.dumps([rule.to_dict() for rule in rules])


def load_rules_json(text: Optional[str]) -> List[Rule]:
    """
    Load a stored rule list.

    An empty or unparseable document yields an empty list; individual
    rules that fail to parse are skipped.
    """
    if not text:
        return []

    try:
        raw_rules = json.loads(text)
    except ValueError as e:
        logger.error(f"Error parsing stored rules: {e}")
        return []

    if not isinstance(raw_rules, list):
        logger.error(f"Stored rules must be a JSON array, got {type(raw_rules).__name__}")
        return []

    rules: List[Rule] = []
    for index, raw in enumerate(raw_rules):
        try:
            rules.append(Rule.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Skipping stored rule #{index}: {e.error_count()} validation error(s)")
    return rules


def export_rules(rules: Sequence[Rule], export_date: Optional[datetime] = None) -> Dict[str, Any]:
    """Build the export document for a rule list"""
    return {
        "version": settings.RULES_EXPORT_VERSION,
        "exportDate": (export_date or datetime.now()).isoformat(),
        "rules": [rule.to_dict(include_id=False) for rule in rules],
    }


def import_rules(document: Union[str, Dict[str, Any], List[Any]]) -> List[Rule]:
    """
    Parse an export document (or a bare rule array) into new Rules.

    Legacy single-condition rules are migrated. Every imported rule gets a
    fresh id.

    Raises:
        RuleImportError: the document or one of its rules is malformed
    """
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except ValueError as e:
            raise RuleImportError(f"Import file is not valid JSON: {e}") from e

    if isinstance(document, dict):
        if "rules" not in document:
            raise RuleImportError("Import document has no 'rules' array")
        raw_rules = document["rules"]
        version = document.get("version")
        if version is not None and str(version) != settings.RULES_EXPORT_VERSION:
            logger.warning(f"Importing rules from export version {version}")
    else:
        raw_rules = document

    if not isinstance(raw_rules, list):
        raise RuleImportError("'rules' must be an array")

    imported: List[Rule] = []
    for index, raw in enumerate(raw_rules):
        if not isinstance(raw, dict):
            raise RuleImportError(f"Rule #{index + 1} must be an object")
        try:
            rule = Rule.model_validate(raw)
        except ValidationError as e:
            raise RuleImportError(f"Rule #{index + 1} is invalid: {e}") from e
        imported.append(rule.model_copy(update={"id": new_rule_id()}))

    logger.info(f"Imported {len(imported)} rule(s)")
    return imported
