from .monday import MondayClient, MondayAPIError, get_monday_client
from .rule_io import (
    RuleImportError,
    storage_key,
    dump_rules_json,
    load_rules_json,
    export_rules,
    import_rules
)
from .rule_list import new_rule, add_rule, replace_rule, delete_rule, toggle_rule, move_rule
from .highlight_cache import HighlightCache, compute_revision

__all__ = [
    "MondayClient", "MondayAPIError", "get_monday_client",
    "RuleImportError", "storage_key", "dump_rules_json", "load_rules_json",
    "export_rules", "import_rules",
    "new_rule", "add_rule", "replace_rule", "delete_rule", "toggle_rule", "move_rule",
    "HighlightCache", "compute_revision"
]
