"""
Rules API routes - validation and import/export
"""
import logging
from typing import Any, List
from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel

from ...engine.summary import describe_rule, display_name
from ...engine.validator import RuleValidator
from ...models import Column, Rule
from ...services.rule_io import RuleImportError, export_rules, import_rules

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rules", tags=["rules"])


class RuleValidationRequest(BaseModel):
    rules: List[Rule]
    columns: List[Column]


class RuleExportRequest(BaseModel):
    rules: List[Rule]


@router.post("/validate")
async def validate_rules(request: RuleValidationRequest):
    """Validate a rule list against the board's columns"""
    is_valid, errors = RuleValidator.validate_rules(request.rules, request.columns)
    return {
        "is_valid": is_valid,
        "errors": [error.to_dict() for error in errors],
        "summaries": [
            {
                "id": rule.id,
                "name": display_name(rule),
                "description": describe_rule(rule, request.columns)
            }
            for rule in request.rules
        ]
    }


@router.post("/export")
async def export_rule_list(request: RuleExportRequest):
    """Export document for a rule list"""
    return export_rules(request.rules)


@router.post("/import")
async def import_rule_list(document: Any = Body(...)):
    """Import an export document; returns the new rules with fresh ids"""
    try:
        rules = import_rules(document)
    except RuleImportError as e:
        logger.warning(f"Rejected rule import: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return {"rules": [rule.to_dict() for rule in rules]}
