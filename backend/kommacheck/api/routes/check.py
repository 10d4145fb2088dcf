from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from kommacheck.api.schemas.v1.check import (
    CheckRequest,
    CheckResponse,
    RuleListResponse,
    RuleSummary,
)
from kommacheck.nlp.adapter import TaggingError
from kommacheck.services.use_cases import CheckTextUseCase, available_rules

router = APIRouter()
logger = logging.getLogger(__name__)


def _select_rules(request: Request, rule_ids: list[str] | None):
    rules = tuple(getattr(request.app.state, "rules", ()))
    if rule_ids is None:
        return rules
    by_id = {rule.rule_id: rule for rule in rules}
    unknown = sorted(set(rule_ids) - set(by_id))
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown or disabled rule ids: {', '.join(unknown)}",
        )
    return tuple(by_id[rule_id] for rule_id in dict.fromkeys(rule_ids))


@router.post("/check", response_model=CheckResponse)
def check_text(payload: CheckRequest, request: Request) -> CheckResponse:
    settings = request.app.state.settings
    if len(payload.text) > settings.max_text_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds the limit of {settings.max_text_chars} characters.",
        )

    nlp_adapter = getattr(request.app.state, "nlp_adapter", None)
    if not bool(getattr(request.app.state, "nlp_ready", False)) or nlp_adapter is None:
        raise HTTPException(
            status_code=503,
            detail="NLP unavailable. Check backend logs and NLP model installation.",
        )

    rules = _select_rules(request, payload.rule_ids)
    try:
        return CheckTextUseCase(nlp_adapter, rules).execute(payload.text)
    except TaggingError as exc:
        logger.exception("check_tagging_failed")
        raise HTTPException(
            status_code=503,
            detail=f"Tagging failed: {exc}",
        ) from exc


@router.get("/rules", response_model=RuleListResponse)
def list_rules(request: Request) -> RuleListResponse:
    enabled_ids = {rule.rule_id for rule in getattr(request.app.state, "rules", ())}
    return RuleListResponse(
        items=[
            RuleSummary(
                id=rule.rule_id,
                description=rule.description,
                category=rule.category_id,
                category_name=rule.category_name,
                enabled=rule.rule_id in enabled_ids,
            )
            for rule in available_rules()
        ]
    )
