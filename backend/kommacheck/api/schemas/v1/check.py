from __future__ import annotations

from pydantic import BaseModel, Field


class CheckRequest(BaseModel):
    text: str = Field(...)
    rule_ids: list[str] | None = None


class RuleMatchOut(BaseModel):
    rule_id: str
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    message: str
    suggestion: str
    sentence: str


class CheckResponse(BaseModel):
    matches: list[RuleMatchOut]
    sentence_count: int = 0


class RuleSummary(BaseModel):
    id: str
    description: str
    category: str
    category_name: str
    enabled: bool


class RuleListResponse(BaseModel):
    items: list[RuleSummary]
