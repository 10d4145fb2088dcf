from kommacheck.api.schemas.v1.check import (
    CheckRequest,
    CheckResponse,
    RuleListResponse,
    RuleMatchOut,
    RuleSummary,
)

__all__ = [
    "CheckRequest",
    "CheckResponse",
    "RuleMatchOut",
    "RuleSummary",
    "RuleListResponse",
]
