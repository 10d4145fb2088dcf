from kommacheck.api.schemas.v1 import (
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
