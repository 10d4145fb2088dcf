from __future__ import annotations

import logging
import time
from typing import Iterable

from kommacheck.api.schemas.v1.check import CheckResponse, RuleMatchOut
from kommacheck.core.config import Settings
from kommacheck.nlp.adapter import NLPAdapter, NLPSentence
from kommacheck.services.comma.relative_clause_rule import MissingCommaRelativeClauseRule
from kommacheck.services.comma.sentence import TaggedSentence, TaggedToken
from kommacheck.services.comma.tags import parse_tags


logger = logging.getLogger(__name__)


def available_rules() -> tuple[MissingCommaRelativeClauseRule, ...]:
    return (MissingCommaRelativeClauseRule(), MissingCommaRelativeClauseRule(after=True))


def build_rules(settings: Settings) -> tuple[MissingCommaRelativeClauseRule, ...]:
    return tuple(
        rule for rule in available_rules() if not rule.after or settings.comma_after_enabled
    )


def to_tagged_sentence(sentence: NLPSentence) -> TaggedSentence:
    return TaggedSentence.from_tokens(
        (
            TaggedToken(
                text=token.text,
                start=token.start,
                end=token.end,
                readings=parse_tags(token.tags),
            )
            for token in sentence.tokens
            if token.text.strip()
        ),
        text=sentence.text,
    )


class CheckTextUseCase:
    def __init__(self, nlp_adapter: NLPAdapter, rules: Iterable[MissingCommaRelativeClauseRule]):
        self._nlp_adapter = nlp_adapter
        self._rules = tuple(rules)

    def execute(self, text: str) -> CheckResponse:
        started = time.perf_counter()
        sentences = self._nlp_adapter.tag(text)

        matches: list[RuleMatchOut] = []
        for nlp_sentence in sentences:
            tagged = to_tagged_sentence(nlp_sentence)
            for rule in self._rules:
                for match in rule.match(tagged):
                    matches.append(
                        RuleMatchOut(
                            rule_id=match.rule_id,
                            start=nlp_sentence.start + match.start,
                            end=nlp_sentence.start + match.end,
                            message=match.message,
                            suggestion=match.suggestion,
                            sentence=nlp_sentence.text,
                        )
                    )

        logger.info(
            "check_text_completed",
            extra={
                "sentence_count": len(sentences),
                "match_count": len(matches),
                "rules": [rule.rule_id for rule in self._rules],
                "latency_ms": round((time.perf_counter() - started) * 1000.0, 3),
            },
        )
        return CheckResponse(matches=matches, sentence_count=len(sentences))
