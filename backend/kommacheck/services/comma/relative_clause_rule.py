from __future__ import annotations

import logging
from dataclasses import dataclass

from kommacheck.services.comma.pronouns import gender_of, missed_comma_before
from kommacheck.services.comma.sentence import Span, TaggedSentence
from kommacheck.services.comma.separators import is_separator, iter_spans
from kommacheck.services.comma.subclause import find_governing_verb
from kommacheck.services.comma.tags import describe_genders


logger = logging.getLogger(__name__)

RULE_ID_BEFORE = "COMMA_BEFORE_RELATIVE_CLAUSE"
RULE_ID_AFTER = "COMMA_AFTER_RELATIVE_CLAUSE"
CATEGORY_ID = "HILFESTELLUNG_KOMMASETZUNG"
CATEGORY_NAME = "Hilfestellung für Kommasetzung"
MATCH_MESSAGE = "Sollten Sie hier ein Komma einfügen (Relativsatz)?"


@dataclass(frozen=True)
class RuleMatch:
    rule_id: str
    start: int
    end: int
    message: str
    suggestion: str


class MissingCommaRelativeClauseRule:
    """Flags a missing comma in front of a German relative clause.

    The ``after`` variant (comma after the relative clause) is declared so it
    can be configured, but it does not detect anything yet.
    """

    category_id = CATEGORY_ID
    category_name = CATEGORY_NAME

    def __init__(self, *, after: bool = False):
        self.after = after

    @property
    def rule_id(self) -> str:
        return RULE_ID_AFTER if self.after else RULE_ID_BEFORE

    @property
    def description(self) -> str:
        return "Fehlendes Komma nach Relativsatz" if self.after else "Fehlendes Komma vor Relativsatz"

    def match(self, sentence: TaggedSentence) -> list[RuleMatch]:
        matches: list[RuleMatch] = []
        if self.after or len(sentence) <= 1:
            return matches

        cursor = 2 if is_separator(sentence[1]) else 1
        for span in iter_spans(sentence, cursor):
            pronoun = self._missing_comma_in(sentence, span)
            if pronoun is not None:
                matches.append(self._emit(sentence, pronoun))
        return matches

    def _missing_comma_in(self, sentence: TaggedSentence, span: Span) -> int | None:
        last_verb = find_governing_verb(sentence, span)
        if last_verb is None or last_verb <= 0:
            return None
        pronoun = missed_comma_before(sentence, span, last_verb)
        if pronoun is None or pronoun <= 0:
            return None
        return pronoun

    def _emit(self, sentence: TaggedSentence, pronoun: int) -> RuleMatch:
        pronoun_token = sentence[pronoun]
        previous = sentence[pronoun - 1]
        if previous.has_pos("PRP"):
            anchor = sentence[pronoun - 2]
            suggestion = f"{anchor.text}, {previous.text} {pronoun_token.text}"
        else:
            anchor = previous
            suggestion = f"{anchor.text}, {pronoun_token.text}"

        logger.debug(
            "relative_clause_comma_match",
            extra={
                "rule_id": self.rule_id,
                "pronoun": pronoun_token.text,
                "pronoun_index": pronoun,
                "genders": describe_genders(gender_of(pronoun_token)),
            },
        )
        return RuleMatch(
            rule_id=self.rule_id,
            start=anchor.start,
            end=pronoun_token.end,
            message=MATCH_MESSAGE,
            suggestion=suggestion,
        )
