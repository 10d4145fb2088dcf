from __future__ import annotations

from kommacheck.services.comma.articles import INTERROGATIVE_FORMS, is_article
from kommacheck.services.comma.sentence import Span, TaggedSentence, TaggedToken
from kommacheck.services.comma.tags import GenderSet
from kommacheck.services.comma.verbs import NOUN_POS, is_any_verb


PRONOUN_FORMS = frozenset(
    {"dem", "den", "der", "die", "das", "dessen", "deren", "denen"}
) | INTERROGATIVE_FORMS


def is_pronoun(sentence: TaggedSentence, n: int) -> bool:
    return sentence[n].text in PRONOUN_FORMS


def gender_of(token: TaggedToken) -> GenderSet:
    return token.genders


def matches_gender(genders: GenderSet, sentence: TaggedSentence, start: int, to: int) -> bool:
    """Search ``[start, to)`` backwards for an agreeing noun or name."""
    for index in range(to - 1, start - 1, -1):
        token = sentence[index]
        if not token.has_reading(lambda reading: reading.is_pos(*NOUN_POS) and reading.agrees_with(genders)):
            continue
        # A sentence-initial verb may carry a spurious nominal reading.
        if index == 1 and token.has_pos("VER"):
            continue
        return True
    return False


def missed_comma_before(sentence: TaggedSentence, span: Span, last_verb: int) -> int | None:
    for index in range(span.start, last_verb - 1):
        if not is_pronoun(sentence, index):
            continue
        genders = gender_of(sentence[index])
        if is_any_verb(sentence, index + 1):
            continue
        if not matches_gender(genders, sentence, span.start, index):
            continue
        if is_article(genders, sentence, index, last_verb):
            continue
        return index
    return None
