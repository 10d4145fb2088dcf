from __future__ import annotations

from kommacheck.services.comma.sentence import TaggedSentence
from kommacheck.services.comma.tags import GenderSet, MorphTag
from kommacheck.services.comma.verbs import MODIFIER_POS, NOUN_POS, PARTICIPLE_POS


INTERROGATIVE_FORMS = frozenset({"welche", "welchem", "welchen", "welcher", "welches", "wessen"})
_PHRASE_POS = ("ZAL", "PRP", "KON", "ADV")
_AGREEING_PRONOUN_KINDS = ("POS", "DEM", "IND")


def _agreeing_noun(genders: GenderSet):
    return lambda reading: reading.is_pos(*NOUN_POS) and reading.agrees_with(genders)


def _continues_phrase(genders: GenderSet):
    """Readings that may sit between a determiner and its noun."""

    def predicate(reading: MorphTag) -> bool:
        if reading.is_pos(*_PHRASE_POS) or reading.is_kind("ADJ", "PRD"):
            return True
        if reading.is_pos(*MODIFIER_POS) or reading.is_kind("PRO", *_AGREEING_PRONOUN_KINDS):
            return reading.agrees_with(genders)
        return False

    return predicate


def is_article_without_noun(genders: GenderSet, sentence: TaggedSentence, n: int) -> bool:
    """A verb right after an agreeing adjective, as in "das Schöne ist"."""
    previous = sentence.get(n - 1)
    if previous is None or not sentence[n].has_pos("VER"):
        return False
    return previous.has_reading(
        lambda reading: (reading.is_pos("ADJ") or reading.is_kind("PRO", "POS"))
        and reading.agrees_with(genders)
    )


def skip_to_modifier(genders: GenderSet, sentence: TaggedSentence, n: int, to: int) -> int | None:
    """Next agreeing adjective or participle after ``n``.

    Covers "das in die dunkle Garage fahrende Auto": the scan resumes at the
    modifier so the determiner reading of "das" can still reach its noun.
    """
    following = sentence.get(n + 1)
    if following is not None and following.has_reading(
        lambda reading: reading.is_pos(*PARTICIPLE_POS) and reading.agrees_with(genders)
    ):
        return n + 1
    for index in range(n + 1, to):
        if sentence[index].has_reading(
            lambda reading: reading.is_pos(*MODIFIER_POS) and reading.agrees_with(genders)
        ):
            return index
    return None


def is_article(genders: GenderSet, sentence: TaggedSentence, start: int, to: int) -> bool:
    """Whether the pronoun-shaped token at ``start`` determines a noun phrase."""
    if sentence[start].text in INTERROGATIVE_FORMS:
        return False
    is_noun = _agreeing_noun(genders)
    continues = _continues_phrase(genders)
    index = start + 1
    while index < to:
        token = sentence[index]
        if token.is_tag_unknown or token.has_reading(is_noun):
            return True
        if token.has_pos("ART") or not token.has_reading(continues):
            if is_article_without_noun(genders, sentence, index):
                return True
            resume = skip_to_modifier(genders, sentence, index, to)
            if resume is None:
                return False
            index = resume
        index += 1
    return to < len(sentence) and is_article_without_noun(genders, sentence, to)
