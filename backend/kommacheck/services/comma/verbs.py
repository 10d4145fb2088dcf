from __future__ import annotations

from kommacheck.services.comma.sentence import Span, TaggedSentence
from kommacheck.services.comma.tags import GenderSet, MorphTag


NON_VERB_POS = ("ZAL", "ADV", "ART", "SUB")
PARTICIPLE_POS = ("PA1", "PA2")
MODIFIER_POS = ("ADJ", "PA1", "PA2")
NOUN_POS = ("SUB", "EIG")
INFINITIVE_MARKER = "zu"


def _is_finite(reading: MorphTag) -> bool:
    return reading.pos == "VER" and reading.has_person


def _is_infinitive(reading: MorphTag) -> bool:
    return reading.is_kind("VER", "INF")


def _is_any_verb_reading(reading: MorphTag) -> bool:
    return reading.pos == "VER"


def is_verb(sentence: TaggedSentence, n: int) -> bool:
    """Finite, person-marked verb that is not also nominal or adverbial."""
    token = sentence[n]
    if not token.has_reading(_is_finite) or token.has_pos(*NON_VERB_POS):
        return False
    if token.has_reading(_is_infinitive):
        return sentence.text_at(n - 1) != INFINITIVE_MARKER
    return True


def is_any_verb(sentence: TaggedSentence, n: int) -> bool:
    token = sentence[n]
    if token.has_reading(_is_any_verb_reading):
        return True
    following = sentence.get(n + 1)
    if following is None:
        return False
    if token.text == INFINITIVE_MARKER and following.has_reading(_is_infinitive):
        return True
    return token.has_pos("NEG") and following.has_reading(_is_any_verb_reading)


def is_verb_after(sentence: TaggedSentence, end: int) -> bool:
    """A comma at ``end`` directly followed by a verb."""
    following = sentence.get(end + 1)
    return (
        following is not None
        and sentence[end].text == ","
        and following.has_reading(_is_any_verb_reading)
    )


def _skip_agreeing_modifiers(sentence: TaggedSentence, start: int, end: int, genders: GenderSet) -> int:
    index = start
    while index < end and sentence[index].has_reading(
        lambda reading: reading.is_pos(*MODIFIER_POS) and reading.agrees_with(genders)
    ):
        index += 1
    return index


def _is_attributive_participle(sentence: TaggedSentence, n: int, span: Span) -> bool:
    # "die gestern gekaufte Zeitung": participle followed by its agreeing noun.
    genders = sentence[n].genders
    following = sentence.get(_skip_agreeing_modifiers(sentence, n + 1, span.end, genders))
    if following is None or following.is_tag_unknown:
        return True
    return following.has_reading(
        lambda reading: reading.is_pos(*NOUN_POS) and reading.agrees_with(genders)
    )


def verb_positions(sentence: TaggedSentence, span: Span) -> tuple[int, ...]:
    positions: list[int] = []
    for index in span:
        if not is_verb(sentence, index):
            continue
        if sentence[index].has_pos(*PARTICIPLE_POS) and _is_attributive_participle(sentence, index, span):
            continue
        positions.append(index)
    return tuple(positions)
