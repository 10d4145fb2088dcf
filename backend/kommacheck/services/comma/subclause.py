from __future__ import annotations

from kommacheck.services.comma.separators import next_separator
from kommacheck.services.comma.sentence import Span, TaggedSentence, TaggedToken
from kommacheck.services.comma.verbs import verb_positions


RELATIVE_ADVERBS = frozenset({"wer", "wo", "wohin"})


def is_subordinating(token: TaggedToken) -> bool:
    return (
        token.has_reading(lambda reading: reading.pos == "KON" and (reading.subtype or "").startswith("UNT"))
        or token.text.lower() in RELATIVE_ADVERBS
    )


def _has_kind(sentence: TaggedSentence, index: int, pos: str, *subtypes: str) -> bool:
    return sentence[index].has_reading(lambda reading: reading.is_kind(pos, *subtypes))


def _single_final_verb(sentence: TaggedSentence, span: Span, verb: int) -> int | None:
    following = Span(span.end + 1, next_separator(sentence, span.end + 1))
    next_verbs = verb_positions(sentence, following)
    if is_subordinating(sentence[span.start]):
        if len(next_verbs) > 1:
            return verb
        return None
    if next_verbs:
        return verb
    return None


def _is_modal_construction(sentence: TaggedSentence, verbs: tuple[int, ...]) -> bool:
    first, second, third = verbs
    if not _has_kind(sentence, first, "VER", "MOD"):
        return False
    # "... hätte kommen sollen": infinitive or participle right before a final infinitive
    if _has_kind(sentence, third - 1, "VER", "INF", "PA2") and _has_kind(sentence, third, "VER", "INF"):
        return True
    # "... kann weder lesen noch schreiben"
    return (
        sentence[second - 1].text == "weder"
        and _has_kind(sentence, second, "VER", "INF")
        and sentence[third - 1].text == "noch"
    )


def find_governing_verb(sentence: TaggedSentence, span: Span) -> int | None:
    """Index of the verb that closes a potential subclause in ``span``.

    Returns ``None`` when the span does not look like a subclause.
    """
    verbs = verb_positions(sentence, span)
    if len(verbs) == 1 and span.end < len(sentence) - 2 and verbs[0] == span.last:
        return _single_final_verb(sentence, span, verbs[0])
    if len(verbs) == 2:
        first, second = verbs
        if _has_kind(sentence, first, "VER", "MOD", "AUX") and _has_kind(sentence, second, "VER", "INF"):
            return first
        if _has_kind(sentence, first, "VER", "AUX") and _has_kind(sentence, second, "VER", "PA2"):
            return None
    if len(verbs) == 3 and _is_modal_construction(sentence, verbs):
        return None
    if len(verbs) > 1:
        return verbs[-1]
    return None
