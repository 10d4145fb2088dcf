from __future__ import annotations

from typing import Iterator

from kommacheck.services.comma.sentence import Span, TaggedSentence, TaggedToken


SEPARATOR_MARKS = frozenset(
    {
        ",", ";", ".", ":", "?", "!",
        "-", "–", "—",
        "’", "'", '"', "„", "“", "”", "»", "«", "‚", "‘", "›", "‹",
        "(", ")", "[", "]",
    }
)
COORDINATING_CONJUNCTIONS = frozenset({"und", "oder"})


def is_separator(token: TaggedToken) -> bool:
    return token.text in SEPARATOR_MARKS or token.text in COORDINATING_CONJUNCTIONS


def next_separator(sentence: TaggedSentence, start: int) -> int:
    for index in range(start, len(sentence)):
        if is_separator(sentence[index]):
            return index
    # The end of the sentence terminates the last span.
    return sentence.last_index


def iter_spans(sentence: TaggedSentence, start: int = 1) -> Iterator[Span]:
    cursor = start
    while cursor < len(sentence):
        end = next_separator(sentence, cursor)
        yield Span(cursor, end)
        cursor = end + 1
