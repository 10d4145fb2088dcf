from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence

from kommacheck.services.comma.tags import MorphTag, GenderSet, parse_tags


SENTENCE_START_TAG = "SENT_START"
_ATTACHED_PUNCTUATION = frozenset({",", ".", ";", ":", "?", "!", ")", "]"})


@dataclass(frozen=True)
class TaggedToken:
    text: str
    start: int
    end: int
    readings: tuple[MorphTag, ...] = ()

    @property
    def is_tag_unknown(self) -> bool:
        return not self.readings

    @property
    def genders(self) -> GenderSet:
        found: frozenset = frozenset()
        for reading in self.readings:
            found |= reading.genders
        return found

    def has_reading(self, predicate: Callable[[MorphTag], bool]) -> bool:
        return any(predicate(reading) for reading in self.readings)

    def has_pos(self, *categories: str) -> bool:
        return any(reading.pos in categories for reading in self.readings)


@dataclass(frozen=True)
class Span:
    """Half-open token index range ``[start, end)`` between two separators."""

    start: int
    end: int

    @property
    def last(self) -> int:
        return self.end - 1

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end))

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end


class TaggedSentence(Sequence[TaggedToken]):
    """Tokens of one sentence; index 0 is the sentence-start anchor."""

    def __init__(self, tokens: Iterable[TaggedToken], text: str = ""):
        self._tokens = tuple(tokens)
        self.text = text

    @classmethod
    def from_tokens(cls, tokens: Iterable[TaggedToken], text: str = "") -> TaggedSentence:
        anchor = TaggedToken(
            text="",
            start=0,
            end=0,
            readings=(MorphTag(SENTENCE_START_TAG),),
        )
        return cls((anchor, *tokens), text=text)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __iter__(self) -> Iterator[TaggedToken]:
        return iter(self._tokens)

    @property
    def last_index(self) -> int:
        return len(self._tokens) - 1

    def get(self, index: int) -> TaggedToken | None:
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def text_at(self, index: int) -> str | None:
        token = self.get(index)
        return token.text if token is not None else None

    def __repr__(self) -> str:
        words = " ".join(token.text for token in self._tokens[1:])
        return f"TaggedSentence({words!r})"


def build_sentence(words: Iterable[tuple[str, Sequence[str]]]) -> TaggedSentence:
    """Build a sentence from ``(text, tags)`` pairs.

    Words are joined by single spaces, except closing punctuation, which is
    attached to the preceding word. Offsets refer to the joined text.
    """
    tokens: list[TaggedToken] = []
    text = ""
    for surface, tags in words:
        if text and surface not in _ATTACHED_PUNCTUATION:
            text += " "
        start = len(text)
        text += surface
        tokens.append(
            TaggedToken(
                text=surface,
                start=start,
                end=len(text),
                readings=parse_tags(tags),
            )
        )
    return TaggedSentence.from_tokens(tokens, text=text)
