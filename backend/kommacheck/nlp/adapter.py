from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class TaggingError(RuntimeError):
    """The tagger failed to produce tokens for a text."""


@dataclass(frozen=True)
class NLPToken:
    text: str
    start: int
    end: int
    pos: str | None
    morphology: str | None
    tags: tuple[str, ...]
    is_punctuation: bool


@dataclass(frozen=True)
class NLPSentence:
    text: str
    start: int
    tokens: tuple[NLPToken, ...]


class NLPAdapter(Protocol):
    def tag(self, text: str) -> list[NLPSentence]:
        ...

    def metadata(self) -> dict[str, str]:
        ...
