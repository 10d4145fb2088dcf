from __future__ import annotations

import re

import pytest

from kommacheck.nlp.adapter import NLPSentence, NLPToken
from kommacheck.services.comma.sentence import build_sentence


# Hand-tagged readings in the morphological tag scheme the rule consumes.
LEXICON: dict[str, tuple[str, ...]] = {
    "Das": ("ART:DEF:NOM:SIN:NEU", "PRO:DEM:NOM:SIN:NEU:B/S"),
    "das": ("ART:DEF:NOM:SIN:NEU", "PRO:DEM:NOM:SIN:NEU:B/S", "PRO:REL:NOM:SIN:NEU"),
    "Der": ("ART:DEF:NOM:SIN:MAS", "PRO:DEM:NOM:SIN:MAS:B/S"),
    "den": ("ART:DEF:AKK:SIN:MAS", "PRO:REL:AKK:SIN:MAS"),
    "der": ("ART:DEF:DAT:SIN:FEM", "PRO:DEM:DAT:SIN:FEM:B/S", "PRO:REL:DAT:SIN:FEM"),
    "die": ("ART:DEF:NOM:SIN:FEM", "PRO:DEM:NOM:SIN:FEM:B/S", "PRO:REL:NOM:SIN:FEM"),
    "Die": ("ART:DEF:NOM:PLU:FEM", "ART:DEF:NOM:PLU:NEU"),
    "welche": ("PRO:REL:AKK:PLU:NEU", "PRO:INR:AKK:PLU:NEU"),
    "Auto": ("SUB:NOM:SIN:NEU", "SUB:AKK:SIN:NEU"),
    "Kind": ("SUB:NOM:SIN:NEU",),
    "Mann": ("SUB:NOM:SIN:MAS",),
    "Frau": ("SUB:NOM:SIN:FEM",),
    "Bücher": ("SUB:NOM:PLU:NEU", "SUB:AKK:PLU:NEU"),
    "ich": ("PRO:PER:NOM:SIN:ALG",),
    "Er": ("PRO:PER:NOM:SIN:MAS",),
    "er": ("PRO:PER:NOM:SIN:MAS",),
    "es": ("PRO:PER:NOM:SIN:NEU", "PRO:PER:AKK:SIN:NEU"),
    "wir": ("PRO:PER:NOM:PLU:ALG",),
    "kaufte": ("VER:1:SIN:PRT:SFT", "VER:3:SIN:PRT:SFT"),
    "kenne": ("VER:1:SIN:PRÄ:SFT",),
    "lese": ("VER:1:SIN:PRÄ:SFT",),
    "sieht": ("VER:3:SIN:PRÄ:SFT",),
    "fährt": ("VER:3:SIN:PRÄ:SFT",),
    "hält": ("VER:3:SIN:PRÄ:SFT",),
    "wohnt": ("VER:3:SIN:PRÄ:SFT", "VER:2:PLU:PRÄ:SFT"),
    "regnet": ("VER:3:SIN:PRÄ:SFT",),
    "lief": ("VER:1:SIN:PRT:SFT", "VER:3:SIN:PRT:SFT"),
    "kam": ("VER:1:SIN:PRT:SFT", "VER:3:SIN:PRT:SFT"),
    "ist": ("VER:AUX:3:SIN:PRÄ",),
    "sind": ("VER:AUX:1:PLU:PRÄ", "VER:AUX:3:PLU:PRÄ"),
    "hat": ("VER:AUX:3:SIN:PRÄ",),
    "habe": ("VER:AUX:1:SIN:PRÄ",),
    "kann": ("VER:MOD:1:SIN:PRÄ", "VER:MOD:3:SIN:PRÄ"),
    "muss": ("VER:MOD:1:SIN:PRÄ", "VER:MOD:3:SIN:PRÄ"),
    "verkauft": ("VER:3:SIN:PRÄ:SFT", "VER:2:PLU:PRÄ:SFT", "VER:PA2:SFT"),
    "gesprochen": ("VER:PA2:SFT", "PA2:PRD:GRU:VER"),
    "kommen": ("VER:INF:SFT", "VER:1:PLU:PRÄ:SFT", "VER:3:PLU:PRÄ:SFT"),
    "bleiben": ("VER:INF:SFT", "VER:1:PLU:PRÄ:SFT", "VER:3:PLU:PRÄ:SFT"),
    "lesen": ("VER:INF:SFT", "VER:1:PLU:PRÄ:SFT", "VER:3:PLU:PRÄ:SFT"),
    "schreiben": ("VER:INF:SFT", "VER:1:PLU:PRÄ:SFT", "VER:3:PLU:PRÄ:SFT"),
    "schwimmen": ("VER:INF:SFT", "VER:1:PLU:PRÄ:SFT", "VER:3:PLU:PRÄ:SFT"),
    "wollen": ("VER:INF:SFT", "VER:MOD:1:PLU:PRÄ", "VER:MOD:3:PLU:PRÄ"),
    "gehen": ("VER:INF:SFT", "VER:1:PLU:PRÄ:SFT", "VER:3:PLU:PRÄ:SFT"),
    "bekannte": ("VER:1:SIN:PRT:SFT", "VER:3:SIN:PRT:SFT", "PA2:NOM:SIN:FEM:GRU:DEF:VER"),
    "junge": ("ADJ:NOM:SIN:FEM:GRU:DEF",),
    "Sängerin": ("SUB:NOM:SIN:FEM",),
    "schnell": ("ADJ:PRD:GRU", "ADV:MOD"),
    "fahrende": ("PA1:AKK:SIN:NEU:GRU:DEF:VER", "PA1:NOM:SIN:NEU:GRU:DEF:VER"),
    "rot": ("ADJ:PRD:GRU",),
    "alt": ("ADJ:PRD:GRU",),
    "hier": ("ADV:LOK",),
    "Zuerst": ("ADV:TMP",),
    "nicht": ("NEG",),
    "mit": ("PRP:MOD:DAT",),
    "zu": ("ZUS",),
    "Weil": ("KON:UNT",),
    "weder": ("KON:NEB",),
    "noch": ("KON:NEB", "ADV:TMP"),
    "und": ("KON:NEB",),
}

_WORD_RE = re.compile(r"\w+|[^\w\s]")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]?")


def tag_words(text: str) -> list[tuple[str, tuple[str, ...]]]:
    return [(word, LEXICON.get(word, ())) for word in text.split()]


class StubNLPAdapter:
    def tag(self, text: str) -> list[NLPSentence]:
        return []

    def metadata(self) -> dict[str, str]:
        return {"adapter": "StubNLPAdapter"}


class LexiconNLPAdapter:
    """Splits on sentence punctuation and tags words from ``LEXICON``."""

    def tag(self, text: str) -> list[NLPSentence]:
        sentences: list[NLPSentence] = []
        for sentence_match in _SENTENCE_RE.finditer(text):
            raw = sentence_match.group(0)
            stripped = raw.lstrip()
            if not stripped.strip():
                continue
            offset = sentence_match.start() + (len(raw) - len(stripped))
            tokens = tuple(
                NLPToken(
                    text=word.group(0),
                    start=word.start(),
                    end=word.end(),
                    pos=None,
                    morphology=None,
                    tags=LEXICON.get(word.group(0), ()),
                    is_punctuation=not word.group(0)[0].isalnum(),
                )
                for word in _WORD_RE.finditer(stripped)
            )
            sentences.append(NLPSentence(text=stripped.rstrip(), start=offset, tokens=tokens))
        return sentences

    def metadata(self) -> dict[str, str]:
        return {"adapter": "LexiconNLPAdapter"}


@pytest.fixture
def stub_nlp_adapter_factory():
    return lambda _settings: StubNLPAdapter()


@pytest.fixture
def lexicon_nlp_adapter_factory():
    return lambda _settings: LexiconNLPAdapter()


@pytest.fixture
def sentence_of():
    """Build a tagged sentence from space-separated words looked up in ``LEXICON``."""
    return lambda text: build_sentence(tag_words(text))
