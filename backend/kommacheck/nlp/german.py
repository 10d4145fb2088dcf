from __future__ import annotations

import logging
from importlib.metadata import version as package_version

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version

from kommacheck.core.config import Settings
from kommacheck.nlp.adapter import NLPAdapter, NLPSentence, NLPToken, TaggingError
from kommacheck.nlp.tagset import to_tags


logger = logging.getLogger(__name__)


class SpacyGermanNLPAdapter(NLPAdapter):
    def __init__(self, model_name: str):
        self.model_name = model_name
        # Import lazily so backend startup can degrade cleanly if NLP deps are absent.
        import spacy

        self._nlp = spacy.load(model_name)
        self._warn_if_spacy_version_incompatible()

    def tag(self, text: str) -> list[NLPSentence]:
        if not text.strip():
            return []

        try:
            doc = self._nlp(text)
            return [self._to_nlp_sentence(sentence) for sentence in doc.sents]
        except (ValueError, RuntimeError) as exc:
            raise TaggingError(f"spaCy failed to tag text: {exc}") from exc

    def metadata(self) -> dict[str, str]:
        return {
            "adapter": self.__class__.__name__,
            "spacy": package_version("spacy"),
            "model": self.model_name,
        }

    def _to_nlp_sentence(self, sentence) -> NLPSentence:
        offset = sentence.start_char
        tokens = tuple(
            self._to_nlp_token(token, offset)
            for token in sentence
            if not token.is_space
        )
        return NLPSentence(text=sentence.text, start=offset, tokens=tokens)

    def _to_nlp_token(self, token, offset: int) -> NLPToken:
        morph = str(token.morph) if str(token.morph) else None
        stts = token.tag_ or None
        return NLPToken(
            text=token.text,
            start=token.idx - offset,
            end=token.idx - offset + len(token.text),
            pos=stts,
            morphology=morph,
            tags=() if token.is_punct else to_tags(stts, morph, token.text),
            is_punctuation=bool(token.is_punct),
        )

    def _warn_if_spacy_version_incompatible(self) -> None:
        runtime_version_str = package_version("spacy")
        model_spec = str(self._nlp.meta.get("spacy_version") or "").strip()
        if not model_spec:
            return

        try:
            runtime_version = Version(runtime_version_str)
            compat_spec = SpecifierSet(model_spec)
        except InvalidVersion:
            logger.warning(
                "nlp_spacy_version_parse_failed",
                extra={
                    "model": self.model_name,
                    "runtime_spacy": runtime_version_str,
                    "model_spacy_spec": model_spec,
                },
            )
            return

        if compat_spec.contains(runtime_version, prereleases=True):
            return

        logger.warning(
            "nlp_model_spacy_version_mismatch",
            extra={
                "model": self.model_name,
                "runtime_spacy": runtime_version_str,
                "model_spacy_spec": model_spec,
            },
        )


def load_german_nlp_adapter(settings: Settings) -> NLPAdapter:
    return SpacyGermanNLPAdapter(model_name=settings.nlp_model)
