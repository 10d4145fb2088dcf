from kommacheck.nlp.adapter import NLPAdapter, NLPSentence, NLPToken, TaggingError
from kommacheck.nlp.german import SpacyGermanNLPAdapter, load_german_nlp_adapter

__all__ = [
    "NLPAdapter",
    "NLPSentence",
    "NLPToken",
    "TaggingError",
    "SpacyGermanNLPAdapter",
    "load_german_nlp_adapter",
]
