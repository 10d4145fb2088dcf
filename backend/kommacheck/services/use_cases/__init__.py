from kommacheck.services.use_cases.check import (
    CheckTextUseCase,
    available_rules,
    build_rules,
    to_tagged_sentence,
)

__all__ = ["CheckTextUseCase", "available_rules", "build_rules", "to_tagged_sentence"]
