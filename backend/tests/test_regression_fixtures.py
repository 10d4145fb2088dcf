from __future__ import annotations

import json
from pathlib import Path

import pytest

from kommacheck.services.comma.relative_clause_rule import (
    MATCH_MESSAGE,
    RULE_ID_BEFORE,
    MissingCommaRelativeClauseRule,
)
from kommacheck.services.comma.sentence import build_sentence


FIXTURES_DIR = Path(__file__).resolve().parents[2] / "test-data" / "fixtures"
CASES_FILE = FIXTURES_DIR / "relative-clause-cases.json"


def _load_cases() -> list[dict[str, object]]:
    return json.loads(CASES_FILE.read_text(encoding="utf-8"))


CASES = _load_cases()


@pytest.mark.parametrize("case", CASES, ids=[case["id"] for case in CASES])
def test_relative_clause_fixture_matches_expected(case: dict[str, object]) -> None:
    sentence = build_sentence((text, tags) for text, tags in case["tokens"])

    matches = MissingCommaRelativeClauseRule().match(sentence)

    assert [
        {"start": match.start, "end": match.end, "suggestion": match.suggestion}
        for match in matches
    ] == case["expected"]
    for match in matches:
        assert match.rule_id == RULE_ID_BEFORE
        assert match.message == MATCH_MESSAGE
        assert 0 <= match.start <= match.end <= len(sentence.text)
        original = sentence.text[match.start:match.end]
        assert match.suggestion.count(",") == original.count(",") + 1


def test_fixture_cases_have_unique_ids_and_tagged_tokens() -> None:
    ids = [case["id"] for case in CASES]
    assert len(ids) == len(set(ids))
    for case in CASES:
        assert all(len(item) == 2 and isinstance(item[1], list) for item in case["tokens"])
