#!/usr/bin/env python3
from __future__ import annotations

import json
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT_DIR / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from kommacheck.services.comma.relative_clause_rule import MissingCommaRelativeClauseRule
from kommacheck.services.comma.sentence import build_sentence


FIXTURES_DIR = ROOT_DIR / "test-data" / "fixtures"
CASES_FILE = FIXTURES_DIR / "relative-clause-cases.json"


def load_cases() -> list[dict[str, object]]:
    return json.loads(CASES_FILE.read_text(encoding="utf-8"))


def generate() -> None:
    cases = load_cases()
    rule = MissingCommaRelativeClauseRule()

    for case in cases:
        sentence = build_sentence((text, tags) for text, tags in case["tokens"])
        expected = [
            {"start": match.start, "end": match.end, "suggestion": match.suggestion}
            for match in rule.match(sentence)
        ]
        if expected != case["expected"]:
            print(f"[golden] {case['id']}: {case['expected']} -> {expected}")
        case["expected"] = expected

    CASES_FILE.write_text(
        json.dumps(cases, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    print(f"[golden] wrote {CASES_FILE.relative_to(ROOT_DIR)}")


if __name__ == "__main__":
    generate()
