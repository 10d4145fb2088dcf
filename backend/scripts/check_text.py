from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from kommacheck.core.config import load_settings
from kommacheck.services.comma.relative_clause_rule import MissingCommaRelativeClauseRule
from kommacheck.services.comma.sentence import build_sentence


def check_tagged(path: Path, after: bool) -> dict[str, object]:
    """Run the rule on a pre-tagged sentence: ``[[text, [tag, ...]], ...]``."""
    words = [(item[0], item[1]) for item in json.loads(path.read_text(encoding="utf-8"))]
    sentence = build_sentence(words)
    rule = MissingCommaRelativeClauseRule(after=after)
    return {
        "sentence": sentence.text,
        "rule_id": rule.rule_id,
        "matches": [asdict(match) for match in rule.match(sentence)],
    }


def check_text(text: str, after: bool) -> dict[str, object]:
    from kommacheck.nlp.german import load_german_nlp_adapter
    from kommacheck.services.use_cases import CheckTextUseCase

    settings = load_settings()
    adapter = load_german_nlp_adapter(settings)
    rules = [MissingCommaRelativeClauseRule(after=after)]
    response = CheckTextUseCase(adapter, rules).execute(text)
    return {
        "metadata": adapter.metadata(),
        **response.model_dump(),
    }


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check German text for missing commas before relative clauses")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to check")
    source.add_argument("--file", type=Path, help="UTF-8 text file to check")
    source.add_argument(
        "--tagged",
        type=Path,
        help="JSON file with a pre-tagged sentence as [[text, [tags...]], ...]",
    )
    parser.add_argument(
        "--after",
        action="store_true",
        help="Use the comma-after-relative-clause variant",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    if args.file is not None and not args.file.exists():
        raise SystemExit(f"file not found: {args.file}")
    if args.tagged is not None and not args.tagged.exists():
        raise SystemExit(f"tagged sentence not found: {args.tagged}")

    if args.tagged is not None:
        result = check_tagged(args.tagged, args.after)
    else:
        text = args.text if args.text is not None else args.file.read_text(encoding="utf-8")
        result = check_text(text, args.after)
    print(json.dumps(result, ensure_ascii=False))
