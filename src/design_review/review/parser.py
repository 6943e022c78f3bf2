# src/design_review/review/parser.py
import json
import re
from pydantic import ValidationError
from unidiff import PatchSet
from design_review.models.review import ReviewResult


_JSON_FENCE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)


class ReviewParseError(ValueError):
    """LLM output could not be turned into a ReviewResult."""


def extract_json(text: str) -> str:
    """Extract JSON from response (may be wrapped in ```json or just ```)."""
    json_match = _JSON_FENCE.search(text)
    if json_match:
        return json_match.group(1)
    return text.strip()


def parse_review_response(text: str) -> ReviewResult:
    if not text or not text.strip():
        raise ReviewParseError("Empty response from reviewer")

    try:
        data = json.loads(extract_json(text))
    except json.JSONDecodeError as e:
        raise ReviewParseError(f"Reviewer response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ReviewParseError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return ReviewResult(**data)
    except ValidationError as e:
        raise ReviewParseError(f"Reviewer response does not match the review structure: {e}") from e


def changed_files_from_diff(diff_text: str) -> list[str]:
    """List the files touched by a unified diff, in patch order."""
    patch = PatchSet(diff_text)
    files: list[str] = []

    for patched_file in patch:
        if patched_file.path not in files:
            files.append(patched_file.path)

    return files
