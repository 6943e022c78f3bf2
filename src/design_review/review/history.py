# src/design_review/review/history.py
from collections.abc import Sequence
from design_review.models.review import ReviewResult, Severity


def format_round(index: int, result: ReviewResult) -> str:
    critical = result.count_severity(Severity.CRITICAL)
    major = result.count_severity(Severity.MAJOR)
    return f"Round {index}: {result.overall_assessment.value} ({critical} critical, {major} major issues)"


def format_previous_rounds(rounds: Sequence[ReviewResult]) -> str:
    """One summary line per completed round, oldest first. Empty history gives ''."""
    return "\n".join(format_round(i, r) for i, r in enumerate(rounds, start=1))
