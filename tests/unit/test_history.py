# tests/unit/test_history.py
from design_review.models.review import ReviewComment, ReviewResult
from design_review.review.history import format_previous_rounds


def make_round(assessment: str, *severities: str) -> ReviewResult:
    return ReviewResult(
        overall_assessment=assessment,
        comments=[
            ReviewComment(severity=s, category="bug", comment=f"{s} issue")
            for s in severities
        ],
    )


def test_empty_history_is_empty_string():
    assert format_previous_rounds([]) == ""


def test_single_round():
    rounds = [make_round("needs_changes", "critical", "major", "major", "minor")]

    assert format_previous_rounds(rounds) == "Round 1: needs_changes (1 critical, 2 major issues)"


def test_rounds_keep_input_order():
    rounds = [
        make_round("needs_changes", "critical", "critical"),
        make_round("lgtm_with_suggestions", "suggestion"),
        make_round("lgtm"),
    ]

    assert format_previous_rounds(rounds).split("\n") == [
        "Round 1: needs_changes (2 critical, 0 major issues)",
        "Round 2: lgtm_with_suggestions (0 critical, 0 major issues)",
        "Round 3: lgtm (0 critical, 0 major issues)",
    ]


def test_identical_rounds_are_not_deduplicated():
    rounds = [make_round("needs_changes", "major")] * 2

    assert len(format_previous_rounds(rounds).split("\n")) == 2
