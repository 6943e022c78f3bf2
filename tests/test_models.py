# tests/test_models.py
import pytest
from pydantic import ValidationError
from design_review.models import (
    AssessmentResult,
    Category,
    MajorViolation,
    MissingRequirement,
    ProjectConfig,
    ReviewComment,
    ReviewRequest,
    ReviewResult,
    Severity,
)


def test_enum_values():
    assert [s.value for s in Severity] == ["critical", "major", "minor", "suggestion"]
    assert [c.value for c in Category] == [
        "architecture", "design", "bug", "performance", "style", "security", "missing_feature",
    ]
    assert [a.value for a in AssessmentResult] == ["needs_changes", "lgtm_with_suggestions", "lgtm"]


def test_review_request_defaults():
    request = ReviewRequest(summary="Refactor storage")
    assert request.relevant_docs == []
    assert request.focus_areas == []
    assert request.test_command is None


def test_blank_test_command_is_none():
    assert ReviewRequest(summary="x", test_command="   ").test_command is None
    assert ReviewRequest(summary="x", test_command="pytest").test_command == "pytest"


def test_review_result_minimal():
    result = ReviewResult(overall_assessment="lgtm")

    assert result.overall_assessment == AssessmentResult.LGTM
    assert result.comments == []
    assert result.test_results.passed is None
    assert result.design_compliance.follows_architecture is True


def test_review_result_full_payload():
    result = ReviewResult(**{
        "design_compliance": {
            "follows_architecture": False,
            "major_violations": [{
                "issue": "Layer bypass",
                "description": "Controller talks to the DB",
                "impact": "critical",
                "recommendation": "Go through the repository",
            }],
        },
        "comments": [{
            "type": "general",
            "severity": "major",
            "category": "missing_feature",
            "comment": "No pagination",
        }],
        "missing_requirements": [{"requirement": "Audit log", "severity": "major"}],
        "test_results": {"passed": True, "summary": "12 passed", "failing_tests": []},
        "overall_assessment": "needs_changes",
    })

    assert result.design_compliance.major_violations[0].impact == Severity.CRITICAL
    assert result.comments[0].category == Category.MISSING_FEATURE
    assert result.comments[0].file is None
    assert result.count_severity(Severity.MAJOR) == 1
    assert result.test_results.coverage is None


def test_unknown_severity_rejected():
    with pytest.raises(ValidationError):
        ReviewComment(severity="high", category="bug", comment="x")


def test_suggestion_not_allowed_for_requirements():
    with pytest.raises(ValidationError):
        MissingRequirement(requirement="x", severity="suggestion")


def test_suggestion_not_allowed_for_violation_impact():
    with pytest.raises(ValidationError):
        MajorViolation(issue="i", description="d", impact="suggestion", recommendation="r")


def test_project_config_fills_empty_request_fields():
    config = ProjectConfig(relevant_docs=["docs/arch.md"], focus_areas=["api"], test_command="make test")
    request = ReviewRequest(summary="x", focus_areas=["perf"])

    merged = config.apply(request)

    assert merged.relevant_docs == ["docs/arch.md"]
    assert merged.focus_areas == ["perf"]
    assert merged.test_command == "make test"
    assert request.relevant_docs == []
