from enum import Enum
from pydantic import BaseModel, Field, field_validator


class Severity(str, Enum):
    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    SUGGESTION = "suggestion"


class Category(str, Enum):
    ARCHITECTURE = "architecture"
    DESIGN = "design"
    BUG = "bug"
    PERFORMANCE = "performance"
    STYLE = "style"
    SECURITY = "security"
    MISSING_FEATURE = "missing_feature"


class AssessmentResult(str, Enum):
    NEEDS_CHANGES = "needs_changes"
    LGTM_WITH_SUGGESTIONS = "lgtm_with_suggestions"
    LGTM = "lgtm"


class CommentType(str, Enum):
    SPECIFIC = "specific"
    GENERAL = "general"


# Severities allowed for violation impact and missing requirements
BLOCKING_SEVERITIES = (Severity.CRITICAL, Severity.MAJOR, Severity.MINOR)


class MajorViolation(BaseModel):
    issue: str
    description: str
    impact: Severity
    recommendation: str

    @field_validator("impact")
    @classmethod
    def check_impact(cls, value: Severity) -> Severity:
        if value not in BLOCKING_SEVERITIES:
            raise ValueError(f"impact must be one of critical|major|minor, got {value.value}")
        return value


class DesignCompliance(BaseModel):
    follows_architecture: bool = True
    major_violations: list[MajorViolation] = Field(default_factory=list)


class ReviewComment(BaseModel):
    type: CommentType = CommentType.SPECIFIC
    file: str | None = None
    line: int | None = None
    severity: Severity
    category: Category
    comment: str
    suggested_fix: str | None = None


class MissingRequirement(BaseModel):
    requirement: str
    design_doc_reference: str | None = None
    severity: Severity

    @field_validator("severity")
    @classmethod
    def check_severity(cls, value: Severity) -> Severity:
        if value not in BLOCKING_SEVERITIES:
            raise ValueError(f"severity must be one of critical|major|minor, got {value.value}")
        return value


class TestResults(BaseModel):
    __test__ = False  # not a pytest class

    passed: bool | None = None
    summary: str = ""
    failing_tests: list[str] = Field(default_factory=list)
    coverage: str | None = None


class ReviewResult(BaseModel):
    design_compliance: DesignCompliance = Field(default_factory=DesignCompliance)
    comments: list[ReviewComment] = Field(default_factory=list)
    missing_requirements: list[MissingRequirement] = Field(default_factory=list)
    test_results: TestResults = Field(default_factory=TestResults)
    overall_assessment: AssessmentResult

    def count_severity(self, severity: Severity) -> int:
        return sum(1 for c in self.comments if c.severity == severity)
