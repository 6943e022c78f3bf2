from .config import ProjectConfig
from .request import ReviewRequest
from .review import (
    AssessmentResult,
    BLOCKING_SEVERITIES,
    Category,
    CommentType,
    DesignCompliance,
    MajorViolation,
    MissingRequirement,
    ReviewComment,
    ReviewResult,
    Severity,
    TestResults,
)

__all__ = [
    "ProjectConfig",
    "ReviewRequest",
    "AssessmentResult",
    "BLOCKING_SEVERITIES",
    "Category",
    "CommentType",
    "DesignCompliance",
    "MajorViolation",
    "MissingRequirement",
    "ReviewComment",
    "ReviewResult",
    "Severity",
    "TestResults",
]
