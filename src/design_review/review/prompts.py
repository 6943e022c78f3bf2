import logging
from collections.abc import Sequence
from enum import Enum
from design_review.documents.base import DocumentSource
from design_review.models.request import ReviewRequest
from design_review.models.review import (
    AssessmentResult,
    BLOCKING_SEVERITIES,
    Category,
    CommentType,
    ReviewResult,
    Severity,
)
from .documents import MAX_DOC_LENGTH, read_document_content
from .history import format_previous_rounds


logger = logging.getLogger(__name__)


REVIEW_PRIORITIES = """## Review Priorities
1. **Design Compliance** - Architecture alignment with docs
2. **Missing Requirements** - Required features/fields
3. **Structural Issues** - Interfaces, patterns, dependencies
4. **Implementation Quality** - Bugs, security, performance"""

JSON_OUTPUT_INSTRUCTIONS = "Output ONLY a valid JSON object with the review structure. No other text before or after."


def _choices(values: Sequence[Enum] | type[Enum]) -> str:
    return "|".join(v.value for v in values)


JSON_STRUCTURE = """JSON Structure:
{{
  "design_compliance": {{
    "follows_architecture": boolean,
    "major_violations": [{{
      "issue": string,
      "description": string,
      "impact": "{blocking}",
      "recommendation": string
    }}]
  }},
  "comments": [{{
    "type": "{comment_types}",
    "file": string (optional),
    "line": number (optional),
    "severity": "{severities}",
    "category": "{categories}",
    "comment": string,
    "suggested_fix": string (optional)
  }}],
  "missing_requirements": [{{
    "requirement": string,
    "design_doc_reference": string (optional),
    "severity": "{blocking}"
  }}],
  "test_results": {{
    "passed": boolean | null,
    "summary": string,
    "failing_tests": string[],
    "coverage": string (optional)
  }},
  "overall_assessment": "{assessments}"
}}"""


def build_json_structure() -> str:
    """Render the expected result shape from the enum definitions."""
    return JSON_STRUCTURE.format(
        blocking=_choices(BLOCKING_SEVERITIES),
        comment_types=_choices(CommentType),
        severities=_choices(Severity),
        categories=_choices(Category),
        assessments=_choices(AssessmentResult),
    )


FULL_PROMPT = """You are a senior software engineer conducting a code review. Ensure the implementation follows design documents and architectural decisions.

## Review Request
{summary}

## Relevant Documentation
{relevant_docs}

## Changed Files
{changed_files}

## Focus Areas
{focus_areas}

## Test Command
{test_instructions}

{priorities}

## Previous Review Rounds
{previous_rounds}

## Instructions
Focus on architectural issues over minor style issues. {json_instructions}

{json_structure}"""


def is_resume_mode(previous_rounds: Sequence[ReviewResult] | None, is_resume: bool) -> bool:
    return bool(is_resume and previous_rounds)


def build_resume_prompt(
    request: ReviewRequest,
    changed_files: Sequence[str],
    last_round: ReviewResult,
) -> str:
    """Compact follow-up prompt based on the most recent round only."""
    # Raw count from the latest round; individual issues are not tracked across rounds
    unresolved_critical = last_round.count_severity(Severity.CRITICAL)

    sections = [
        "## Follow-up Review Request",
        f"Previous Assessment: {last_round.overall_assessment.value}\n"
        f"Unresolved Critical Issues: {unresolved_critical}",
        request.summary,
        "## Changes Since Last Review\n" + "\n".join(changed_files),
    ]
    if request.focus_areas:
        sections.append("## Focus Areas\n" + "\n".join(request.focus_areas))
    if request.test_command:
        sections.append(f"## Test Command\n`{request.test_command}`")
    sections.append(f"Focus on whether previous issues were addressed. {JSON_OUTPUT_INSTRUCTIONS}")

    return "\n\n".join(sections)


def build_documentation_section(
    relevant_docs: Sequence[str],
    source: DocumentSource | None = None,
    max_doc_length: int = MAX_DOC_LENGTH,
) -> str:
    """Fenced content of every referenced document, in request order."""
    if not relevant_docs:
        return ""

    section = "\n\n## Referenced Documentation Content\n"
    for doc in relevant_docs:
        content = read_document_content(doc, max_length=max_doc_length, source=source)
        section += f"\n### {doc}\n```\n{content}\n```\n"
    return section


def build_full_prompt(
    request: ReviewRequest,
    changed_files: Sequence[str],
    previous_rounds: Sequence[ReviewResult] | None = None,
    source: DocumentSource | None = None,
    max_doc_length: int = MAX_DOC_LENGTH,
) -> str:
    if request.test_command:
        test_instructions = f"Run tests with: `{request.test_command}` and include results."
    else:
        test_instructions = "No test command provided - set test_results.passed to null."

    prompt = FULL_PROMPT.format(
        summary=request.summary,
        relevant_docs=", ".join(request.relevant_docs) or "None",
        changed_files="\n".join(changed_files),
        focus_areas="\n".join(request.focus_areas) or "General review",
        test_instructions=test_instructions,
        priorities=REVIEW_PRIORITIES,
        previous_rounds=format_previous_rounds(previous_rounds) if previous_rounds else "First review.",
        json_instructions=JSON_OUTPUT_INSTRUCTIONS,
        json_structure=build_json_structure(),
    )

    return prompt + build_documentation_section(request.relevant_docs, source, max_doc_length)


def generate_review_prompt(
    request: ReviewRequest,
    changed_files: Sequence[str],
    previous_rounds: Sequence[ReviewResult] | None = None,
    is_resume: bool = False,
    *,
    source: DocumentSource | None = None,
    max_doc_length: int = MAX_DOC_LENGTH,
) -> str:
    """Build the reviewer prompt.

    Resume mode is used only when it is requested and there is at least one
    previous round; everything else gets the full prompt, which embeds the
    referenced documents.
    """
    if is_resume_mode(previous_rounds, is_resume):
        prompt = build_resume_prompt(request, changed_files, previous_rounds[-1])
        mode = "resume"
    else:
        prompt = build_full_prompt(request, changed_files, previous_rounds, source, max_doc_length)
        mode = "full"

    logger.debug(f"Built {mode} review prompt: {len(prompt)} chars, {len(changed_files)} files")
    return prompt
