from .truncation import smart_truncate, TRUNCATION_SUFFIX
from .documents import read_document_content, MAX_DOC_LENGTH
from .history import format_previous_rounds
from .prompts import generate_review_prompt
from .parser import parse_review_response, changed_files_from_diff, ReviewParseError

__all__ = [
    "smart_truncate",
    "TRUNCATION_SUFFIX",
    "read_document_content",
    "MAX_DOC_LENGTH",
    "format_previous_rounds",
    "generate_review_prompt",
    "parse_review_response",
    "changed_files_from_diff",
    "ReviewParseError",
]
