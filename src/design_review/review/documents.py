# src/design_review/review/documents.py
import logging
from design_review.documents.base import DocumentSource
from design_review.documents.local import LocalDocumentSource
from .truncation import smart_truncate


logger = logging.getLogger(__name__)

MAX_DOC_LENGTH = 5000


def read_document_content(
    path: str,
    max_length: int = MAX_DOC_LENGTH,
    source: DocumentSource | None = None,
) -> str:
    """Load a referenced document for the prompt.

    Missing files and read errors come back as inline placeholder text so a
    single bad path never breaks prompt assembly.
    """
    source = source or LocalDocumentSource()
    try:
        if not source.exists(path):
            logger.warning(f"Referenced document not found: {path}")
            return f"(File not found: {path})"
        content = source.read_text(path)
    except Exception as e:
        message = str(e) or "Unknown error"
        logger.warning(f"Could not read document {path}: {message}")
        return f"(Error reading file: {message})"

    return smart_truncate(content, max_length)
