# src/design_review/documents/__init__.py
from .base import DocumentSource
from .local import InMemoryDocumentSource, LocalDocumentSource

__all__ = ["DocumentSource", "InMemoryDocumentSource", "LocalDocumentSource"]
