# src/design_review/documents/base.py
from abc import ABC, abstractmethod


class DocumentSource(ABC):
    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the document decoded as UTF-8. May raise."""
        pass
