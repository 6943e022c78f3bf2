# src/design_review/documents/local.py
from pathlib import Path
from .base import DocumentSource


class LocalDocumentSource(DocumentSource):
    """Documents on the local filesystem.

    With a root directory, every path is resolved under it and anything that
    lands outside (absolute paths, ``..`` segments, symlinks) does not exist.
    Without a root, paths are used as given, relative to the working directory.
    """

    def __init__(self, root: str | None = None):
        self.root = Path(root).resolve() if root else None

    def _resolve(self, path: str) -> Path | None:
        if not self.root:
            return Path(path)
        candidate = (self.root / path).resolve()
        if not candidate.is_relative_to(self.root):
            return None
        return candidate

    def exists(self, path: str) -> bool:
        resolved = self._resolve(path)
        return resolved is not None and resolved.is_file()

    def read_text(self, path: str) -> str:
        resolved = self._resolve(path)
        if resolved is None:
            raise FileNotFoundError(f"{path} is outside the documents root")
        return resolved.read_text(encoding="utf-8")


class InMemoryDocumentSource(DocumentSource):
    def __init__(self, files: dict[str, str] | None = None):
        self.files = dict(files or {})

    def exists(self, path: str) -> bool:
        return path in self.files

    def read_text(self, path: str) -> str:
        return self.files[path]
