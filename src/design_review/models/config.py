from pydantic import BaseModel, Field
from .request import ReviewRequest


class ProjectConfig(BaseModel):
    """Defaults from a repository's .design-review.yaml."""

    relevant_docs: list[str] = Field(default_factory=list)
    focus_areas: list[str] = Field(default_factory=list)
    test_command: str | None = None
    max_doc_length: int | None = Field(default=None, gt=0)

    def apply(self, request: ReviewRequest) -> ReviewRequest:
        """Fill fields the request leaves empty; explicit request values win."""
        return request.model_copy(update={
            "relevant_docs": request.relevant_docs or list(self.relevant_docs),
            "focus_areas": request.focus_areas or list(self.focus_areas),
            "test_command": request.test_command or self.test_command,
        })
