from pydantic import BaseModel, Field, field_validator


class ReviewRequest(BaseModel):
    summary: str
    relevant_docs: list[str] = Field(default_factory=list)
    focus_areas: list[str] = Field(default_factory=list)
    test_command: str | None = None

    @field_validator("test_command")
    @classmethod
    def blank_command_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value
