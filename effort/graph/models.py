"""Graph vertex models consumed by score providers."""

import uuid
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return uuid.uuid4().hex


class FileModel(BaseModel):
    """A single analyzed source artifact."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Graph vertex id")
    file_path: str = Field(..., description="Path of the file", min_length=1)

    @property
    def file_name(self) -> str:
        """Return the last path component."""
        return PurePath(self.file_path).name


class ClassificationModel(BaseModel):
    """A technology/role tag attached to one or more files."""

    id: str = Field(default_factory=_new_id, description="Graph vertex id")
    classification: str = Field(..., description="Classification title", min_length=1)
    effort: int = Field(default=0, description="Effort points per file", ge=0)
    file_ids: set[str] = Field(
        default_factory=set, description="Ids of files carrying this tag"
    )
    description: str | None = Field(None, description="Longer explanation")
    rule_id: str | None = Field(None, description="Rule that produced the tag")


class InlineHintModel(BaseModel):
    """A file-localized issue requiring a specific change."""

    id: str = Field(default_factory=_new_id, description="Graph vertex id")
    title: str = Field(..., description="Hint title", min_length=1)
    effort: int = Field(default=0, description="Effort points", ge=0)
    file_id: str = Field(..., description="Id of the file the hint is in")
    line_number: int | None = Field(None, description="1-based line number", ge=1)
    hint: str | None = Field(None, description="Suggested change")
    rule_id: str | None = Field(None, description="Rule that produced the hint")
