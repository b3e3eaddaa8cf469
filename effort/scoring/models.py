"""Data models for effort scoring."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class EffortBreakdown(BaseModel):
    """Per-provider effort contributions for one file."""

    file_id: str = Field(..., description="Graph vertex id of the file")
    file_path: str = Field(..., description="Path of the file")
    contributions: dict[str, int] = Field(
        default_factory=dict,
        description="Effort points keyed by provider name",
    )

    @field_validator("contributions")
    @classmethod
    def validate_contributions(cls, v: dict[str, int]) -> dict[str, int]:
        """Ensure every contribution is non-negative."""
        negative = {name: points for name, points in v.items() if points < 0}
        if negative:
            raise ValueError(f"Effort contributions must be >= 0, got {negative}")
        return v

    @property
    def total(self) -> int:
        """Total effort points for the file."""
        return sum(self.contributions.values())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "file_id": self.file_id,
            "file_path": self.file_path,
            "total": self.total,
            "contributions": dict(self.contributions),
        }
