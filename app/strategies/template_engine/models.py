"""Template engine domain models.

Pydantic models specific to prompt template analysis and scoring.
These models live here to avoid circular imports with the API layer.
"""

from pydantic import BaseModel, Field, computed_field


class ScoreResult(BaseModel):
    """Heuristic quality score for a prompt template."""

    score: int = Field(ge=0, le=100, description="Bounded quality score")
    strengths: list[str] = Field(
        default_factory=list, description="Best practices the prompt already follows"
    )
    improvements: list[str] = Field(
        default_factory=list, description="Suggestions for checks the prompt failed"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rating(self) -> str:
        """Human-readable band for the score."""
        if self.score < 60:
            return "Needs improvement"
        if self.score < 80:
            return "Good"
        return "Excellent"


class TemplateAnalysis(BaseModel):
    """Everything the playground shows for one template and its bindings."""

    variables: list[str] = Field(description="Unique placeholder names in first-seen order")
    rendered: str = Field(description="Template with bound placeholders substituted")
    score: ScoreResult
