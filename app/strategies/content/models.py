"""Content catalog domain models."""

from enum import Enum

from pydantic import BaseModel, Field


class Difficulty(str, Enum):
    """Difficulty level of an example."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExampleMeta(BaseModel):
    """Front matter summary of an example, used for listings."""

    slug: str = Field(description="File stem of the example")
    title: str
    description: str = ""
    category: str = "general"
    difficulty: Difficulty = Difficulty.BEGINNER


class Example(ExampleMeta):
    """A fully loaded example with its rendered body."""

    content: str = Field(description="Body rendered to HTML")
    template: str | None = Field(default=None, description="Prompt template shown with the example")
    pitfalls: list[str] = Field(default_factory=list)
    checklist: list[str] = Field(default_factory=list)


class CategoryInfo(BaseModel):
    """Display metadata for an example category."""

    label: str
    order: int


CATEGORY_INFO: dict[str, CategoryInfo] = {
    "fundamentals": CategoryInfo(label="Fundamentals", order=1),
    "techniques": CategoryInfo(label="Core Techniques", order=2),
    "evaluation": CategoryInfo(label="Evaluation", order=2),
    "advanced-techniques": CategoryInfo(label="Advanced Techniques", order=3),
    "integration": CategoryInfo(label="Integration", order=4),
    "production": CategoryInfo(label="Production", order=5),
    "frameworks": CategoryInfo(label="Frameworks", order=6),
}

# Categories missing from CATEGORY_INFO sort last
UNKNOWN_CATEGORY_ORDER = 999
