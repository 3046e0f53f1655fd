"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from app.strategies.content.models import Example, ExampleMeta
from app.strategies.evaluation.models import (
    AttackVector,
    Criterion,
    DefenseStrategy,
    RubricTestCase,
)


# =============================================================================
# Playground Schemas
# =============================================================================


class TemplateRequest(BaseModel):
    """Request carrying a prompt template."""

    template: str = Field(default="", description="Prompt template with {variable} placeholders")

    model_config = {
        "json_schema_extra": {
            "example": {
                "template": "SYSTEM:\nYou are a helpful assistant.\n\nUSER MESSAGE:\n{user_input}",
            }
        }
    }


class RenderRequest(TemplateRequest):
    """Request to render a template with variable bindings."""

    bindings: dict[str, str] = Field(
        default_factory=dict,
        description="Variable values, applied in the order given",
    )


class VariablesResponse(BaseModel):
    """Placeholder names found in a template."""

    variables: list[str]


class RenderResponse(BaseModel):
    """Rendered prompt text."""

    rendered: str


# =============================================================================
# Example Schemas
# =============================================================================


class ExampleListResponse(BaseModel):
    """Response for listing examples."""

    examples: list[ExampleMeta]
    total: int
    categories: list[str] = Field(description="Distinct categories across the full catalog")
    difficulties: list[str] = Field(description="Distinct difficulties across the full catalog")


class ExampleDetailResponse(BaseModel):
    """A single example with navigation context."""

    example: Example
    category_label: str
    related: list[ExampleMeta]
    previous: ExampleMeta | None = None
    next: ExampleMeta | None = None


# =============================================================================
# Demo Schemas
# =============================================================================


class RubricRunRequest(BaseModel):
    """Request to run rubric criteria over test cases."""

    criteria: list[Criterion]
    test_cases: list[RubricTestCase]


class RubricDefaultsResponse(BaseModel):
    """Built-in criteria and test cases."""

    criteria: list[Criterion]
    test_cases: list[RubricTestCase]


class InjectionRequest(BaseModel):
    """Request to simulate an injection attempt.

    Either ``strategy_id`` selects a built-in template or ``template``
    supplies a custom one.
    """

    user_input: str
    strategy_id: str | None = None
    template: str | None = None


class InjectionCatalogResponse(BaseModel):
    """Built-in defensive strategies and attack vectors."""

    strategies: list[DefenseStrategy]
    attack_vectors: list[AttackVector]


class ValidateRequest(BaseModel):
    """Request to validate JSON output against a JSON Schema."""

    schema_text: str = Field(description="JSON Schema as JSON text")
    output_text: str = Field(description="Model output as JSON text")


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")
