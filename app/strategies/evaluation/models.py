"""Evaluation demo domain models."""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# Rubric
# =============================================================================


class CriterionType(str, Enum):
    """How a rubric criterion inspects an output."""

    JSON = "json"
    CONTAINS = "contains"
    REGEX = "regex"
    LENGTH = "length"


class Criterion(BaseModel):
    """A single rubric rule."""

    name: str
    description: str = ""
    type: CriterionType
    config: str = Field(
        default="",
        description="Comma-separated fields for contains, a pattern for regex, min-max for length",
    )


class CriterionResult(BaseModel):
    """Outcome of one criterion against one output."""

    criterion: str
    passed: bool
    message: str


class RubricEvaluation(BaseModel):
    """Outcome of every criterion against one output."""

    passed: bool
    results: list[CriterionResult]


class RubricTestCase(BaseModel):
    """An input/output pair with the verdict the rubric should reach."""

    input: str
    output: str
    expected_pass: bool


class RubricCaseResult(BaseModel):
    """Evaluation of one test case and whether it matched expectations."""

    test_case: RubricTestCase
    evaluation: RubricEvaluation
    correct: bool


class RubricSummary(BaseModel):
    """Aggregate numbers for a rubric run."""

    total: int
    passed: int
    pass_rate: float = Field(description="Percentage of cases that passed, one decimal")
    accuracy: float = Field(description="Percentage of cases matching expected_pass, one decimal")


class RubricReport(BaseModel):
    """Full result of running a rubric over test cases."""

    results: list[RubricCaseResult]
    summary: RubricSummary


# =============================================================================
# Injection sandbox
# =============================================================================


class Severity(str, Enum):
    """Severity of an attack vector."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DefenseStrategy(BaseModel):
    """A prompt template illustrating one defensive technique."""

    id: str
    name: str
    template: str
    description: str


class AttackVector(BaseModel):
    """A sample injection attempt."""

    name: str
    input: str
    severity: Severity


class InjectionResult(BaseModel):
    """Simulated model behaviour for a template and user input."""

    blocked: bool
    response: str
    reasoning: str
    protection_score: int
    attack_strength: int
    prompt: str = Field(description="The template with the user input substituted")


# =============================================================================
# Output validator
# =============================================================================


class SchemaError(BaseModel):
    """A single schema validation failure."""

    path: str = Field(description="JSON pointer to the failing value")
    schema_path: str = Field(description="JSON pointer to the failing schema keyword")
    keyword: str
    message: str


class ValidationReport(BaseModel):
    """Result of validating an output against a JSON schema."""

    valid: bool
    errors: list[SchemaError] = Field(default_factory=list)
