"""Evaluation demo strategies: rubric runner, injection sandbox, output validator."""

from app.strategies.evaluation.injection import simulate_injection
from app.strategies.evaluation.rubric import evaluate_output, run_rubric
from app.strategies.evaluation.schema_validator import validate_output

__all__ = [
    "evaluate_output",
    "run_rubric",
    "simulate_injection",
    "validate_output",
]
