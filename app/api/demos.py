"""Evaluation demo API routes.

Hosts the rubric runner, the prompt injection sandbox and the JSON
output validator.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from app.api.schemas import (
    InjectionCatalogResponse,
    InjectionRequest,
    RubricDefaultsResponse,
    RubricRunRequest,
    ValidateRequest,
)
from app.strategies.evaluation import run_rubric, simulate_injection, validate_output
from app.strategies.evaluation.injection import ATTACK_VECTORS, STRATEGIES, get_strategy
from app.strategies.evaluation.models import InjectionResult, RubricReport, ValidationReport
from app.strategies.evaluation.rubric import DEFAULT_CRITERIA, DEFAULT_TEST_CASES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/demos", tags=["demos"])


# =============================================================================
# Rubric
# =============================================================================


@router.get("/rubric/defaults", response_model=RubricDefaultsResponse)
async def rubric_defaults() -> RubricDefaultsResponse:
    """Return the built-in criteria and test cases."""
    return RubricDefaultsResponse(
        criteria=list(DEFAULT_CRITERIA),
        test_cases=list(DEFAULT_TEST_CASES),
    )


@router.post("/rubric/run", response_model=RubricReport)
async def rubric_run(request: RubricRunRequest) -> RubricReport:
    """Run the given criteria over the given test cases."""
    return run_rubric(request.test_cases, request.criteria)


# =============================================================================
# Injection sandbox
# =============================================================================


@router.get("/injection/catalog", response_model=InjectionCatalogResponse)
async def injection_catalog() -> InjectionCatalogResponse:
    """Return the built-in defensive strategies and attack vectors."""
    return InjectionCatalogResponse(
        strategies=list(STRATEGIES),
        attack_vectors=list(ATTACK_VECTORS),
    )


@router.post("/injection/simulate", response_model=InjectionResult)
async def injection_simulate(request: InjectionRequest) -> InjectionResult:
    """Simulate an injection attempt against a built-in or custom template.

    Raises:
        HTTPException: 404 for an unknown strategy id, 422 when neither a
            strategy id nor a template is given.
    """
    if request.template is not None:
        template = request.template
    elif request.strategy_id is not None:
        strategy = get_strategy(request.strategy_id)
        if strategy is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown strategy: {request.strategy_id}",
            )
        template = strategy.template
    else:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Either strategy_id or template is required",
        )

    return simulate_injection(template, request.user_input)


# =============================================================================
# Output validator
# =============================================================================


@router.post("/validator/validate", response_model=ValidationReport)
async def validator_validate(request: ValidateRequest) -> ValidationReport:
    """Validate JSON output text against a JSON Schema text."""
    return validate_output(request.schema_text, request.output_text)
