"""Rubric evaluator.

Runs simple pass/fail criteria against model outputs and reports how often
the rubric agrees with the expected verdict for each test case.
"""

import logging
import re
from collections.abc import Sequence

from app.strategies.evaluation.models import (
    Criterion,
    CriterionResult,
    CriterionType,
    RubricCaseResult,
    RubricEvaluation,
    RubricReport,
    RubricSummary,
    RubricTestCase,
)
from app.strategies.evaluation.strict_json import JSONParseError, loads_strict

logger = logging.getLogger(__name__)


DEFAULT_CRITERIA: tuple[Criterion, ...] = (
    Criterion(
        name="Valid JSON",
        description="Output must be valid JSON",
        type=CriterionType.JSON,
    ),
    Criterion(
        name="Has Required Fields",
        description='Must contain "name" and "priority" fields',
        type=CriterionType.CONTAINS,
        config="name,priority",
    ),
)

DEFAULT_TEST_CASES: tuple[RubricTestCase, ...] = (
    RubricTestCase(
        input="Create task: Fix login bug, high priority",
        output='{"name": "Fix login bug", "priority": "high"}',
        expected_pass=True,
    ),
    RubricTestCase(
        input="Create task: Update docs",
        output='{"name": "Update docs"}',
        expected_pass=False,
    ),
    RubricTestCase(
        input="Create task: Review code",
        output="The task is: Review code with priority medium",
        expected_pass=False,
    ),
)


def _check_json(output: str) -> tuple[bool, str]:
    try:
        loads_strict(output)
    except JSONParseError:
        return False, "Invalid JSON"
    return True, "Valid JSON"


def _check_contains(output: str, config: str) -> tuple[bool, str]:
    required = [field.strip() for field in config.split(",")]
    missing = [field for field in required if f'"{field}"' not in output]
    if missing:
        return False, f"Missing: {', '.join(missing)}"
    return True, "All required fields present"


def _check_regex(output: str, config: str) -> tuple[bool, str]:
    try:
        pattern = re.compile(config)
    except re.error as e:
        return False, f"Invalid pattern: {e}"
    if pattern.search(output):
        return True, "Pattern matched"
    return False, "Pattern not found"


def _check_length(output: str, config: str) -> tuple[bool, str]:
    try:
        low, high = (int(part) for part in config.split("-"))
    except ValueError:
        return False, f"Invalid length range: {config!r}"

    length = len(output)
    if low <= length <= high:
        return True, f"Length {length} in range"
    return False, f"Length {length} outside range {low}-{high}"


def evaluate_criterion(output: str, criterion: Criterion) -> CriterionResult:
    """Apply a single criterion to an output."""
    match criterion.type:
        case CriterionType.JSON:
            passed, message = _check_json(output)
        case CriterionType.CONTAINS:
            passed, message = _check_contains(output, criterion.config)
        case CriterionType.REGEX:
            passed, message = _check_regex(output, criterion.config)
        case CriterionType.LENGTH:
            passed, message = _check_length(output, criterion.config)
        case _:
            passed, message = False, "Unknown criterion type"

    return CriterionResult(criterion=criterion.name, passed=passed, message=message)


def evaluate_output(output: str, criteria: Sequence[Criterion]) -> RubricEvaluation:
    """Evaluate an output against every criterion.

    Args:
        output: The model output to check.
        criteria: Rubric criteria, applied in order.

    Returns:
        RubricEvaluation that passes only when every criterion passes.
    """
    results = [evaluate_criterion(output, criterion) for criterion in criteria]
    return RubricEvaluation(passed=all(r.passed for r in results), results=results)


def _percentage(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def run_rubric(
    test_cases: Sequence[RubricTestCase],
    criteria: Sequence[Criterion],
) -> RubricReport:
    """Evaluate every test case and summarize the run.

    Args:
        test_cases: Outputs with their expected verdicts.
        criteria: Rubric criteria.

    Returns:
        RubricReport with per-case results, pass rate and accuracy.
    """
    results = []
    for case in test_cases:
        evaluation = evaluate_output(case.output, criteria)
        results.append(
            RubricCaseResult(
                test_case=case,
                evaluation=evaluation,
                correct=evaluation.passed == case.expected_pass,
            )
        )

    total = len(results)
    passed = sum(1 for r in results if r.evaluation.passed)
    correct = sum(1 for r in results if r.correct)

    logger.info(
        f"Rubric run complete: {total} cases, {passed} passed, {correct} matched expectations"
    )

    return RubricReport(
        results=results,
        summary=RubricSummary(
            total=total,
            passed=passed,
            pass_rate=_percentage(passed, total),
            accuracy=_percentage(correct, total),
        ),
    )
