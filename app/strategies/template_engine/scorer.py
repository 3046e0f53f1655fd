"""Heuristic prompt quality scorer.

Scores a prompt template against a fixed table of regex checks for common
prompt-engineering practices: role separation, delimiters, output format,
explicit constraints, placeholders and overall length.
"""

import logging
import re

from app.interfaces.template import BasePromptScorer, QualityCheck
from app.strategies.template_engine.models import ScoreResult

logger = logging.getLogger(__name__)

MAX_SCORE = 100

DEFAULT_CHECKS: tuple[QualityCheck, ...] = (
    QualityCheck(
        name="role_separation",
        pattern=r"system:|role:",
        weight=10,
        strength="Uses role/system separation",
        improvement="Consider adding explicit role/system instructions",
    ),
    QualityCheck(
        name="delimiters",
        pattern=r"---|###|===|<.*>|```",
        weight=10,
        strength="Uses delimiters to mark sections",
        improvement="Add delimiters to separate instructions from data",
        ignore_case=False,
    ),
    QualityCheck(
        name="output_format",
        pattern=r"format:|output:|respond with|json|structure",
        weight=10,
        strength="Specifies output format",
        improvement="Explicitly specify desired output format",
    ),
    QualityCheck(
        name="constraints",
        pattern=r"never|don't|only|must|always|rules:|important:",
        weight=10,
        strength="Includes explicit constraints or rules",
        improvement="Add explicit rules and constraints",
    ),
    # Looser than the extractor's pattern: any brace pair on one line counts
    QualityCheck(
        name="placeholders",
        pattern=r"\{.*?\}",
        weight=5,
        strength="Uses variable placeholders",
        ignore_case=False,
    ),
)


class PromptScorer(BasePromptScorer):
    """Scores prompt templates with additive regex checks.

    Every check that matches adds its weight and a strength message. A
    failed check adds its improvement message, if it has one, and never
    subtracts. A length rule runs last. The total is capped at 100.
    """

    def __init__(
        self,
        base_score: int = 50,
        detail_length: int = 100,
        brief_length: int = 30,
        length_weight: int = 5,
        checks: tuple[QualityCheck, ...] = DEFAULT_CHECKS,
    ) -> None:
        """Initialize the scorer.

        Args:
            base_score: Score before any check is applied.
            detail_length: Templates longer than this earn the length bonus.
            brief_length: Templates shorter than this get a brevity suggestion.
            length_weight: Points for the length bonus.
            checks: Ordered checks to apply.
        """
        self._base_score = base_score
        self._detail_length = detail_length
        self._brief_length = brief_length
        self._length_weight = length_weight
        self._checks = checks
        self._compiled = [
            re.compile(check.pattern, re.ASCII | (re.IGNORECASE if check.ignore_case else 0))
            for check in checks
        ]

        logger.debug(
            f"PromptScorer initialized: base_score={base_score}, "
            f"checks_registered={len(checks)}"
        )

    def score(self, template: str) -> ScoreResult:
        """Score a prompt template.

        Args:
            template: The prompt template text.

        Returns:
            ScoreResult with the capped score, strengths and improvements
            in check order.
        """
        strengths: list[str] = []
        improvements: list[str] = []
        score = self._base_score

        for check, regex in zip(self._checks, self._compiled):
            if regex.search(template):
                strengths.append(check.strength)
                score += check.weight
            elif check.improvement is not None:
                improvements.append(check.improvement)

        if len(template) > self._detail_length:
            strengths.append("Detailed instructions")
            score += self._length_weight
        elif len(template) < self._brief_length:
            improvements.append("Prompt may be too brief - add more context")

        return ScoreResult(
            score=min(MAX_SCORE, score),
            strengths=strengths,
            improvements=improvements,
        )

    @property
    def checks(self) -> tuple[QualityCheck, ...]:
        """Return the checks this scorer applies, in order."""
        return self._checks


_default_scorer = PromptScorer()


def score_prompt(template: str) -> ScoreResult:
    """Score a template with the default rule set."""
    return _default_scorer.score(template)
