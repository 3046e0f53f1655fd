"""Prompt template interfaces.

Defines abstract base classes for prompt quality scoring.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.strategies.template_engine.models import ScoreResult


@dataclass(frozen=True)
class QualityCheck:
    """A single heuristic check applied to a prompt template.

    Attributes:
        name: Short identifier for the check.
        pattern: Regex source searched for in the template.
        weight: Points added to the score when the pattern matches.
        strength: Message recorded when the pattern matches.
        improvement: Message recorded when it does not. None means the
            check is neutral when absent.
        ignore_case: Whether the pattern is matched case-insensitively.
    """

    name: str
    pattern: str
    weight: int
    strength: str
    improvement: str | None = None
    ignore_case: bool = True


class BasePromptScorer(ABC):
    """Abstract base class for prompt scoring strategies.

    Scores a prompt template and explains the score with strengths
    and improvement suggestions.
    """

    @abstractmethod
    def score(self, template: str) -> "ScoreResult":
        """Score a prompt template.

        Args:
            template: The prompt template text.

        Returns:
            ScoreResult with the bounded score and feedback lists.
        """

    @property
    @abstractmethod
    def checks(self) -> tuple[QualityCheck, ...]:
        """Return the checks this scorer applies, in order."""
