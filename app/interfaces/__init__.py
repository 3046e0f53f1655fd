"""Abstract base classes for prompt tooling strategies."""

from app.interfaces.content import BaseExampleRepository, ContentLoadError
from app.interfaces.template import BasePromptScorer, QualityCheck

__all__ = [
    "BaseExampleRepository",
    "BasePromptScorer",
    "ContentLoadError",
    "QualityCheck",
]
