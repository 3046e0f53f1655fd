"""Concrete strategy implementations."""

from app.strategies.content import (
    MarkdownExampleRepository,
)
from app.strategies.template_engine import (
    PromptScorer,
    TemplateAnalyzer,
)

__all__ = [
    "MarkdownExampleRepository",
    "PromptScorer",
    "TemplateAnalyzer",
]
