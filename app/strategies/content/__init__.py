"""Example content catalog strategies."""

from app.strategies.content.catalog import (
    filter_examples,
    group_by_category,
    neighbours,
    related_examples,
)
from app.strategies.content.markdown_loader import MarkdownExampleRepository
from app.strategies.content.models import Difficulty, Example, ExampleMeta

__all__ = [
    "Difficulty",
    "Example",
    "ExampleMeta",
    "MarkdownExampleRepository",
    "filter_examples",
    "group_by_category",
    "neighbours",
    "related_examples",
]
