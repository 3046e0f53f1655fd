"""Catalog queries over example listings.

Filtering, grouping and navigation helpers shared by the API and the
playground UI. They operate on an already-loaded, title-sorted listing.
"""

from collections.abc import Sequence

from app.strategies.content.models import (
    CATEGORY_INFO,
    UNKNOWN_CATEGORY_ORDER,
    ExampleMeta,
)

ALL = "all"


def filter_examples(
    examples: Sequence[ExampleMeta],
    category: str | None = None,
    difficulty: str | None = None,
    query: str = "",
) -> list[ExampleMeta]:
    """Filter examples by category, difficulty and a search query.

    Args:
        examples: The listing to filter.
        category: Category to keep. None or "all" keeps every category.
        difficulty: Difficulty to keep. None or "all" keeps every level.
        query: Case-insensitive substring matched against title or description.

    Returns:
        Matching examples in their original order.
    """
    needle = query.lower()

    def matches(example: ExampleMeta) -> bool:
        if category not in (None, ALL) and example.category != category:
            return False
        if difficulty not in (None, ALL) and example.difficulty.value != difficulty:
            return False
        if needle and needle not in example.title.lower() and needle not in example.description.lower():
            return False
        return True

    return [e for e in examples if matches(e)]


def category_order(category: str) -> int:
    """Display order of a category; unknown categories sort last."""
    info = CATEGORY_INFO.get(category)
    return info.order if info else UNKNOWN_CATEGORY_ORDER


def category_label(category: str) -> str:
    """Display label of a category, falling back to the raw name."""
    info = CATEGORY_INFO.get(category)
    return info.label if info else category


def group_by_category(examples: Sequence[ExampleMeta]) -> dict[str, list[ExampleMeta]]:
    """Group examples by category, ordered by category display order."""
    groups: dict[str, list[ExampleMeta]] = {}
    for example in examples:
        groups.setdefault(example.category, []).append(example)

    # sorted() is stable, so equal orders keep first-seen order
    return dict(sorted(groups.items(), key=lambda item: category_order(item[0])))


def related_examples(
    examples: Sequence[ExampleMeta],
    slug: str,
    limit: int = 3,
) -> list[ExampleMeta]:
    """Return other examples sharing the category or difficulty of ``slug``."""
    current = next((e for e in examples if e.slug == slug), None)
    if current is None:
        return []

    related = [
        e
        for e in examples
        if e.slug != slug
        and (e.category == current.category or e.difficulty == current.difficulty)
    ]
    return related[:limit]


def neighbours(
    examples: Sequence[ExampleMeta],
    slug: str,
) -> tuple[ExampleMeta | None, ExampleMeta | None]:
    """Return the previous and next examples around ``slug`` in listing order."""
    index = next((i for i, e in enumerate(examples) if e.slug == slug), None)
    if index is None:
        return None, None

    previous = examples[index - 1] if index > 0 else None
    following = examples[index + 1] if index < len(examples) - 1 else None
    return previous, following
