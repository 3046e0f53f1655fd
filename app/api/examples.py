"""Example catalog API routes.

Lists example summaries with filtering and serves single examples with
their rendered body and navigation links.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_example_repository
from app.api.schemas import ExampleDetailResponse, ExampleListResponse
from app.interfaces.content import BaseExampleRepository
from app.strategies.content import filter_examples, neighbours, related_examples
from app.strategies.content.catalog import category_label

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/examples", tags=["examples"])


@router.get(
    "",
    response_model=ExampleListResponse,
    status_code=status.HTTP_200_OK,
)
async def list_examples(
    category: str | None = Query(default=None, description="Category filter, or 'all'"),
    difficulty: str | None = Query(default=None, description="Difficulty filter, or 'all'"),
    q: str = Query(default="", description="Search in title and description"),
    repository: BaseExampleRepository = Depends(get_example_repository),
) -> ExampleListResponse:
    """List example summaries sorted by title.

    Args:
        category: Optional category filter.
        difficulty: Optional difficulty filter.
        q: Optional search query.
        repository: The example repository.

    Returns:
        ExampleListResponse with the filtered examples and the facets of
        the full catalog.
    """
    examples = repository.list_examples()
    filtered = filter_examples(examples, category=category, difficulty=difficulty, query=q)

    logger.info(
        f"Listed examples: {len(filtered)}/{len(examples)} "
        f"(category={category}, difficulty={difficulty}, q={q!r})"
    )

    return ExampleListResponse(
        examples=filtered,
        total=len(filtered),
        categories=list(dict.fromkeys(e.category for e in examples)),
        difficulties=list(dict.fromkeys(e.difficulty.value for e in examples)),
    )


@router.get(
    "/{slug}",
    response_model=ExampleDetailResponse,
    status_code=status.HTTP_200_OK,
)
async def get_example(
    slug: str,
    repository: BaseExampleRepository = Depends(get_example_repository),
) -> ExampleDetailResponse:
    """Get one example with related examples and previous/next links.

    Args:
        slug: The example identifier.
        repository: The example repository.

    Returns:
        ExampleDetailResponse for the example.

    Raises:
        HTTPException: 404 if the example does not exist.
    """
    example = repository.get_example(slug)
    if example is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Example not found: {slug}",
        )

    listing = repository.list_examples()
    previous, following = neighbours(listing, slug)

    return ExampleDetailResponse(
        example=example,
        category_label=category_label(example.category),
        related=related_examples(listing, slug),
        previous=previous,
        next=following,
    )
