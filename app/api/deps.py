"""FastAPI dependencies for dependency injection.

Provides reusable dependencies for routes including:
- The component factory
- The prompt scorer and template analyzer
- The example repository
"""

import logging

from fastapi import Depends, HTTPException, status

from app.core.factory import ComponentFactory, get_factory
from app.interfaces.content import BaseExampleRepository
from app.interfaces.template import BasePromptScorer
from app.strategies.template_engine import TemplateAnalyzer

logger = logging.getLogger(__name__)


def get_component_factory() -> ComponentFactory:
    """Dependency returning the global component factory."""
    return get_factory()


def get_scorer(
    factory: ComponentFactory = Depends(get_component_factory),
) -> BasePromptScorer:
    """Dependency for the configured prompt scorer."""
    return factory.get_scorer()


def get_template_analyzer(
    factory: ComponentFactory = Depends(get_component_factory),
) -> TemplateAnalyzer:
    """Dependency for the configured template analyzer."""
    return factory.get_template_analyzer()


def get_example_repository(
    factory: ComponentFactory = Depends(get_component_factory),
) -> BaseExampleRepository:
    """Dependency for the configured example repository.

    Args:
        factory: The component factory.

    Returns:
        The example repository.

    Raises:
        HTTPException: If the repository cannot be created from settings.
    """
    try:
        return factory.get_example_repository()
    except ValueError as e:
        logger.error(f"Example repository misconfigured: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Example repository is not configured",
        ) from e
