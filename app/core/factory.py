"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from app.core.config import Settings, get_settings
from app.interfaces.content import BaseExampleRepository
from app.interfaces.template import BasePromptScorer
from app.strategies.content import MarkdownExampleRepository
from app.strategies.template_engine import PromptScorer, TemplateAnalyzer

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        scorer = factory.get_scorer()
        repository = factory.get_example_repository()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._scorer_cache: BasePromptScorer | None = None
        self._template_analyzer_cache: TemplateAnalyzer | None = None
        self._repository_cache: BaseExampleRepository | None = None

    def get_scorer(self) -> BasePromptScorer:
        """Get the prompt scorer configured from settings.

        Returns:
            A BasePromptScorer implementation instance.
        """
        if self._scorer_cache is None:
            logger.info(
                f"Instantiating prompt scorer: base_score={self._settings.score_base}"
            )
            self._scorer_cache = PromptScorer(
                base_score=self._settings.score_base,
                detail_length=self._settings.detail_length_threshold,
                brief_length=self._settings.brief_length_threshold,
            )

        return self._scorer_cache

    def get_template_analyzer(self) -> TemplateAnalyzer:
        """Get a template analyzer that uses the configured scorer.

        Returns:
            A TemplateAnalyzer instance.
        """
        if self._template_analyzer_cache is None:
            logger.info("Instantiating template analyzer")
            self._template_analyzer_cache = TemplateAnalyzer(scorer=self.get_scorer())

        return self._template_analyzer_cache

    def get_example_repository(
        self, content_backend: str | None = None
    ) -> BaseExampleRepository:
        """Get an example repository based on the specified backend.

        Args:
            content_backend: The backend to instantiate. If None, uses settings.

        Returns:
            A BaseExampleRepository implementation instance.

        Raises:
            ValueError: If the backend is unknown.
        """
        if self._repository_cache is None or content_backend is not None:
            content_backend = content_backend or self._settings.content_backend

            logger.info(f"Instantiating example repository: {content_backend}")

            match content_backend:
                case "markdown":
                    self._repository_cache = MarkdownExampleRepository(
                        content_dir=self._settings.content_dir,
                        encoding=self._settings.content_encoding,
                    )
                case _:
                    raise ValueError(
                        f"Unknown content backend: {content_backend}. "
                        f"Valid options: 'markdown'"
                    )

        return self._repository_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._scorer_cache = None
        self._template_analyzer_cache = None
        self._repository_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
