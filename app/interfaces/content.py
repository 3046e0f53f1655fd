"""Content repository interfaces.

Defines the abstract base class for example catalogs.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.strategies.content.models import Example, ExampleMeta


class BaseExampleRepository(ABC):
    """Abstract base class for example content sources.

    Example:
        ```python
        class MarkdownExampleRepository(BaseExampleRepository):
            def list_examples(self) -> list[ExampleMeta]:
                # Implementation here
                pass
        ```
    """

    @abstractmethod
    def list_examples(self) -> list["ExampleMeta"]:
        """Return summaries of every example, in catalog order.

        Returns:
            List of ExampleMeta objects. Empty when there is no content.
        """
        ...

    @abstractmethod
    def get_example(self, slug: str) -> "Example | None":
        """Load one example by slug.

        Args:
            slug: The example identifier.

        Returns:
            The Example, or None if no such example exists.

        Raises:
            ContentLoadError: If the example exists but cannot be read.
        """
        ...


class ContentLoadError(Exception):
    """Exception raised when a content file exists but cannot be loaded."""

    pass
