"""Markdown example repository.

Loads example records from ``<slug>.md`` files. Each file starts with a
YAML front matter block between ``---`` lines followed by a markdown body.
"""

import logging
import re
from pathlib import Path
from typing import Any

import markdown
import yaml

from app.interfaces.content import BaseExampleRepository, ContentLoadError
from app.strategies.content.models import Difficulty, Example, ExampleMeta

logger = logging.getLogger(__name__)

# Slugs become file names: alphanumeric, underscore, hyphen only
_SLUG_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")

_FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*(?:\r?\n|\Z)(?P<body>.*)\Z",
    re.DOTALL | re.MULTILINE,
)

_ICON_REPLACEMENTS = {
    "✅": '<i class="fa-solid fa-check text-green-600 dark:text-green-400"></i>',
    "❌": '<i class="fa-solid fa-xmark text-red-600 dark:text-red-400"></i>',
}


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a content file into front matter data and markdown body.

    Args:
        text: Raw file contents.

    Returns:
        Tuple of (front matter dict, body). Files without front matter
        return an empty dict and the whole text.

    Raises:
        yaml.YAMLError: If the front matter is not valid YAML.
        ValueError: If the front matter is not a mapping.
    """
    match = _FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text

    data = yaml.safe_load(match.group("yaml")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Front matter must be a mapping, got {type(data).__name__}")
    return data, match.group("body")


def replace_pros_cons_icons(html: str) -> str:
    """Swap check and cross emoji for icon tags."""
    for emoji, icon in _ICON_REPLACEMENTS.items():
        html = html.replace(emoji, icon)
    return html


class MarkdownExampleRepository(BaseExampleRepository):
    """Example repository backed by a directory of markdown files."""

    def __init__(
        self,
        content_dir: Path | str,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the repository.

        Args:
            content_dir: Directory containing ``*.md`` example files.
            encoding: The character encoding to use when reading files.
        """
        self._content_dir = Path(content_dir)
        self._encoding = encoding

        logger.info(f"MarkdownExampleRepository initialized: content_dir={self._content_dir}")

    @property
    def content_dir(self) -> Path:
        """Directory the examples are read from."""
        return self._content_dir

    def list_examples(self) -> list[ExampleMeta]:
        """Return summaries of every example, sorted by title.

        Returns:
            List of ExampleMeta. Empty if the content directory is missing.

        Raises:
            ContentLoadError: If any example file cannot be read.
        """
        if not self._content_dir.is_dir():
            logger.warning(f"Content directory not found: {self._content_dir}")
            return []

        examples = []
        for path in sorted(self._content_dir.glob("*.md")):
            data, _ = self._read(path)
            examples.append(self._meta(path.stem, data))

        examples.sort(key=lambda e: e.title.casefold())
        logger.debug(f"Listed {len(examples)} examples from {self._content_dir}")
        return examples

    def get_example(self, slug: str) -> Example | None:
        """Load one example and render its body to HTML.

        Args:
            slug: The example identifier (file stem).

        Returns:
            The Example, or None if the slug is invalid or has no file.

        Raises:
            ContentLoadError: If the file exists but cannot be parsed.
        """
        if not _SLUG_PATTERN.match(slug):
            logger.warning(f"Rejected example slug: {slug!r}")
            return None

        path = self._content_dir / f"{slug}.md"
        if not path.is_file():
            logger.info(f"Example not found: {slug}")
            return None

        data, body = self._read(path)
        meta = self._meta(slug, data)

        html = markdown.markdown(body, extensions=["tables", "fenced_code"])
        html = replace_pros_cons_icons(html)

        try:
            return Example(
                **meta.model_dump(),
                content=html,
                template=data.get("template"),
                pitfalls=data.get("pitfalls") or [],
                checklist=data.get("checklist") or [],
            )
        except ValueError as e:
            logger.error(f"Invalid example fields in {path}: {e}")
            raise ContentLoadError(f"Invalid example fields in {path.name}: {e}") from e

    def _read(self, path: Path) -> tuple[dict[str, Any], str]:
        """Read and split one content file."""
        try:
            text = path.read_text(encoding=self._encoding)
            return split_front_matter(text)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise ContentLoadError(f"Failed to read {path.name}: {e}") from e
        except (yaml.YAMLError, ValueError) as e:
            logger.error(f"Invalid front matter in {path}: {e}")
            raise ContentLoadError(f"Invalid front matter in {path.name}: {e}") from e

    @staticmethod
    def _meta(slug: str, data: dict[str, Any]) -> ExampleMeta:
        """Build an ExampleMeta from front matter, applying defaults."""
        difficulty = data.get("difficulty") or Difficulty.BEGINNER.value
        if difficulty not in {d.value for d in Difficulty}:
            logger.warning(f"Unknown difficulty {difficulty!r} for {slug}, using beginner")
            difficulty = Difficulty.BEGINNER.value

        return ExampleMeta(
            slug=slug,
            title=str(data.get("title") or slug),
            description=str(data.get("description") or ""),
            category=str(data.get("category") or "general"),
            difficulty=Difficulty(difficulty),
        )
