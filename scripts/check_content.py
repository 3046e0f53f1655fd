"""Content check script.

Loads every example in the catalog, renders it, and scores its prompt
template. Exits non-zero if any example fails to load.

Usage:
    python -m scripts.check_content
    or
    python scripts/check_content.py (after pip install -e .)
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.factory import get_factory
from app.core.logging_config import get_logger, setup_logging
from app.interfaces.content import ContentLoadError

logger = get_logger(__name__)


def main() -> int:
    """Check the catalog and print one line per example."""
    setup_logging()
    factory = get_factory()
    repository = factory.get_example_repository()
    scorer = factory.get_scorer()

    try:
        examples = repository.list_examples()
    except ContentLoadError as e:
        logger.error(f"Catalog listing failed: {e}")
        return 1

    failures = 0
    for meta in examples:
        try:
            example = repository.get_example(meta.slug)
        except ContentLoadError as e:
            logger.error(f"{meta.slug}: {e}")
            failures += 1
            continue

        if example is None or example.template is None:
            print(f"{meta.slug:<32} {'-':>5}  (no template)")
            continue

        result = scorer.score(example.template)
        print(f"{meta.slug:<32} {result.score:>5}  {result.rating}")

    print(f"Checked {len(examples)} examples, {failures} failed to load")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
