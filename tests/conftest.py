"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.strategies.content import MarkdownExampleRepository

SAMPLE_EXAMPLES = {
    "role-prompting": """---
title: Role Prompting
description: Give the model a clear role.
category: fundamentals
difficulty: beginner
template: |
  SYSTEM:
  You are a tutor for {subject}.
pitfalls:
  - Vague roles
checklist:
  - Role stated first
---

## Why it works

✅ Focused answers

❌ Generic answers without a role
""",
    "structured-output": """---
title: Structured Output
description: Ask for JSON with an explicit schema.
category: techniques
difficulty: intermediate
---

Respond with JSON.
""",
    "injection-defense": """---
title: Injection Defense
description: Layer defenses around untrusted input.
category: production
difficulty: advanced
---

Use delimiters.
""",
    "advanced-chains": """---
title: Advanced Chains
description: Chain prompts together.
category: fundamentals
difficulty: advanced
---

Chain them.
""",
}


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Directory populated with sample example files."""
    for slug, text in SAMPLE_EXAMPLES.items():
        (tmp_path / f"{slug}.md").write_text(text, encoding="utf-8")
    return tmp_path


@pytest.fixture
def repository(content_dir: Path) -> MarkdownExampleRepository:
    """Markdown repository over the sample content."""
    return MarkdownExampleRepository(content_dir)


@pytest.fixture
def client(repository: MarkdownExampleRepository):
    """FastAPI test client with the example repository pointed at sample content."""
    from app.api.deps import get_example_repository
    from app.main import app

    app.dependency_overrides[get_example_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.pop(get_example_repository, None)
