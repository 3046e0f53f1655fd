"""FastAPI routers and dependencies."""

from app.api.deps import (
    get_component_factory,
    get_example_repository,
    get_scorer,
    get_template_analyzer,
)
from app.api.demos import router as demos_router
from app.api.examples import router as examples_router
from app.api.playground import router as playground_router

__all__ = [
    "get_component_factory",
    "get_example_repository",
    "get_scorer",
    "get_template_analyzer",
    "demos_router",
    "examples_router",
    "playground_router",
]
