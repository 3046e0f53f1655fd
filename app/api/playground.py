"""Template playground API routes.

Exposes placeholder extraction, rendering and heuristic scoring. Every
route is a pure computation over the request body; nothing is stored.
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_scorer, get_template_analyzer
from app.api.schemas import (
    RenderRequest,
    RenderResponse,
    TemplateRequest,
    VariablesResponse,
)
from app.interfaces.template import BasePromptScorer
from app.strategies.template_engine import (
    ScoreResult,
    TemplateAnalysis,
    TemplateAnalyzer,
    extract_variables,
    render_template,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/playground", tags=["playground"])


@router.post(
    "/variables",
    response_model=VariablesResponse,
    status_code=status.HTTP_200_OK,
)
async def list_variables(request: TemplateRequest) -> VariablesResponse:
    """Return the unique placeholder names in a template, in first-seen order."""
    return VariablesResponse(variables=extract_variables(request.template))


@router.post(
    "/render",
    response_model=RenderResponse,
    status_code=status.HTTP_200_OK,
)
async def render(request: RenderRequest) -> RenderResponse:
    """Substitute bindings into a template. Unbound placeholders are kept."""
    return RenderResponse(rendered=render_template(request.template, request.bindings))


@router.post(
    "/score",
    response_model=ScoreResult,
    status_code=status.HTTP_200_OK,
)
async def score(
    request: TemplateRequest,
    scorer: BasePromptScorer = Depends(get_scorer),
) -> ScoreResult:
    """Score a template against the prompt-quality heuristics."""
    result = scorer.score(request.template)
    logger.debug(f"Scored template ({len(request.template)} chars): {result.score}")
    return result


@router.post(
    "/analyze",
    response_model=TemplateAnalysis,
    status_code=status.HTTP_200_OK,
)
async def analyze(
    request: RenderRequest,
    analyzer: TemplateAnalyzer = Depends(get_template_analyzer),
) -> TemplateAnalysis:
    """Extract variables, render and score a template in one call.

    This is the request the playground sends on every edit.
    """
    return analyzer.analyze(request.template, request.bindings)
