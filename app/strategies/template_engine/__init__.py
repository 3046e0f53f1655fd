"""Template engine strategies.

Implements placeholder extraction, rendering and heuristic scoring for
prompt templates.
"""

from app.strategies.template_engine.analyzer import TemplateAnalyzer, analyze_template
from app.strategies.template_engine.models import ScoreResult, TemplateAnalysis
from app.strategies.template_engine.scorer import PromptScorer, score_prompt
from app.strategies.template_engine.variables import extract_variables, render_template

__all__ = [
    "PromptScorer",
    "ScoreResult",
    "TemplateAnalysis",
    "TemplateAnalyzer",
    "analyze_template",
    "extract_variables",
    "render_template",
    "score_prompt",
]
