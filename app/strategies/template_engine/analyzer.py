"""Template analyzer strategy.

Combines placeholder extraction, rendering and quality scoring into the
single result the playground displays on every edit.
"""

import logging
from collections.abc import Mapping

from app.interfaces.template import BasePromptScorer
from app.strategies.template_engine.models import TemplateAnalysis
from app.strategies.template_engine.scorer import PromptScorer
from app.strategies.template_engine.variables import extract_variables, render_template

logger = logging.getLogger(__name__)


class TemplateAnalyzer:
    """Analyzes a prompt template together with its variable bindings.

    The analysis is recomputed from scratch on every call; nothing is
    cached between templates.
    """

    def __init__(self, scorer: BasePromptScorer | None = None) -> None:
        """Initialize the analyzer.

        Args:
            scorer: Scoring strategy. Defaults to PromptScorer with default rules.
        """
        self._scorer = scorer or PromptScorer()

    def analyze(
        self,
        template: str,
        bindings: Mapping[str, str] | None = None,
    ) -> TemplateAnalysis:
        """Extract variables, render the template and score it.

        Args:
            template: The prompt template text.
            bindings: Variable values. Missing names stay as placeholders.

        Returns:
            TemplateAnalysis for the template.
        """
        bindings = bindings or {}
        variables = extract_variables(template)
        unbound = [name for name in variables if name not in bindings]
        if unbound:
            logger.debug(f"Unbound placeholders left in output: {unbound}")

        return TemplateAnalysis(
            variables=variables,
            rendered=render_template(template, bindings),
            score=self._scorer.score(template),
        )


def analyze_template(
    template: str,
    bindings: Mapping[str, str] | None = None,
) -> TemplateAnalysis:
    """Analyze a template with the default scorer."""
    return TemplateAnalyzer().analyze(template, bindings)
