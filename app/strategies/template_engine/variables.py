"""Placeholder extraction and substitution for prompt templates.

Placeholders use single braces: ``{user_input}``. A placeholder name is a
run of ASCII word characters, so ``{}`` and ``{first name}`` are left alone.
"""

import logging
import re
from collections.abc import Mapping

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}", re.ASCII)


def extract_variables(template: str) -> list[str]:
    """Return the unique placeholder names in a template, in first-seen order.

    Args:
        template: Prompt template text.

    Returns:
        List of variable names. Empty when the template has no placeholders.
    """
    # dict preserves insertion order, so it doubles as an ordered set
    names = dict.fromkeys(PLACEHOLDER_PATTERN.findall(template))
    return list(names)


def render_template(template: str, bindings: Mapping[str, str]) -> str:
    """Substitute bound values into a template.

    Each binding is applied as one pass over the whole text, in the
    mapping's iteration order. Values are inserted verbatim and are not
    rescanned, but a later binding's pass still sees placeholders that an
    earlier value introduced. Unbound placeholders stay in the output.

    Args:
        template: Prompt template text.
        bindings: Variable name to value mapping.

    Returns:
        The rendered prompt.
    """
    rendered = template
    for name, value in bindings.items():
        rendered = rendered.replace(f"{{{name}}}", str(value))

    logger.debug(f"Rendered template with {len(bindings)} bindings")
    return rendered
