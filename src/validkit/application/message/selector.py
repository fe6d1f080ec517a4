"""Template selection for failed results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from validkit.domain.exceptions.component import TemplateError
from validkit.domain.model.template import STANDARD_TEMPLATE_ID

if TYPE_CHECKING:
    from validkit.domain.model.result import Result
    from validkit.domain.model.template import Template, Templates


def choose_template(templates: Templates, result: Result) -> Template:
    """Pick the template a failed result should be rendered with.

    The inverted list is used for inverted results, the regular list
    otherwise. Within the list, the template whose id equals the
    result's templateId (default "standard") wins. When no id matches,
    the first template of the list is returned.

    Args:
        templates: Templates declared for the rule type
        result: Failed result

    Returns:
        Selected template

    Raises:
        TemplateError: If the candidate list is empty
    """
    candidates = templates.inverted if result.inverted else templates.regular
    if not candidates:
        kind = "inverted" if result.inverted else "regular"
        raise TemplateError(f"No {kind} templates to choose from")

    template_id = result.template_id
    if template_id is None:
        template_id = STANDARD_TEMPLATE_ID

    for template in candidates:
        if template.id == template_id:
            return template

    return candidates[0]
