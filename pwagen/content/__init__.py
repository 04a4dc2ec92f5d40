"""
Content Renderer — maps (template id, form values) to a markup fragment.

Usage:
    fragment = render_content("portfolio", {"name": "Ada"}, "#2563eb")

Rules are pure and total: every optional field degrades to a literal
placeholder, and unknown template ids get the generic fallback fragment.
"""
from __future__ import annotations

import logging
from typing import Callable

from ..models import FormValues
from .templates import (
    blog,
    business_card,
    e_commerce,
    event_landing,
    landing_page,
    nonprofit,
    portfolio,
    restaurant_menu,
)

logger = logging.getLogger("pwagen.content")

RenderRule = Callable[[FormValues, str], str]

# template id -> rendering rule
RULES: dict[str, RenderRule] = {
    "business-card": business_card.render,
    "portfolio": portfolio.render,
    "restaurant-menu": restaurant_menu.render,
    "event-landing": event_landing.render,
    "e-commerce": e_commerce.render,
    "blog": blog.render,
    "landing-page": landing_page.render,
    "nonprofit": nonprofit.render,
}

FALLBACK_FRAGMENT = """<div class="card">
          <h2>Welcome to your PWA!</h2>
          <p>This is a basic PWA template.</p>
        </div>"""


def render_content(template_id: str, form_values: FormValues, theme_color: str) -> str:
    rule = RULES.get(template_id)
    if rule is None:
        logger.warning("No rendering rule for template '%s'; using fallback", template_id)
        return FALLBACK_FRAGMENT
    return rule(form_values or {}, theme_color)
