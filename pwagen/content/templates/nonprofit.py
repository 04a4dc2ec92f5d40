"""Non-profit: logo, mission, focus-area chips, impact, goal and contact."""
from __future__ import annotations

from ...models import FormValues
from .._html import chip_section, esc, image, img_block, multiline, text, value_or

CAUSE_COLOR = "#8b5cf6"


def render(data: FormValues, theme_color: str) -> str:
    logo = img_block(
        image(data, "organizationLogo"),
        "Organization Logo",
        "width: 80px; height: 80px; object-fit: cover; border-radius: 8px;",
    )
    causes = chip_section(data, "causes", "Focus Areas:", CAUSE_COLOR)
    impact = text(data, "impactNumbers")
    goal = text(data, "donationGoal")
    contact = text(data, "contactInfo")

    impact_block = ""
    if impact:
        impact_block = f"""
          <div style="margin-top: 1rem;">
            <h4>Our Impact:</h4>
            <p>{multiline(impact)}</p>
          </div>
          """
    return f"""<div class="card">
          {logo}<h2>{value_or(data, "organizationName", "Non-Profit Organization")}</h2>
          <p><strong>Mission:</strong> {value_or(data, "mission", "Our mission statement...")}</p>
          {causes}
          {impact_block}
          {f'<p style="margin-top: 1rem;"><strong>Current Goal:</strong> {esc(goal)}</p>' if goal else ""}
          <div style="margin-top: 1rem;">
            <h4>Contact Us:</h4>
            <p>{multiline(contact) if contact else "Contact information..."}</p>
          </div>
        </div>"""
