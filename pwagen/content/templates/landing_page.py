"""Landing page: hero image, headline, feature chips, pricing and call to action."""
from __future__ import annotations

from ...models import FormValues
from .._html import chip_section, esc, image, img_block, text, value_or

FEATURE_COLOR = "#f59e0b"
CTA_COLOR = "#ef4444"


def render(data: FormValues, theme_color: str) -> str:
    hero = img_block(
        image(data, "productImage"),
        "Product Image",
        "width: 120px; height: 120px; object-fit: cover; border-radius: 8px; margin: 0 auto;",
        wrapper_style="margin-bottom: 1.5rem;",
    )
    subheadline = text(data, "subheadline")
    features = chip_section(data, "features", "Features:", FEATURE_COLOR, margin="margin: 1rem 0;")
    cta_style = (
        f"background: {CTA_COLOR}; color: white; padding: 12px 24px; border: none; "
        "border-radius: 6px; font-size: 1rem; margin-top: 1rem; cursor: pointer;"
    )
    return f"""<div class="card" style="text-align: center;">
          {hero}<h1 style="font-size: 1.8rem; margin-bottom: 0.5rem;">{value_or(data, "headline", "Amazing Product")}</h1>
          {f'<p style="font-size: 1.1rem; color: #666; margin-bottom: 1rem;">{esc(subheadline)}</p>' if subheadline else ""}
          <h2>{value_or(data, "productName", "Product Name")}</h2>
          {features}
          <div style="margin-top: 1.5rem;">
            <p style="font-size: 1.2rem; font-weight: bold;">{value_or(data, "pricing", "Contact for Pricing")}</p>
            <button style="{cta_style}">{value_or(data, "ctaText", "Get Started")}</button>
          </div>
          <p style="margin-top: 1rem;">📧 {value_or(data, "contactEmail", "contact@product.com")}</p>
        </div>"""
