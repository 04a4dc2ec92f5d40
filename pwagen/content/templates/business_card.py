"""Business card: logo, business name, owner and contact lines."""
from __future__ import annotations

from ...models import FormValues
from .._html import image, img_block, multiline, text, value_or, esc


def render(data: FormValues, theme_color: str) -> str:
    logo = img_block(
        image(data, "logo"),
        "Business Logo",
        "width: 64px; height: 64px; border-radius: 50%; object-fit: cover; "
        "border: 2px solid #e5e7eb;",
    )
    tagline = text(data, "tagline")
    website = text(data, "website")
    address = text(data, "address")
    return f"""<div class="card">
          {logo}<h2>{value_or(data, "businessName", "Business Name")}</h2>
          {f"<p>{esc(tagline)}</p>" if tagline else ""}
          <div style="margin-top: 1rem;">
            <p><strong>{value_or(data, "ownerName", "Owner Name")}</strong></p>
            <p>📧 {value_or(data, "email", "email@example.com")}</p>
            <p>📞 {value_or(data, "phone", "Phone Number")}</p>
            {f"<p>🌐 {esc(website)}</p>" if website else ""}
            {f"<p>📍 {multiline(address)}</p>" if address else ""}
          </div>
        </div>"""
