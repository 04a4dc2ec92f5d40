"""Restaurant menu: name, cuisine, description and contact/hours block."""
from __future__ import annotations

from ...models import FormValues
from .._html import multiline, text, value_or


def render(data: FormValues, theme_color: str) -> str:
    description = text(data, "description")
    hours = text(data, "hours")
    address = text(data, "address")
    return f"""<div class="card">
          <h2>{value_or(data, "restaurantName", "Restaurant Name")}</h2>
          <p><strong>Cuisine:</strong> {value_or(data, "cuisine", "Cuisine Type")}</p>
          {f"<p>{multiline(description)}</p>" if description else ""}
          <div style="margin-top: 1rem;">
            <h4>Contact Information</h4>
            <p>📍 {multiline(address) if address else "Address"}</p>
            <p>📞 {value_or(data, "phone", "Phone")}</p>
            <p>🕒 {multiline(hours) if hours else "Hours"}</p>
          </div>
        </div>"""
