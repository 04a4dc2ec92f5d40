"""E-commerce store: logo, description, category chips, currency and contact."""
from __future__ import annotations

from ...models import FormValues
from .._html import chip_section, image, img_block, multiline, text, value_or

CATEGORY_COLOR = "#3b82f6"


def render(data: FormValues, theme_color: str) -> str:
    logo = img_block(
        image(data, "storeLogo"),
        "Store Logo",
        "width: 80px; height: 80px; object-fit: cover; border-radius: 8px;",
    )
    categories = chip_section(data, "productCategories", "Product Categories:", CATEGORY_COLOR)
    shipping = text(data, "shippingInfo")
    return f"""<div class="card">
          {logo}<h2>{value_or(data, "storeName", "Online Store")}</h2>
          <p>{value_or(data, "storeDescription", "Welcome to our store!")}</p>
          {categories}
          <div style="margin-top: 1rem;">
            <p><strong>Currency:</strong> {value_or(data, "currency", "USD")}</p>
            <p>📧 {value_or(data, "contactEmail", "support@store.com")}</p>
            {f'<p style="margin-top: 0.5rem;"><small>{multiline(shipping)}</small></p>' if shipping else ""}
          </div>
        </div>"""
