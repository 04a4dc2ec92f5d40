"""Blog/news site: author photo, title, author block and category chips."""
from __future__ import annotations

from ...models import FormValues
from .._html import chip_section, esc, image, img_block, multiline, text, value_or

CATEGORY_COLOR = "#10b981"


def render(data: FormValues, theme_color: str) -> str:
    photo = img_block(
        image(data, "authorPhoto"),
        "Author Photo",
        "width: 64px; height: 64px; border-radius: 50%; object-fit: cover;",
    )
    subtitle = text(data, "blogSubtitle")
    social = text(data, "socialMedia")
    categories = chip_section(data, "blogCategories", "Categories:", CATEGORY_COLOR)
    return f"""<div class="card">
          {photo}<h2>{value_or(data, "blogTitle", "My Blog")}</h2>
          {f'<p style="font-style: italic; color: #666;">{esc(subtitle)}</p>' if subtitle else ""}
          <div style="margin-top: 1rem;">
            <p><strong>Author:</strong> {value_or(data, "authorName", "Blog Author")}</p>
            <p>{value_or(data, "authorBio", "Welcome to my blog!")}</p>
          </div>
          {categories}
          {f'<p style="margin-top: 1rem;"><small>{multiline(social)}</small></p>' if social else ""}
        </div>"""
