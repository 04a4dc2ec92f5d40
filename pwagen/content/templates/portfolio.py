"""Portfolio: profile image, name/title/bio and skill chips in the theme colour."""
from __future__ import annotations

from ...models import FormValues
from .._html import chip_section, esc, image, img_block, value_or


def render(data: FormValues, theme_color: str) -> str:
    photo = img_block(
        image(data, "profileImage"),
        "Profile Image",
        "width: 80px; height: 80px; border-radius: 50%; object-fit: cover; "
        f"border: 2px solid {esc(theme_color)};",
    )
    skills = chip_section(data, "skills", "Skills:", theme_color)
    return f"""<div class="card">
          {photo}<h2>{value_or(data, "name", "Your Name")}</h2>
          <h3>{value_or(data, "title", "Professional Title")}</h3>
          <p>{value_or(data, "bio", "Bio will appear here...")}</p>
          {skills}
        </div>"""
