"""Event landing page: name, date/time/venue, description, speakers, price."""
from __future__ import annotations

from ...models import FormValues
from .._html import esc, multiline, text, value_or


def render(data: FormValues, theme_color: str) -> str:
    description = text(data, "description")
    speakers = text(data, "speakers")
    price = text(data, "ticketPrice")

    speakers_block = ""
    if speakers:
        speakers_block = f"""
          <div style="margin-top: 1rem;">
            <h4>Featured Speakers</h4>
            <p>{multiline(speakers)}</p>
          </div>
          """
    return f"""<div class="card">
          <h2>{value_or(data, "eventName", "Event Name")}</h2>
          <p><strong>Date:</strong> {value_or(data, "eventDate", "Event Date")}</p>
          <p><strong>Time:</strong> {value_or(data, "eventTime", "Event Time")}</p>
          <p><strong>Venue:</strong> {value_or(data, "venue", "Venue")}</p>
          {f'<p style="margin-top: 1rem;">{multiline(description)}</p>' if description else ""}
          {speakers_block}
          {f'<p style="margin-top: 1rem;"><strong>Price:</strong> {esc(price)}</p>' if price else ""}
        </div>"""
