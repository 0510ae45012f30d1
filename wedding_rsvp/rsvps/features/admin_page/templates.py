from dataclasses import dataclass
from html import escape

from wedding_rsvp.rsvps.dtos import RSVPDTO
from wedding_rsvp.rsvps.urls import EXPORT_CSV_URL, EXPORT_JSON_URL


@dataclass
class AdminTemplates:
    PAGE_HTML = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Wedding RSVPs</title>
    <style>
      body {{ font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; margin: 24px; }}
      table {{ width: 100%; border-collapse: collapse; }}
      th, td {{ border: 1px solid #ddd; padding: 10px; vertical-align: top; }}
      th {{ background: #f6f6f6; text-align: left; }}
      tr:nth-child(even) {{ background: #fafafa; }}
      a {{ display: inline-block; padding: 8px 12px; border: 1px solid #ddd; border-radius: 10px; text-decoration: none; margin-right: 8px; }}
      code {{ background: #f2f2f2; padding: 2px 6px; border-radius: 6px; }}
    </style>
  </head>
  <body>
    <h1>RSVP Responses</h1>
    <p>
      <a href="{csv_url}">Download CSV</a>
      <a href="{json_url}">Download JSON</a>
    </p>
    <table>
      <thead>
        <tr>
          <th>Submitted</th><th>Code</th><th>Party</th><th>Attendance</th><th>Dietary</th><th>Message</th>
        </tr>
      </thead>
      <tbody>
{rows}
      </tbody>
    </table>
    <p><small>DB: <code>{db_location}</code></small></p>
  </body>
</html>
"""

    ROW_HTML = """        <tr>
          <td>{created_at}</td>
          <td>{code}</td>
          <td>{name}</td>
          <td>{attending}</td>
          <td>{dietary}</td>
          <td>{message}</td>
        </tr>"""

    EMPTY_ROW_HTML = """        <tr><td colspan="6">No RSVPs yet.</td></tr>"""


def esc(value) -> str:
    """HTML-escape a value, treating None as empty. Escapes & < > " and '."""
    return escape("" if value is None else str(value), quote=True)


def render_admin_page(rsvps: list[RSVPDTO], db_location: str) -> str:
    rows = [
        AdminTemplates.ROW_HTML.format(
            created_at=esc(f"{rsvp.created_at:%Y-%m-%d %H:%M:%S}"),
            code=esc(rsvp.code),
            name=esc(rsvp.name),
            attending=esc(rsvp.attending),
            dietary=esc(rsvp.dietary),
            message=esc(rsvp.message),
        )
        for rsvp in rsvps
    ]
    return AdminTemplates.PAGE_HTML.format(
        csv_url=EXPORT_CSV_URL,
        json_url=EXPORT_JSON_URL,
        rows="\n".join(rows) or AdminTemplates.EMPTY_ROW_HTML,
        db_location=esc(db_location),
    )
