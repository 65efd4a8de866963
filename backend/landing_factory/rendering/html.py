"""HTML escaping and the fixed document shell wrapped around rendered blocks."""
import html
from typing import Optional, Tuple


def escape_html(text) -> str:
    """Escape ``& < > " '`` for embedding in element text or attribute values."""
    if text is None:
        return ""
    return html.escape(str(text), quote=True).replace("&#x27;", "&#39;")


def route_to_file(route: str) -> Tuple[str, str]:
    """
    Map a page route to ``(directory, filename)`` relative to the site root.

    ``/`` -> ``("", "index.html")``, ``/contacts/`` -> ``("contacts", "index.html")``
    """
    if route == "/":
        return "", "index.html"
    return route.strip("/"), "index.html"


def render_html_page(
    *,
    title: str,
    body: str,
    css: str,
    lang: str = "ru",
    description: Optional[str] = None,
    head_extras: str = "",
    body_end_extras: str = "",
) -> str:
    meta_description = (
        f'<meta name="description" content="{escape_html(description)}" />'
        if description
        else ""
    )
    return f"""<!doctype html>
<html lang="{escape_html(lang)}">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{escape_html(title)}</title>
  {meta_description}
  {head_extras}
  <style>{css}</style>
</head>
<body>
{body}
{body_end_extras}
</body>
</html>"""


def analytics_extras(head_scripts, body_end_scripts) -> Tuple[str, str]:
    """
    Raw analytics snippets for the head and the end of the body.

    Snippets are trusted markup from the analytics profile and are not escaped.
    """
    head = "\n".join(head_scripts or [])
    body_end = "\n".join(body_end_scripts or [])
    return (
        f"\n<!-- analytics:head -->\n{head}\n" if head else "",
        f"\n<!-- analytics:body_end -->\n{body_end}\n" if body_end else "",
    )
