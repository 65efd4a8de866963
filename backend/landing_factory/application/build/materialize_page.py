import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from landing_factory.rendering.blocks import render_blocks
from landing_factory.rendering.html import render_html_page, route_to_file
from landing_factory.utils.versioning import select_authoritative_version


@dataclass(frozen=True)
class SiteRenderContext:
    """Per-build values computed once and shared by every page of a site."""
    domain_name: str
    css: str
    slot_urls: Dict[str, str] = field(default_factory=dict)
    language: str = "ru"
    head_extras: str = ""
    body_end_extras: str = ""


def materialize_page(page, *, out_dir: str, context: SiteRenderContext) -> Optional[str]:
    """
    Render one page to ``<out_dir>/<route>/index.html``.

    Returns the sitemap route ("" for the root) or None when the page has
    no version to render. Existing output is overwritten.
    """
    version = select_authoritative_version(page.versions)
    if version is None:
        return None

    seo = version.seo_json if isinstance(version.seo_json, dict) else {}
    title = seo.get("title")
    if title is None:
        title = f"Site {context.domain_name}"

    html = render_html_page(
        title=title,
        description=seo.get("description"),
        lang=context.language,
        css=context.css,
        body=render_blocks(version.blocks, context.slot_urls),
        head_extras=context.head_extras,
        body_end_extras=context.body_end_extras,
    )

    page_dir, filename = route_to_file(page.route)
    target_dir = os.path.join(out_dir, page_dir)
    os.makedirs(target_dir, exist_ok=True)

    with open(os.path.join(target_dir, filename), "w", encoding="utf-8") as fh:
        fh.write(html)

    return "" if page.route == "/" else page.route
