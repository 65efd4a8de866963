# landing_factory/application/build/build_site.py
import os
from typing import Any, Dict, List
from xml.sax.saxutils import escape as xml_escape

from flask import current_app
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from landing_factory.domain.exceptions import NotFoundError
from landing_factory.domain.lifecycle.build import assert_build_transition
from landing_factory.models.build import Build
from landing_factory.models.link import LinkAssignment
from landing_factory.models.page import Page
from landing_factory.models.site import Site
from landing_factory.rendering.html import analytics_extras
from landing_factory.rendering.slots import resolve_slots
from landing_factory.rendering.theme import compile_theme_css
from landing_factory.utils.clock import utcnow
from landing_factory.utils.transaction import transactional
from .materialize_page import SiteRenderContext, materialize_page


def render_robots_txt(domain_name: str) -> str:
    return f"User-agent: *\nAllow: /\nSitemap: https://{domain_name}/sitemap.xml\n"


def render_sitemap_xml(domain_name: str, routes: List[str]) -> str:
    urls = "\n".join(
        f"  <url><loc>{xml_escape(f'https://{domain_name}{route}')}</loc></url>"
        for route in routes
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{urls}\n"
        "</urlset>"
    )


def load_site_for_build(session, site_id):
    """Site with everything a build reads, loaded in one pass."""
    return session.execute(
        select(Site)
        .where(Site.id == site_id)
        .options(
            selectinload(Site.domain),
            selectinload(Site.theme_preset),
            selectinload(Site.component_style_preset),
            selectinload(Site.analytics_profile),
            selectinload(Site.links).selectinload(LinkAssignment.link_library),
            selectinload(Site.pages).selectinload(Page.versions),
        )
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()


def build_render_context(site) -> SiteRenderContext:
    theme_json = site.theme_preset.json if site.theme_preset else None
    preset_json = site.component_style_preset.json if site.component_style_preset else None

    profile = site.analytics_profile
    head_extras, body_end_extras = analytics_extras(
        profile.scripts_for("head") if profile else [],
        profile.scripts_for("body_end") if profile else [],
    )

    return SiteRenderContext(
        domain_name=site.domain.domain_name,
        css=compile_theme_css(theme_json, preset_json),
        slot_urls=resolve_slots(site.links),
        language=site.language or "ru",
        head_extras=head_extras,
        body_end_extras=body_end_extras,
    )


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)


def build_site(
    *,
    session,
    site_id: str,
    build_id: str,
    output_root: str,
) -> Dict[str, Any]:
    """
    Materialize every page of a site and mark the build ``ready``.

    Responsibilities:
    - single consistent read of the site graph
    - CSS and slot table computed once per build
    - robots.txt + sitemap.xml of the rendered routes

    A filesystem error aborts the whole build; files already written stay.
    """
    site = load_site_for_build(session, site_id)
    if not site:
        raise NotFoundError("Site not found")

    build = session.get(Build, build_id)
    if not build or build.site_id != site.id:
        raise NotFoundError("Build not found")

    domain_name = site.domain.domain_name
    out_dir = os.path.join(output_root, domain_name)
    os.makedirs(out_dir, exist_ok=True)

    context = build_render_context(site)
    routes: List[str] = []

    # Listing order: oldest first, route breaks ties
    for page in sorted(site.pages, key=lambda p: (p.created_at, p.route)):
        route = materialize_page(page, out_dir=out_dir, context=context)
        if route is not None:
            routes.append(route)

    robots_path = os.path.join(out_dir, "robots.txt")
    sitemap_path = os.path.join(out_dir, "sitemap.xml")
    _write_text(robots_path, render_robots_txt(domain_name))
    _write_text(sitemap_path, render_sitemap_xml(domain_name, routes))

    with transactional(session):
        assert_build_transition(from_status=build.status, to_status="ready")
        build.status = "ready"
        build.finished_at = utcnow()
        build.sitemap_path = sitemap_path
        build.robots_path = robots_path

    current_app.logger.info(
        "Built site %s (build %s): %d pages -> %s",
        domain_name, build.build_number, len(routes), out_dir,
    )

    return {
        "ok": True,
        "artifactPath": out_dir,
        "outDir": out_dir,
        "pages": len(routes),
    }
