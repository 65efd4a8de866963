from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from landing_factory.domain.content import make_block, page_content
from landing_factory.domain.exceptions import NotFoundError, ValidationError
from landing_factory.models.domain import Domain
from landing_factory.models.page import Page
from landing_factory.models.site import Site
from landing_factory.models.template import Template
from landing_factory.utils.transaction import transactional
from landing_factory.utils.versioning import append_version


def starter_blocks(*, theme: str, page_type: str) -> List[Dict[str, Any]]:
    is_home = page_type == "home"
    is_contacts = page_type == "contacts"

    return [
        make_block("hero", {
            "h1": theme,
            "subheading": "Generated starter page.",
            "primaryCta": {"label": "Learn more", "href": "{{slot:HERO_CTA}}"},
            "secondaryCta": {"label": "Contacts", "href": "/contacts"},
        }),
        make_block("faq", {
            "items": [{"q": "What is this?", "a": "A fast static site generated by Landing Factory."}],
        }, enabled=is_home),
        make_block("contacts", {
            "title": "Contacts",
            "company": theme,
            "email": "hello@example.com",
            "phone": "+1 (000) 000-0000",
            "address": "Your address",
            "hours": "Mon-Fri 10:00-18:00",
        }, enabled=is_contacts),
        make_block("footer_links", {
            "items": [{"label": "Primary link", "href": "{{slot:FOOTER}}"}],
        }),
    ]


def create_site(
    *,
    session,
    domain_id: str,
    template_key: str,
    theme: str,
    language: str = "ru",
) -> Site:
    """
    Create a draft site for a domain from a template.

    Every static template route gets a draft page with a starter version;
    dynamic routes (containing ``:slug``) are skipped.

    Edge cases handled:
    - Missing domain / template
    - Domain that already owns a site
    """
    if not theme or not isinstance(theme, str):
        raise ValidationError("theme is required")

    domain = session.get(Domain, domain_id)
    if not domain:
        raise NotFoundError("Domain not found")

    template = session.execute(
        select(Template).where(Template.key == template_key)
    ).scalar_one_or_none()
    if not template:
        raise NotFoundError("Template not found")

    if domain.site is not None:
        raise ValidationError("Site already exists for this domain")

    site = Site()
    site.domain_id = domain.id
    site.template_id = template.id
    site.theme = theme
    site.language = language or "ru"
    site.status = "draft"

    try:
        with transactional(session):
            session.add(site)
            session.flush()  # ensures site.id is available

            for definition in template.routes():
                route = definition.get("route")
                if not isinstance(route, str) or ":slug" in route:
                    continue

                page_type = definition.get("pageType", "page")
                page = Page()
                page.site_id = site.id
                page.route = route
                page.page_type = page_type
                page.status = "draft"
                session.add(page)
                session.flush()

                append_version(
                    session,
                    page,
                    content_json=page_content(
                        route=route,
                        page_type=page_type,
                        lang=site.language,
                        blocks=starter_blocks(theme=theme, page_type=page_type),
                    ),
                    seo_json={"title": theme, "description": theme},
                    publish=False,
                )
    except IntegrityError as exc:
        raise ValidationError("Site already exists for this domain") from exc

    return site
