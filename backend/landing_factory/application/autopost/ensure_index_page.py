from sqlalchemy import select

from landing_factory.domain.content import make_block, page_content
from landing_factory.models.page import Page
from landing_factory.utils.versioning import append_version


def ensure_index_page(session, *, site_id, route, page_type, title, lang="ru"):
    """
    Get or create the listing page at ``route`` for a site.

    Idempotent per (site, route). A newly created page gets a placeholder
    first version. Flushes but does not commit.
    """
    page = session.execute(
        select(Page).where(Page.site_id == site_id, Page.route == route)
    ).scalar_one_or_none()

    if page:
        return page

    page = Page()
    page.site_id = site_id
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
            lang=lang,
            blocks=[
                make_block("hero", {
                    "h1": title,
                    "subheading": "",
                    "primaryCta": {"label": "Home", "href": "/"},
                }),
                make_block("content", {"html": '<p class="small">No posts yet.</p>'}),
            ],
        ),
        seo_json={"title": title, "description": title},
        publish=False,
    )
    return page
