# landing_factory/application/autopost/run_schedule.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.relativedelta import relativedelta
from flask import current_app
from sqlalchemy import select

from landing_factory.application.publish.publish_site import publish_site
from landing_factory.domain.cadence import compute_next_run_at
from landing_factory.domain.content import make_block, page_content
from landing_factory.domain.exceptions import NotFoundError
from landing_factory.domain.lifecycle.autopost import assert_run_transition
from landing_factory.models.autopost import AutopostRun, AutopostSchedule
from landing_factory.models.page import Page
from landing_factory.rendering.html import escape_html
from landing_factory.utils.clock import utcnow
from landing_factory.utils.transaction import transactional
from landing_factory.utils.versioning import append_version
from .ensure_index_page import ensure_index_page

INDEX_LISTING_LIMIT = 30

SECTION_PAGE_TYPES = {
    "blog": ("blog_post", "blog_index", "Blog"),
    "news": ("news_item", "news_index", "News"),
}


def _footer_block() -> Dict[str, Any]:
    return make_block("footer_links", {"items": [{"label": "Primary", "href": "{{slot:FOOTER}}"}]})


def _unique_post_route(session, site_id: str, section: str, now: datetime):
    """``/<section>/<section>-<epoch ms>``, bumping the stamp until the route is free."""
    stamp = int(now.replace(tzinfo=timezone.utc).timestamp() * 1000)

    while True:
        slug = f"{section}-{stamp}"
        route = f"/{section}/{slug}"
        taken = session.execute(
            select(Page.id).where(Page.site_id == site_id, Page.route == route)
        ).first()
        if not taken:
            return slug, route
        stamp += 1


def create_post_page(session, schedule, *, now: datetime) -> Page:
    section = schedule.section
    post_type, _, _ = SECTION_PAGE_TYPES[section]
    site = schedule.site
    lang = site.language or "ru"

    slug, route = _unique_post_route(session, site.id, section, now)
    title = f"{section.upper()} update: {now.date().isoformat()}"
    body_html = (
        f"<h2>{escape_html(title)}</h2>"
        '<p class="small">Auto-generated post placeholder.</p>'
    )

    page = Page()
    page.site_id = site.id
    page.route = route
    page.slug = slug
    page.page_type = post_type
    page.status = "draft"
    page.created_at = now

    session.add(page)
    session.flush()

    append_version(
        session,
        page,
        content_json=page_content(
            route=route,
            page_type=post_type,
            lang=lang,
            blocks=[
                make_block("hero", {
                    "h1": title,
                    "subheading": site.theme,
                    "primaryCta": {"label": "Back", "href": f"/{section}"},
                }),
                make_block("content", {"html": body_html}),
                _footer_block(),
            ],
        ),
        seo_json={"title": title, "description": title},
        publish=not schedule.require_approval,
    )
    return page


def recent_posts(session, site_id: str, section: str, limit: int = INDEX_LISTING_LIMIT) -> List[Page]:
    return list(session.scalars(
        select(Page)
        .where(Page.site_id == site_id, Page.route.startswith(f"/{section}/", autoescape=True))
        .order_by(Page.created_at.desc(), Page.route.desc())
        .limit(limit)
    ))


def render_post_listing(posts: List[Page]) -> str:
    items = "".join(
        f'<li><a href="{escape_html(p.route)}">{escape_html(p.slug or p.route)}</a></li>'
        for p in posts
    )
    return f"<ul>{items}</ul>"


def regenerate_index_page(session, schedule):
    section = schedule.section
    _, index_type, index_title = SECTION_PAGE_TYPES[section]
    site = schedule.site
    lang = site.language or "ru"
    base = f"/{section}"

    index_page = ensure_index_page(
        session,
        site_id=site.id,
        route=base,
        page_type=index_type,
        title=index_title,
        lang=lang,
    )
    posts = recent_posts(session, site.id, section)

    append_version(
        session,
        index_page,
        content_json=page_content(
            route=base,
            page_type=index_type,
            lang=lang,
            blocks=[
                make_block("hero", {
                    "h1": index_title,
                    "subheading": site.theme,
                    "primaryCta": {"label": "Home", "href": "/"},
                }),
                make_block("content", {"html": render_post_listing(posts)}),
                _footer_block(),
            ],
        ),
        seo_json={"title": index_title, "description": site.theme},
        publish=not schedule.require_approval,
    )
    return index_page


def _finish_run(run, status: str) -> None:
    assert_run_transition(from_status=run.status, to_status=status)
    run.status = status
    run.finished_at = utcnow()


def _record_failure(session, *, run_id, schedule_id, error, now, cadence_persisted, backoff_minutes):
    with transactional(session):
        run = session.get(AutopostRun, run_id)
        _finish_run(run, "failed")
        run.logs = str(error)

        # Nothing advanced the schedule: push it out so the next tick does not retry at once
        if not cadence_persisted:
            schedule = session.get(AutopostSchedule, schedule_id)
            schedule.next_run_at = now + relativedelta(minutes=backoff_minutes)


def run_autopost_schedule(
    *,
    session,
    schedule_id: str,
    render_client,
    now: Optional[datetime] = None,
    retry_backoff_minutes: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Execute one autopost run for a schedule.

    Steps:
    1. decline disabled schedules (no run row)
    2. run row in ``running``
    3-7. post page, index page, listing version, cadence (one transaction)
    8. publish the site unless approval is required
    9. run ``success``; on error run ``failed``, retry policy, re-raise
    """
    schedule = session.get(AutopostSchedule, schedule_id)
    if not schedule:
        raise NotFoundError("Schedule not found")

    if not schedule.is_enabled:
        current_app.logger.info("Autopost schedule %s is disabled; run declined", schedule.id)
        return {"ok": False, "message": "Schedule disabled"}

    now = now or utcnow()
    if retry_backoff_minutes is None:
        retry_backoff_minutes = current_app.config.get("AUTOPOST_RETRY_BACKOFF_MINUTES", 15)

    with transactional(session):
        run = AutopostRun()
        run.schedule_id = schedule.id
        run.status = "running"
        session.add(run)

    run_id = run.id
    site_id = schedule.site_id
    cadence_persisted = False

    try:
        with transactional(session):
            post_page = create_post_page(session, schedule, now=now)
            regenerate_index_page(session, schedule)

            schedule.next_run_at = compute_next_run_at(now, schedule.cadence_type, schedule.cadence_json)
            schedule.last_run_at = now
        cadence_persisted = True

        post_route = post_page.route
        published = None
        if not schedule.require_approval:
            published = publish_site(session=session, site_id=site_id, render_client=render_client)

        with transactional(session):
            run = session.get(AutopostRun, run_id)
            _finish_run(run, "success")
            run.result_json = {"postRoute": post_route, "published": published}
            run.created_page_id = post_page.id

    except Exception as exc:
        session.rollback()
        _record_failure(
            session,
            run_id=run_id,
            schedule_id=schedule_id,
            error=exc,
            now=now,
            cadence_persisted=cadence_persisted,
            backoff_minutes=retry_backoff_minutes,
        )
        current_app.logger.error("Autopost run %s for schedule %s failed: %s", run_id, schedule_id, exc)
        raise

    current_app.logger.info("Autopost run %s created %s", run_id, post_route)
    return {"ok": True, "runId": run_id, "postRoute": post_route, "published": published}
