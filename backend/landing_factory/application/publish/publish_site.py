# landing_factory/application/publish/publish_site.py
from typing import Any, Dict

from flask import current_app

from landing_factory.domain.exceptions import NotFoundError, RenderFailure
from landing_factory.domain.invariants.build import assert_next_build_number
from landing_factory.domain.invariants.page import assert_page_versions
from landing_factory.domain.lifecycle.build import assert_build_transition
from landing_factory.domain.lifecycle.page import assert_page_transition
from landing_factory.models.build import Build
from landing_factory.models.site import Site
from landing_factory.utils.clock import utcnow
from landing_factory.utils.transaction import transactional
from landing_factory.utils.versioning import last_build_number
from .build_guard import site_build_guard


def promote_latest_versions(site) -> int:
    """
    Publish the highest version of every page, demoting all others.

    Returns the number of pages promoted.
    """
    promoted = 0

    for page in site.pages:
        if not page.versions:
            continue

        latest = max(page.versions, key=lambda v: v.version_number)
        for version in page.versions:
            version.is_published = version is latest
        assert_page_versions(page)

        assert_page_transition(from_status=page.status, to_status="published")
        page.status = "published"
        promoted += 1

    return promoted


def _mark_failed(session, build, detail: str) -> None:
    with transactional(session):
        assert_build_transition(from_status=build.status, to_status="failed")
        build.status = "failed"
        build.logs = detail


def publish_site(
    *,
    session,
    site_id: str,
    render_client,
) -> Dict[str, Any]:
    """
    Publish a site: promote content, create a Build, render, record outcome.

    Responsibilities:
    - per-site admission (one publish in flight per site)
    - version promotion + build numbering in one transaction
    - render trigger, success/failure bookkeeping

    Raises:
    - NotFoundError if the site does not exist
    - BuildInProgressError if the site is already being published
    - RenderFailure if the renderer did not succeed (build marked failed,
      site status left unchanged)
    """
    site = session.get(Site, site_id)
    if not site:
        raise NotFoundError("Site not found")

    with site_build_guard(site.id):
        with transactional(session):
            promoted = promote_latest_versions(site)

            previous = last_build_number(session, site.id)
            build = Build()
            build.site_id = site.id
            build.build_number = previous + 1
            build.status = "queued"
            build.artifact_path = ""
            assert_next_build_number(previous, build.build_number)

            session.add(build)

        current_app.logger.info(
            "Publishing site %s: build %s queued (%d pages promoted)",
            site.id, build.build_number, promoted,
        )

        try:
            out = render_client.render_site(site.id, build.id)
        except RenderFailure as exc:
            _mark_failed(session, build, str(exc))
            current_app.logger.error(
                "Build %s for site %s failed: %s", build.build_number, site_id, exc
            )
            raise

        with transactional(session):
            assert_build_transition(from_status=build.status, to_status="published")
            build.status = "published"
            build.artifact_path = out.get("artifactPath") or ""
            build.published_at = utcnow()
            site.status = "published"

    current_app.logger.info(
        "Published site %s: build %s at %s", site_id, build.build_number, build.artifact_path
    )

    return {
        "buildId": build.id,
        "buildNumber": build.build_number,
        "artifactPath": build.artifact_path,
    }
