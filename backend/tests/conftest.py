"""Shared fixtures: a fresh app + in-memory database per test."""
from datetime import datetime

import pytest

from landing_factory import create_app
from landing_factory.application.sites.create_site import create_site
from landing_factory.domain.exceptions import RenderFailure
from landing_factory.extensions import db
from landing_factory.models.domain import Domain
from landing_factory.models.link import LinkAssignment, LinkLibrary
from landing_factory.models.template import Template

ADMIN_TOKEN = "test-admin-token-0123456789"


class FailingRenderClient:
    """Render client whose every call fails the way an unreachable renderer does."""

    def __init__(self, message="Renderer error: boom"):
        self.message = message
        self.calls = []

    def render_site(self, site_id, build_id):
        self.calls.append((site_id, build_id))
        raise RenderFailure(self.message)


@pytest.fixture
def output_root(tmp_path):
    return tmp_path / "www"


@pytest.fixture
def app(output_root):
    app = create_app("testing", OUTPUT_ROOT=str(output_root))

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    return db.session


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers():
    return {"X-Admin-Token": ADMIN_TOKEN}


@pytest.fixture
def template(session):
    """Template without explicit routes: home at ``/`` and contacts at ``/contacts``."""
    tpl = Template(key="basic-v1", name="Basic", definition_json={}, is_active=True)
    session.add(tpl)
    session.commit()
    return tpl


@pytest.fixture
def make_site(session, template):
    def _make(domain_name="example.com", theme="Acme Widgets", language="en"):
        domain = Domain(domain_name=domain_name, status="active")
        session.add(domain)
        session.commit()
        return create_site(
            session=session,
            domain_id=domain.id,
            template_key=template.key,
            theme=theme,
            language=language,
        )

    return _make


@pytest.fixture
def assign_link(session):
    def _assign(site, placement, target_url, *, enabled=True, created_at=None):
        link = LinkLibrary(name=f"{placement} link", target_url=target_url, link_kind="button")
        session.add(link)
        session.flush()

        assignment = LinkAssignment(
            site_id=site.id,
            link_library_id=link.id,
            placement=placement,
            is_enabled=enabled,
        )
        if created_at is not None:
            assignment.created_at = created_at
        session.add(assignment)
        session.commit()
        return assignment

    return _assign


@pytest.fixture
def failing_render_client():
    return FailingRenderClient()


@pytest.fixture
def fixed_now():
    # Wednesday
    return datetime(2026, 1, 7, 12, 0, 0)
