from sqlalchemy import func, select, update

from landing_factory.models.build import Build
from landing_factory.models.page_version import PageVersion


def next_version_number(session, page_id):
    last = session.execute(
        select(func.max(PageVersion.version_number))
        .where(PageVersion.page_id == page_id)
    ).scalar_one_or_none()
    return (last or 0) + 1


def last_build_number(session, site_id):
    return session.execute(
        select(func.max(Build.build_number))
        .where(Build.site_id == site_id)
    ).scalar_one_or_none() or 0


def demote_published_versions(session, page_id, *, keep_id=None):
    """Clear ``is_published`` on every version of a page except ``keep_id``."""
    stmt = (
        update(PageVersion)
        .where(PageVersion.page_id == page_id, PageVersion.is_published.is_(True))
        .values(is_published=False)
        .execution_options(synchronize_session="fetch")
    )
    if keep_id is not None:
        stmt = stmt.where(PageVersion.id != keep_id)
    session.execute(stmt)


def append_version(session, page, *, content_json, seo_json, publish, schema_json=None):
    """
    Append the next immutable version to a page.

    A published version demotes any earlier published one so a page never
    has more than one.
    """
    if publish:
        demote_published_versions(session, page.id)

    version = PageVersion()
    version.page_id = page.id
    version.version_number = next_version_number(session, page.id)
    version.is_published = publish
    version.content_json = content_json
    version.seo_json = seo_json
    version.schema_json = schema_json if schema_json is not None else []

    session.add(version)
    session.flush()
    return version


def select_authoritative_version(versions):
    """The published version, else the highest version number, else None."""
    versions = list(versions)
    for version in versions:
        if version.is_published:
            return version
    if not versions:
        return None
    return max(versions, key=lambda v: v.version_number)
