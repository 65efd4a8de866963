from .common import iso


def normalize_build(build):
    return {
        "id": build.id,
        "siteId": build.site_id,
        "buildNumber": build.build_number,
        "status": build.status,
        "artifactPath": build.artifact_path,
        "sitemapPath": build.sitemap_path,
        "robotsPath": build.robots_path,
        "logs": build.logs,
        "createdAt": iso(build.created_at),
        "finishedAt": iso(build.finished_at),
        "publishedAt": iso(build.published_at),
    }
