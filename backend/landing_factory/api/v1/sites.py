from flask import current_app, jsonify
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from landing_factory.application.publish.publish_site import publish_site
from landing_factory.application.publish.render_client import make_render_client
from landing_factory.application.sites.create_site import create_site
from landing_factory.extensions import db
from landing_factory.models.build import Build
from landing_factory.models.page import Page
from landing_factory.models.presets import AnalyticsProfile, ComponentStylePreset, ThemePreset
from landing_factory.models.site import Site
from landing_factory.normalizers.build import normalize_build
from landing_factory.normalizers.site import normalize_site
from landing_factory.utils.decorators import admin_required
from landing_factory.utils.request_body import json_object_body
from . import v1_bp

STYLE_FIELDS = (
    ("themePresetId", "theme_preset_id", ThemePreset),
    ("componentStylePresetId", "component_style_preset_id", ComponentStylePreset),
)

# ------------------------
# Sites
# ------------------------

@v1_bp.route("/sites", methods=["GET"])
@admin_required
def list_sites():
    sites = db.session.scalars(
        select(Site)
        .options(selectinload(Site.domain))
        .order_by(Site.created_at.desc())
    )
    return jsonify({"sites": [normalize_site(s) for s in sites]})


@v1_bp.route("/sites", methods=["POST"])
@admin_required
def create_site_route():
    data = json_object_body()

    if not data.get("domainId") or not data.get("templateKey"):
        return jsonify({"error": "domainId and templateKey are required"}), 400

    site = create_site(
        session=db.session,
        domain_id=data["domainId"],
        template_key=data["templateKey"],
        theme=data.get("theme"),
        language=data.get("language") or "ru",
    )

    current_app.logger.info("Created site %s for domain %s", site.id, site.domain_id)
    return jsonify({"site": normalize_site(site, include_pages=True)}), 201


@v1_bp.route("/sites/<site_id>", methods=["GET"])
@admin_required
def get_site(site_id):
    site = db.session.execute(
        select(Site)
        .where(Site.id == site_id)
        .options(selectinload(Site.pages).selectinload(Page.versions))
    ).scalar_one_or_none()

    if not site:
        return jsonify({"error": "Site not found"}), 404

    return jsonify({"site": normalize_site(site, include_pages=True)})


@v1_bp.route("/sites/<site_id>/style", methods=["PATCH"])
@admin_required
def update_site_style(site_id):
    site = db.get_or_404(Site, site_id)
    data = json_object_body()

    for key, attr, model in STYLE_FIELDS:
        if key not in data:
            continue
        preset_id = data[key]
        if preset_id is not None and (
            not isinstance(preset_id, str) or db.session.get(model, preset_id) is None
        ):
            return jsonify({"error": f"{key} does not exist"}), 400
        setattr(site, attr, preset_id)

    if "theme" in data:
        if not isinstance(data["theme"], str) or not data["theme"].strip():
            return jsonify({"error": "theme must be a non-empty string"}), 400
        site.theme = data["theme"].strip()

    db.session.commit()
    return jsonify({"site": normalize_site(site)}), 200


@v1_bp.route("/sites/<site_id>/analytics/assign", methods=["POST"])
@admin_required
def assign_site_analytics(site_id):
    site = db.get_or_404(Site, site_id)
    data = json_object_body()

    if "analyticsProfileId" not in data:
        return jsonify({"error": "analyticsProfileId is required"}), 400

    profile_id = data["analyticsProfileId"]
    if profile_id is not None and db.session.get(AnalyticsProfile, profile_id) is None:
        return jsonify({"error": "Analytics profile not found"}), 404

    site.analytics_profile_id = profile_id
    db.session.commit()

    return jsonify({"site": normalize_site(site)}), 200

# ------------------------
# Publishing
# ------------------------

@v1_bp.route("/sites/<site_id>/publish", methods=["POST"])
@admin_required
def publish_site_route(site_id):
    """
    Promote the latest versions, render, and record a new Build.

    Render failures surface as 502 with the build left ``failed``;
    a concurrent publish for the same site is rejected with 409.
    """
    result = publish_site(
        session=db.session,
        site_id=site_id,
        render_client=make_render_client(session=db.session),
    )
    return jsonify({"ok": True, **result}), 200


@v1_bp.route("/sites/<site_id>/builds", methods=["GET"])
@admin_required
def list_site_builds(site_id):
    db.get_or_404(Site, site_id)

    builds = db.session.scalars(
        select(Build)
        .where(Build.site_id == site_id)
        .order_by(Build.build_number.desc())
    )
    return jsonify({"builds": [normalize_build(b) for b in builds]})
