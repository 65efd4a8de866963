from flask import jsonify
from sqlalchemy import select
from landing_factory.application.sites.import_domains import bulk_import_domains
from landing_factory.extensions import db
from landing_factory.models.domain import Domain
from landing_factory.models.template import Template
from landing_factory.normalizers.site import normalize_domain, normalize_template
from landing_factory.utils.decorators import admin_required
from landing_factory.utils.request_body import json_object_body
from . import v1_bp

# ------------------------
# Domains
# ------------------------

@v1_bp.route("/domains", methods=["GET"])
@admin_required
def list_domains():
    domains = db.session.scalars(
        select(Domain).order_by(Domain.created_at.desc())
    )
    return jsonify({"domains": [normalize_domain(d) for d in domains]})


@v1_bp.route("/domains/bulk-import", methods=["POST"])
@admin_required
def import_domains():
    data = json_object_body()
    names = data.get("domains")

    if not isinstance(names, list) or not names:
        return jsonify({"error": "domains must be a non-empty list"}), 400

    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
        return jsonify({"error": "defaults must be an object"}), 400

    result = bulk_import_domains(
        session=db.session,
        names=names,
        status=defaults.get("status", "draft"),
    )

    return jsonify({
        "createdCount": result["createdCount"],
        "created": [normalize_domain(d) for d in result["created"]],
    }), 201

# ------------------------
# Templates
# ------------------------

@v1_bp.route("/templates", methods=["GET"])
@admin_required
def list_templates():
    templates = db.session.scalars(
        select(Template)
        .where(Template.is_active.is_(True))
        .order_by(Template.created_at.desc())
    )
    return jsonify({"templates": [normalize_template(t) for t in templates]})
