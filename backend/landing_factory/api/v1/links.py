from flask import jsonify, request
from sqlalchemy import select
from landing_factory.application.links.bulk_replace import (
    apply_bulk_replace,
    preview_bulk_replace,
    undo_last_bulk_replace,
)
from landing_factory.extensions import db
from landing_factory.models.link import LINK_KINDS, LinkAssignment, LinkLibrary
from landing_factory.models.site import Site
from landing_factory.normalizers.link import normalize_assignment, normalize_link
from landing_factory.utils.decorators import admin_required
from landing_factory.utils.request_body import json_object_body
from . import v1_bp

# ------------------------
# Link library
# ------------------------

@v1_bp.route("/links/library", methods=["GET"])
@admin_required
def list_link_library():
    links = db.session.scalars(select(LinkLibrary).order_by(LinkLibrary.created_at.desc()))
    return jsonify({"links": [normalize_link(link) for link in links]})


@v1_bp.route("/links/library", methods=["POST"])
@admin_required
def create_link():
    data = json_object_body()

    if not data.get("name") or not data.get("targetUrl"):
        return jsonify({"error": "name and targetUrl are required"}), 400

    link_kind = data.get("linkKind", "url_display")
    if link_kind not in LINK_KINDS:
        return jsonify({"error": f"linkKind must be one of {', '.join(LINK_KINDS)}"}), 400

    link = LinkLibrary()
    link.name = data["name"]
    link.target_url = data["targetUrl"]
    link.link_kind = link_kind

    db.session.add(link)
    db.session.commit()

    return jsonify({"link": normalize_link(link)}), 201

# ------------------------
# Assignments
# ------------------------

@v1_bp.route("/links/assignments", methods=["GET"])
@admin_required
def list_assignments():
    stmt = select(LinkAssignment).order_by(LinkAssignment.created_at.asc())

    site_id = request.args.get("siteId")
    if site_id:
        stmt = stmt.where(LinkAssignment.site_id == site_id)

    assignments = db.session.scalars(stmt)
    return jsonify({"assignments": [normalize_assignment(a) for a in assignments]})


@v1_bp.route("/links/assignments", methods=["POST"])
@admin_required
def create_assignment():
    data = json_object_body()

    if not data.get("siteId") or not data.get("linkLibraryId") or not data.get("placement"):
        return jsonify({"error": "siteId, linkLibraryId and placement are required"}), 400

    if db.session.get(Site, data["siteId"]) is None:
        return jsonify({"error": "Site not found"}), 404
    if db.session.get(LinkLibrary, data["linkLibraryId"]) is None:
        return jsonify({"error": "Link not found"}), 404

    assignment = LinkAssignment()
    assignment.site_id = data["siteId"]
    assignment.link_library_id = data["linkLibraryId"]
    assignment.placement = data["placement"]
    assignment.is_enabled = bool(data.get("isEnabled", True))
    assignment.display_text_override = data.get("displayTextOverride")

    db.session.add(assignment)
    db.session.commit()

    return jsonify({"assignment": normalize_assignment(assignment)}), 201


@v1_bp.route("/links/assignments/<assignment_id>", methods=["PATCH"])
@admin_required
def update_assignment(assignment_id):
    assignment = db.get_or_404(LinkAssignment, assignment_id)
    data = json_object_body()

    if "isEnabled" in data:
        if not isinstance(data["isEnabled"], bool):
            return jsonify({"error": "isEnabled must be a boolean"}), 400
        assignment.is_enabled = data["isEnabled"]

    if "displayTextOverride" in data:
        override = data["displayTextOverride"]
        if override is not None and not isinstance(override, str):
            return jsonify({"error": "displayTextOverride must be a string or null"}), 400
        assignment.display_text_override = override

    db.session.commit()
    return jsonify({"assignment": normalize_assignment(assignment)}), 200

# ------------------------
# Bulk find / replace
# ------------------------

def _bulk_args():
    data = json_object_body()
    return {
        "mode": data.get("mode"),
        "find": data.get("find"),
        "replace": data.get("replace"),
    }


@v1_bp.route("/links/bulk/preview", methods=["POST"])
@admin_required
def bulk_preview():
    return jsonify(preview_bulk_replace(session=db.session, **_bulk_args())), 200


@v1_bp.route("/links/bulk/apply", methods=["POST"])
@admin_required
def bulk_apply():
    return jsonify(apply_bulk_replace(session=db.session, **_bulk_args())), 200


@v1_bp.route("/links/bulk/undo-last", methods=["POST"])
@admin_required
def bulk_undo_last():
    return jsonify(undo_last_bulk_replace(session=db.session)), 200
