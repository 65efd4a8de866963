from flask import current_app, jsonify
from landing_factory.application.build.build_site import build_site
from landing_factory.extensions import db
from landing_factory.utils.decorators import admin_required
from landing_factory.utils.request_body import json_object_body
from . import v1_bp


@v1_bp.route("/render/site/<site_id>", methods=["POST"])
@admin_required
def render_site(site_id):
    """
    Render trigger consumed by the publish pipeline in ``http`` render mode.
    """
    data = json_object_body()
    build_id = data.get("buildId")

    if not isinstance(build_id, str) or not build_id:
        return jsonify({"error": "buildId is required"}), 400

    try:
        result = build_site(
            session=db.session,
            site_id=site_id,
            build_id=build_id,
            output_root=current_app.config["OUTPUT_ROOT"],
        )
    except OSError as exc:
        db.session.rollback()
        current_app.logger.exception("Render of site %s failed", site_id)
        return jsonify({"error": f"Render failed: {exc}"}), 500

    return jsonify(result), 200
