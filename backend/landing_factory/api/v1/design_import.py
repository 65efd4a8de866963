from flask import jsonify
from landing_factory.application.design.import_manual import import_manual_design
from landing_factory.extensions import db
from landing_factory.utils.decorators import admin_required
from landing_factory.utils.request_body import json_object_body
from . import v1_bp


@v1_bp.route("/design-import/manual", methods=["POST"])
@admin_required
def manual_design_import():
    result = import_manual_design(session=db.session, data=json_object_body())
    return jsonify({"ok": True, **result}), 201
