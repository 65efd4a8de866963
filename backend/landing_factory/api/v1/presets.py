from flask import jsonify
from sqlalchemy import select
from landing_factory.extensions import db
from landing_factory.models.presets import AnalyticsProfile, ComponentStylePreset, ThemePreset
from landing_factory.normalizers.preset import normalize_analytics_profile, normalize_preset
from landing_factory.utils.decorators import admin_required
from landing_factory.utils.request_body import json_object_body
from . import v1_bp


def _validate_preset_body(data, *, partial):
    if not partial or "name" in data:
        if not isinstance(data.get("name"), str) or not data["name"].strip():
            return "name is required"
    if not partial or "json" in data:
        if not isinstance(data.get("json"), dict):
            return "json must be an object"
    return None


def _list_presets(model, key):
    presets = db.session.scalars(select(model).order_by(model.created_at.desc()))
    return jsonify({key: [normalize_preset(p) for p in presets]})


def _create_preset(model, key):
    data = json_object_body()
    error = _validate_preset_body(data, partial=False)
    if error:
        return jsonify({"error": error}), 400

    preset = model()
    preset.name = data["name"].strip()
    preset.json = data["json"]
    preset.is_system = bool(data.get("isSystem", False))

    db.session.add(preset)
    db.session.commit()

    return jsonify({key: normalize_preset(preset)}), 201


def _update_preset(model, key, preset_id):
    preset = db.get_or_404(model, preset_id)
    data = json_object_body()
    error = _validate_preset_body(data, partial=True)
    if error:
        return jsonify({"error": error}), 400

    if "name" in data:
        preset.name = data["name"].strip()
    if "json" in data:
        preset.json = data["json"]

    db.session.commit()
    return jsonify({key: normalize_preset(preset)}), 200

# ------------------------
# Themes
# ------------------------

@v1_bp.route("/themes", methods=["GET"])
@admin_required
def list_themes():
    return _list_presets(ThemePreset, "themes")


@v1_bp.route("/themes", methods=["POST"])
@admin_required
def create_theme():
    return _create_preset(ThemePreset, "theme")


@v1_bp.route("/themes/<preset_id>", methods=["PATCH"])
@admin_required
def update_theme(preset_id):
    return _update_preset(ThemePreset, "theme", preset_id)

# ------------------------
# Component style presets
# ------------------------

@v1_bp.route("/component-style-presets", methods=["GET"])
@admin_required
def list_component_style_presets():
    return _list_presets(ComponentStylePreset, "presets")


@v1_bp.route("/component-style-presets", methods=["POST"])
@admin_required
def create_component_style_preset():
    return _create_preset(ComponentStylePreset, "preset")


@v1_bp.route("/component-style-presets/<preset_id>", methods=["PATCH"])
@admin_required
def update_component_style_preset(preset_id):
    return _update_preset(ComponentStylePreset, "preset", preset_id)

# ------------------------
# Analytics profiles
# ------------------------

@v1_bp.route("/analytics/profiles", methods=["GET"])
@admin_required
def list_analytics_profiles():
    profiles = db.session.scalars(
        select(AnalyticsProfile).order_by(AnalyticsProfile.created_at.desc())
    )
    return jsonify({"profiles": [normalize_analytics_profile(p) for p in profiles]})


@v1_bp.route("/analytics/profiles", methods=["POST"])
@admin_required
def create_analytics_profile():
    data = json_object_body()

    if not isinstance(data.get("name"), str) or not data["name"].strip():
        return jsonify({"error": "name is required"}), 400
    if not isinstance(data.get("scriptsJson"), dict):
        return jsonify({"error": "scriptsJson must be an object"}), 400

    profile = AnalyticsProfile()
    profile.name = data["name"].strip()
    profile.scripts_json = data["scriptsJson"]
    profile.verification_json = data.get("verificationJson")
    profile.is_system = bool(data.get("isSystem", False))

    db.session.add(profile)
    db.session.commit()

    return jsonify({"profile": normalize_analytics_profile(profile)}), 201


@v1_bp.route("/analytics/profiles/<profile_id>", methods=["PATCH"])
@admin_required
def update_analytics_profile(profile_id):
    profile = db.get_or_404(AnalyticsProfile, profile_id)
    data = json_object_body()

    for key, attr in (("scriptsJson", "scripts_json"), ("verificationJson", "verification_json")):
        if key in data:
            if not isinstance(data[key], dict):
                return jsonify({"error": f"{key} must be an object"}), 400
            setattr(profile, attr, data[key])

    if "name" in data:
        if not isinstance(data["name"], str) or not data["name"].strip():
            return jsonify({"error": "name is required"}), 400
        profile.name = data["name"].strip()

    db.session.commit()
    return jsonify({"profile": normalize_analytics_profile(profile)}), 200
