from flask import jsonify, request
from sqlalchemy import select
from landing_factory.application.autopost.manage_schedule import create_schedule, update_schedule
from landing_factory.application.autopost.run_schedule import run_autopost_schedule
from landing_factory.application.publish.render_client import make_render_client
from landing_factory.extensions import db
from landing_factory.models.autopost import AutopostRun, AutopostSchedule
from landing_factory.normalizers.autopost import normalize_run, normalize_schedule
from landing_factory.normalizers.pagination import normalize_pagination
from landing_factory.utils.decorators import admin_required
from landing_factory.utils.request_body import json_object_body
from landing_factory.utils.pagination import paginate_cursor
from . import v1_bp

# ------------------------
# Schedules
# ------------------------

@v1_bp.route("/autopost/schedules", methods=["GET"])
@admin_required
def list_schedules():
    stmt = select(AutopostSchedule).order_by(AutopostSchedule.created_at.desc())

    site_id = request.args.get("siteId")
    if site_id:
        stmt = stmt.where(AutopostSchedule.site_id == site_id)

    schedules = db.session.scalars(stmt)
    return jsonify({"schedules": [normalize_schedule(s) for s in schedules]})


@v1_bp.route("/autopost/schedules", methods=["POST"])
@admin_required
def create_schedule_route():
    data = json_object_body()
    schedule = create_schedule(session=db.session, data=data)
    return jsonify({"schedule": normalize_schedule(schedule)}), 201


@v1_bp.route("/autopost/schedules/<schedule_id>", methods=["PATCH"])
@admin_required
def update_schedule_route(schedule_id):
    data = json_object_body()
    schedule = update_schedule(session=db.session, schedule_id=schedule_id, data=data)
    return jsonify({"schedule": normalize_schedule(schedule)}), 200


@v1_bp.route("/autopost/schedules/<schedule_id>/run-now", methods=["POST"])
@admin_required
def run_schedule_now(schedule_id):
    result = run_autopost_schedule(
        session=db.session,
        schedule_id=schedule_id,
        render_client=make_render_client(session=db.session),
    )
    return jsonify(result), 200

# ------------------------
# Runs
# ------------------------

@v1_bp.route("/autopost/runs", methods=["GET"])
@admin_required
def list_runs():
    """
    Cursor-paginated run history, newest first.

    Query params:
    - scheduleId, siteId: optional filters
    - limit: 1..100 (default 20)
    - cursor: opaque ``next_cursor`` from the previous page
    """
    try:
        limit = min(int(request.args.get("limit", 20)), 100)
    except ValueError:
        return jsonify({"error": "limit must be an integer"}), 400

    stmt = select(AutopostRun)

    schedule_id = request.args.get("scheduleId")
    if schedule_id:
        stmt = stmt.where(AutopostRun.schedule_id == schedule_id)

    site_id = request.args.get("siteId")
    if site_id:
        stmt = stmt.join(AutopostSchedule, AutopostRun.schedule_id == AutopostSchedule.id).where(
            AutopostSchedule.site_id == site_id
        )

    runs, cursor = paginate_cursor(
        db.session,
        stmt,
        model=AutopostRun,
        limit=limit,
        cursor=request.args.get("cursor"),
    )
    return jsonify(normalize_pagination(runs, normalize_run, cursor=cursor)), 200
