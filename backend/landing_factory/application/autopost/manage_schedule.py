from typing import Any, Dict

from landing_factory.domain.cadence import CADENCE_TYPES, compute_next_run_at
from landing_factory.domain.exceptions import NotFoundError, ValidationError
from landing_factory.models.autopost import SECTIONS, AutopostSchedule
from landing_factory.models.site import Site
from landing_factory.utils.clock import utcnow
from landing_factory.utils.transaction import transactional


def _require_bool(data: Dict[str, Any], key: str) -> None:
    if key in data and not isinstance(data[key], bool):
        raise ValidationError(f"{key} must be a boolean")


def _require_cadence(data: Dict[str, Any], *, required: bool) -> None:
    if required or "cadenceType" in data:
        if data.get("cadenceType") not in CADENCE_TYPES:
            raise ValidationError(f"cadenceType must be one of {', '.join(CADENCE_TYPES)}")
    if required or "cadenceJson" in data:
        if not isinstance(data.get("cadenceJson"), dict):
            raise ValidationError("cadenceJson must be an object")


def create_schedule(*, session, data: Dict[str, Any]) -> AutopostSchedule:
    """
    Create an autopost schedule and compute its first run time.

    Edge cases handled:
    - Unknown site
    - Section / cadence outside the closed sets
    """
    if data.get("section") not in SECTIONS:
        raise ValidationError(f"section must be one of {', '.join(SECTIONS)}")
    _require_cadence(data, required=True)
    _require_bool(data, "requireApproval")
    _require_bool(data, "isEnabled")

    site = session.get(Site, data.get("siteId") or "")
    if not site:
        raise NotFoundError("Site not found")

    schedule = AutopostSchedule()
    schedule.site_id = site.id
    schedule.section = data["section"]
    schedule.cadence_type = data["cadenceType"]
    schedule.cadence_json = data["cadenceJson"]
    schedule.require_approval = data.get("requireApproval", False)
    schedule.is_enabled = data.get("isEnabled", True)
    schedule.next_run_at = compute_next_run_at(utcnow(), schedule.cadence_type, schedule.cadence_json)

    with transactional(session):
        session.add(schedule)

    return schedule


def update_schedule(*, session, schedule_id: str, data: Dict[str, Any]) -> AutopostSchedule:
    """Update flags and/or cadence. A cadence change recomputes ``next_run_at`` from now."""
    schedule = session.get(AutopostSchedule, schedule_id)
    if not schedule:
        raise NotFoundError("Schedule not found")

    _require_cadence(data, required=False)
    _require_bool(data, "requireApproval")
    _require_bool(data, "isEnabled")

    with transactional(session):
        if "requireApproval" in data:
            schedule.require_approval = data["requireApproval"]
        if "isEnabled" in data:
            schedule.is_enabled = data["isEnabled"]

        if "cadenceType" in data or "cadenceJson" in data:
            schedule.cadence_type = data.get("cadenceType", schedule.cadence_type)
            schedule.cadence_json = data.get("cadenceJson", schedule.cadence_json)
            schedule.next_run_at = compute_next_run_at(
                utcnow(), schedule.cadence_type, schedule.cadence_json
            )

    return schedule
