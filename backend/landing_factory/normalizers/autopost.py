from .common import iso


def normalize_schedule(schedule):
    return {
        "id": schedule.id,
        "siteId": schedule.site_id,
        "section": schedule.section,
        "cadenceType": schedule.cadence_type,
        "cadenceJson": schedule.cadence_json or {},
        "requireApproval": schedule.require_approval,
        "isEnabled": schedule.is_enabled,
        "nextRunAt": iso(schedule.next_run_at),
        "lastRunAt": iso(schedule.last_run_at),
    }


def normalize_run(run):
    return {
        "id": run.id,
        "scheduleId": run.schedule_id,
        "status": run.status,
        "resultJson": run.result_json,
        "logs": run.logs,
        "createdPageId": run.created_page_id,
        "createdAt": iso(run.created_at),
        "finishedAt": iso(run.finished_at),
    }
