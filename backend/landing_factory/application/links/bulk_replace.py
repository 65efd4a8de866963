# landing_factory/application/links/bulk_replace.py
from typing import Any, Dict, List

from sqlalchemy import select

from landing_factory.domain.exceptions import ValidationError
from landing_factory.models.bulk_operation import BulkOperation
from landing_factory.models.link import LinkAssignment, LinkLibrary
from landing_factory.utils.transaction import transactional

BULK_MODES = ("library_url_replace", "assignment_text_replace")


def _validate(mode: str, find: str, replace: str) -> None:
    if mode not in BULK_MODES:
        raise ValidationError(f"mode must be one of {', '.join(BULK_MODES)}")
    if not isinstance(find, str) or not find:
        raise ValidationError("find must be a non-empty string")
    if not isinstance(replace, str):
        raise ValidationError("replace must be a string")


def _affected(session, mode: str, find: str) -> List[Any]:
    if mode == "library_url_replace":
        return list(session.scalars(
            select(LinkLibrary)
            .where(LinkLibrary.target_url.contains(find, autoescape=True))
            .order_by(LinkLibrary.created_at)
        ))
    return list(session.scalars(
        select(LinkAssignment)
        .where(LinkAssignment.display_text_override.contains(find, autoescape=True))
        .order_by(LinkAssignment.created_at)
    ))


def _current_value(mode: str, row) -> str:
    if mode == "library_url_replace":
        return row.target_url
    return row.display_text_override or ""


def preview_bulk_replace(*, session, mode: str, find: str, replace: str) -> Dict[str, Any]:
    _validate(mode, find, replace)

    preview = [
        {
            "id": row.id,
            "before": _current_value(mode, row),
            "after": _current_value(mode, row).replace(find, replace),
        }
        for row in _affected(session, mode, find)
    ]
    return {"count": len(preview), "preview": preview}


def apply_bulk_replace(*, session, mode: str, find: str, replace: str) -> Dict[str, Any]:
    """
    Apply a find/replace and record the before-state for a single-step undo.
    """
    _validate(mode, find, replace)

    with transactional(session):
        rows = _affected(session, mode, find)
        field = "targetUrl" if mode == "library_url_replace" else "displayTextOverride"
        before = [{"id": row.id, field: _current_value(mode, row)} for row in rows]

        for row in rows:
            replaced = _current_value(mode, row).replace(find, replace)
            if mode == "library_url_replace":
                row.target_url = replaced
            else:
                row.display_text_override = replaced

        op = BulkOperation()
        op.type = f"links.{mode}"
        op.status = "success"
        op.input_json = {"mode": mode, "find": find, "replace": replace}
        op.diff_preview_json = {"before": before}
        op.result_json = {"updated": len(rows)}
        session.add(op)

    return {"operationId": op.id, "updated": len(rows)}


def undo_last_bulk_replace(*, session) -> Dict[str, Any]:
    """Restore the before-state of the most recent successful link operation."""
    last = session.execute(
        select(BulkOperation)
        .where(BulkOperation.type.startswith("links."), BulkOperation.status == "success")
        .order_by(BulkOperation.created_at.desc())
        .limit(1)
    ).scalar_one_or_none()

    if not last:
        return {"ok": False, "message": "No operations"}

    before = (last.diff_preview_json or {}).get("before", [])

    with transactional(session):
        for entry in before:
            if last.type == "links.library_url_replace":
                row = session.get(LinkLibrary, entry["id"])
                if row:
                    row.target_url = entry["targetUrl"]
            elif last.type == "links.assignment_text_replace":
                row = session.get(LinkAssignment, entry["id"])
                if row:
                    row.display_text_override = entry["displayTextOverride"]

        last.status = "undone"

    return {"ok": True, "undoneOperationId": last.id}
