"""Link slots: ``{{slot:PLACEMENT}}`` hrefs resolved from a site's link assignments."""
import re
from typing import Dict, Iterable, Optional

SLOT_HREF_RE = re.compile(r"\{\{slot:([A-Z0-9_\-]+)\}\}")
UNRESOLVED_HREF = "#"


def resolve_slots(assignments: Iterable) -> Dict[str, str]:
    """
    Placement -> URL from assignments in their stored order.

    Disabled assignments are skipped; the first enabled one per placement
    wins. Items may be objects with ``placement``, ``is_enabled`` and
    ``target_url`` attributes, or ``LinkAssignment`` rows.
    """
    slots: Dict[str, str] = {}

    for assignment in assignments:
        if not assignment.is_enabled:
            continue
        if assignment.placement in slots:
            continue
        slots[assignment.placement] = _target_url(assignment) or UNRESOLVED_HREF

    return slots


def _target_url(assignment) -> Optional[str]:
    library = getattr(assignment, "link_library", None)
    if library is not None:
        return library.target_url
    return getattr(assignment, "target_url", None)


def resolve_slot_href(href: str, slot_urls: Dict[str, str]) -> str:
    match = SLOT_HREF_RE.fullmatch(href)
    if not match:
        return href
    return slot_urls.get(match.group(1), UNRESOLVED_HREF)
