# landing_factory/normalizers/pagination.py
from typing import Callable, Any, List, Optional, Dict

from landing_factory.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: Optional[CursorMeta] = None,
) -> Dict[str, Any]:
    """
    Normalize paginated API responses.

    Items are normalized with ``normalize_fn``; cursor metadata, when given,
    goes under ``pagination``.
    """
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in items],
    }

    if cursor is not None:
        response["pagination"] = {
            "has_more": cursor["has_more"],
            "next_cursor": cursor["next_cursor"],
        }

    return response
