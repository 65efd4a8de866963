from typing import Set

ALLOWED_BUILD_TRANSITIONS: dict[str, Set[str]] = {
    "queued": {"ready", "published", "failed"},
    "ready": {"published", "failed"},
    "published": set(),
    "failed": set(),
}


def assert_build_transition(*, from_status: str, to_status: str) -> None:
    allowed = ALLOWED_BUILD_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise ValueError(
            f"Illegal build transition: {from_status} → {to_status}"
        )
