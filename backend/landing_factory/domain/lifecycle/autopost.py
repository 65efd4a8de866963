from typing import Set

ALLOWED_RUN_TRANSITIONS: dict[str, Set[str]] = {
    "running": {"success", "failed"},
    "success": set(),
    "failed": set(),
}


def assert_run_transition(*, from_status: str, to_status: str) -> None:
    allowed = ALLOWED_RUN_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise ValueError(
            f"Illegal autopost run transition: {from_status} → {to_status}"
        )
