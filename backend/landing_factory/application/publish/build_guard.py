import threading
from contextlib import contextmanager

from landing_factory.domain.exceptions import BuildInProgressError

_registry_lock = threading.Lock()
_building: set[str] = set()


@contextmanager
def site_build_guard(site_id: str):
    """
    Admit at most one publish per site at a time within this process.

    A second request for a site that is already building is rejected with
    BuildInProgressError instead of queueing behind the first one. Only
    sites with a build in flight are tracked.
    """
    with _registry_lock:
        if site_id in _building:
            raise BuildInProgressError(site_id)
        _building.add(site_id)
    try:
        yield
    finally:
        with _registry_lock:
            _building.discard(site_id)


def is_building(site_id: str) -> bool:
    with _registry_lock:
        return site_id in _building
