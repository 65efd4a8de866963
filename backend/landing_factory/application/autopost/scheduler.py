"""Background driver that feeds due autopost schedules to the run engine."""
import threading
from typing import Dict, Optional

from sqlalchemy import select

from landing_factory.application.publish.render_client import make_render_client
from landing_factory.extensions import db
from landing_factory.models.autopost import AutopostSchedule
from landing_factory.utils.clock import utcnow
from .run_schedule import run_autopost_schedule


def due_schedule_ids(session, *, now, limit):
    return list(session.scalars(
        select(AutopostSchedule.id)
        .where(
            AutopostSchedule.is_enabled.is_(True),
            AutopostSchedule.next_run_at.is_not(None),
            AutopostSchedule.next_run_at <= now,
        )
        .order_by(AutopostSchedule.next_run_at)
        .limit(limit)
    ))


class AutopostScheduler:
    """
    Cancellable periodic task owned by the Flask app.

    Each tick runs due schedules one after another; a failing schedule is
    logged and never stops the tick or the loop.
    """

    def __init__(self, app, *, interval: Optional[float] = None, batch_size: Optional[int] = None):
        self.app = app
        self.interval = interval if interval is not None else app.config["SCHEDULER_INTERVAL_SECONDS"]
        self.batch_size = batch_size if batch_size is not None else app.config["SCHEDULER_BATCH_SIZE"]
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="autopost-scheduler", daemon=True)
        self._thread.start()
        self.app.logger.info("Autopost scheduler started (every %ss)", self.interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        self.app.logger.info("Autopost scheduler stopped")

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.tick()
            except Exception:
                self.app.logger.exception("Autopost scheduler tick failed")

    def tick(self, now=None) -> Dict[str, int]:
        summary = {"due": 0, "succeeded": 0, "failed": 0}

        with self.app.app_context():
            session = db.session
            try:
                now = now or utcnow()
                schedule_ids = due_schedule_ids(session, now=now, limit=self.batch_size)
                summary["due"] = len(schedule_ids)
                render_client = make_render_client(session=session)

                for schedule_id in schedule_ids:
                    try:
                        run_autopost_schedule(
                            session=session,
                            schedule_id=schedule_id,
                            render_client=render_client,
                            now=now,
                        )
                        summary["succeeded"] += 1
                    except Exception:
                        session.rollback()
                        summary["failed"] += 1
                        self.app.logger.exception("Autopost schedule %s failed", schedule_id)
            finally:
                session.remove()

        return summary
