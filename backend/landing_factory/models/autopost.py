from landing_factory.extensions import db
from .base import BaseModel

SECTIONS = ("blog", "news")


class AutopostSchedule(BaseModel):
    __tablename__ = "autopost_schedules"

    site_id = db.Column(db.String(36), db.ForeignKey("sites.id"), nullable=False, index=True)
    section = db.Column(db.String(20), nullable=False)  # blog | news
    cadence_type = db.Column(db.String(20), nullable=False)  # every_n_days | weekly | cron
    cadence_json = db.Column(db.JSON, nullable=False, default=dict)
    require_approval = db.Column(db.Boolean, nullable=False, default=False)
    is_enabled = db.Column(db.Boolean, nullable=False, default=True)

    next_run_at = db.Column(db.DateTime, nullable=True, index=True)
    last_run_at = db.Column(db.DateTime, nullable=True)

    site = db.relationship("Site")
    runs = db.relationship(
        "AutopostRun",
        back_populates="schedule",
        order_by="desc(AutopostRun.created_at)",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        db.Index("ix_autopost_due", "is_enabled", "next_run_at"),
    )


class AutopostRun(BaseModel):
    __tablename__ = "autopost_runs"

    schedule_id = db.Column(db.String(36), db.ForeignKey("autopost_schedules.id"), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="running")
    # running | success | failed

    result_json = db.Column(db.JSON, nullable=True)
    logs = db.Column(db.Text, nullable=True)
    finished_at = db.Column(db.DateTime, nullable=True)
    created_page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=True)

    schedule = db.relationship("AutopostSchedule", back_populates="runs")
