from landing_factory.extensions import db
from .base import BaseModel


class Build(BaseModel):
    __tablename__ = "builds"

    site_id = db.Column(db.String(36), db.ForeignKey("sites.id"), nullable=False, index=True)
    build_number = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="queued")
    # queued | ready | published | failed

    artifact_path = db.Column(db.String(1024), nullable=False, default="")
    sitemap_path = db.Column(db.String(1024), nullable=True)
    robots_path = db.Column(db.String(1024), nullable=True)
    logs = db.Column(db.Text, nullable=True)

    finished_at = db.Column(db.DateTime, nullable=True)
    published_at = db.Column(db.DateTime, nullable=True)

    site = db.relationship("Site", back_populates="builds")

    __table_args__ = (
        db.UniqueConstraint("site_id", "build_number", name="uq_site_build_number"),
    )
