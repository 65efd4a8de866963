from landing_factory.extensions import db
from .base import BaseModel


class Page(BaseModel):
    __tablename__ = "pages"

    site_id = db.Column(db.String(36), db.ForeignKey("sites.id"), nullable=False, index=True)
    route = db.Column(db.String(500), nullable=False)
    page_type = db.Column(db.String(50), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
    # draft | published
    slug = db.Column(db.String(200), nullable=True)

    __table_args__ = (
        db.UniqueConstraint("site_id", "route", name="uq_page_route_per_site"),
    )

    site = db.relationship("Site", back_populates="pages")

    # Append-only, ordered by version number
    versions = db.relationship(
        "PageVersion",
        back_populates="page",
        order_by="PageVersion.version_number",
        cascade="all, delete-orphan"
    )
