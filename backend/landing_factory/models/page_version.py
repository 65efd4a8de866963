from landing_factory.extensions import db
from .base import BaseModel


class PageVersion(BaseModel):
    __tablename__ = "page_versions"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id"),
        nullable=False
    )

    version_number = db.Column(db.Integer, nullable=False)
    is_published = db.Column(db.Boolean, nullable=False, default=False)

    # Immutable snapshot
    content_json = db.Column(db.JSON, nullable=False, default=dict)
    seo_json = db.Column(db.JSON, nullable=False, default=dict)
    schema_json = db.Column(db.JSON, nullable=False, default=list)

    page = db.relationship("Page", back_populates="versions")

    __table_args__ = (
        db.UniqueConstraint("page_id", "version_number", name="uq_page_version"),
        db.Index("idx_page_version_page", "page_id"),
    )

    @property
    def blocks(self):
        content = self.content_json or {}
        blocks = content.get("blocks")
        return blocks if isinstance(blocks, list) else []
