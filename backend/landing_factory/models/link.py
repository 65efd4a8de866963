from landing_factory.extensions import db
from .base import BaseModel

LINK_KINDS = ("anchor", "url_display", "button", "mention")


class LinkLibrary(BaseModel):
    __tablename__ = "link_library"

    name = db.Column(db.String(200), nullable=False)
    target_url = db.Column(db.String(2048), nullable=False)
    link_kind = db.Column(db.String(20), nullable=False, default="url_display")


class LinkAssignment(BaseModel):
    __tablename__ = "link_assignments"

    site_id = db.Column(db.String(36), db.ForeignKey("sites.id"), nullable=False, index=True)
    link_library_id = db.Column(db.String(36), db.ForeignKey("link_library.id"), nullable=False)
    placement = db.Column(db.String(100), nullable=False, index=True)  # HERO_CTA, FOOTER, SIDEBAR, RESOURCES
    is_enabled = db.Column(db.Boolean, nullable=False, default=True)
    display_text_override = db.Column(db.String(500), nullable=True)

    site = db.relationship("Site", back_populates="links")
    link_library = db.relationship("LinkLibrary")
