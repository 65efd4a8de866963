from landing_factory.extensions import db
from .base import BaseModel


class Site(BaseModel):
    __tablename__ = "sites"

    domain_id = db.Column(db.String(36), db.ForeignKey("domains.id"), unique=True, nullable=False)
    template_id = db.Column(db.String(36), db.ForeignKey("templates.id"), nullable=False)
    theme_preset_id = db.Column(db.String(36), db.ForeignKey("theme_presets.id"), nullable=True)
    component_style_preset_id = db.Column(
        db.String(36),
        db.ForeignKey("component_style_presets.id"),
        nullable=True
    )
    analytics_profile_id = db.Column(db.String(36), db.ForeignKey("analytics_profiles.id"), nullable=True)

    theme = db.Column(db.String(255), nullable=False)
    language = db.Column(db.String(10), nullable=False, default="ru")
    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
    # draft | published

    domain = db.relationship("Domain", back_populates="site")
    template = db.relationship("Template")
    theme_preset = db.relationship("ThemePreset")
    component_style_preset = db.relationship("ComponentStylePreset")
    analytics_profile = db.relationship("AnalyticsProfile")

    pages = db.relationship(
        "Page",
        back_populates="site",
        order_by="Page.created_at",
        cascade="all, delete-orphan"
    )
    links = db.relationship(
        "LinkAssignment",
        back_populates="site",
        order_by="LinkAssignment.created_at",
        cascade="all, delete-orphan"
    )
    builds = db.relationship(
        "Build",
        back_populates="site",
        order_by="Build.build_number",
        cascade="all, delete-orphan"
    )
