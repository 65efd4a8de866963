from landing_factory.extensions import db
from .base import BaseModel


class ThemePreset(BaseModel):
    __tablename__ = "theme_presets"

    name = db.Column(db.String(200), nullable=False, index=True)
    json = db.Column(db.JSON, nullable=False, default=dict)
    # System presets are seeded and not deleted by convention
    is_system = db.Column(db.Boolean, default=False)


class ComponentStylePreset(BaseModel):
    __tablename__ = "component_style_presets"

    name = db.Column(db.String(200), nullable=False, index=True)
    json = db.Column(db.JSON, nullable=False, default=dict)
    is_system = db.Column(db.Boolean, default=False)


class AnalyticsProfile(BaseModel):
    __tablename__ = "analytics_profiles"

    name = db.Column(db.String(200), nullable=False, index=True)
    scripts_json = db.Column(db.JSON, nullable=False, default=dict)  # {"head": [...], "body_end": [...]}
    verification_json = db.Column(db.JSON, nullable=True)
    is_system = db.Column(db.Boolean, default=False)

    def scripts_for(self, injection_point):
        scripts = (self.scripts_json or {}).get(injection_point)
        if not isinstance(scripts, list):
            return []
        return [s for s in scripts if isinstance(s, str)]
