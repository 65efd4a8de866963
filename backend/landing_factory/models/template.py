from landing_factory.extensions import db
from .base import BaseModel


class Template(BaseModel):
    __tablename__ = "templates"

    key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    site_type = db.Column(db.String(50), nullable=False, default="corp")
    version = db.Column(db.String(20), nullable=False, default="1.0.0")
    definition_json = db.Column(db.JSON, nullable=False, default=dict)
    default_seo_rules_json = db.Column(db.JSON, nullable=True)
    is_active = db.Column(db.Boolean, default=True, index=True)

    def routes(self):
        """
        Route definitions declared by the template.

        Falls back to a home page plus a contacts page when the definition
        does not list any.
        """
        definition = self.definition_json or {}
        routes = definition.get("routes")
        if not routes:
            return [
                {"route": "/", "pageType": "home", "required": True},
                {"route": "/contacts", "pageType": "contacts", "required": True},
            ]
        return routes
