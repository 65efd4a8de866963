import json
import os

from sqlalchemy import select

from landing_factory.models.presets import AnalyticsProfile, ComponentStylePreset, ThemePreset
from landing_factory.models.template import Template
from landing_factory.utils.transaction import transactional

SEED_DIR = os.path.join(os.path.dirname(__file__), "seed_data")
DEFAULT_TEMPLATE_FILE = "corp-premium-v1.json"

SYSTEM_THEME_NAME = "Premium Neutral"
SYSTEM_THEME = {
    "name": SYSTEM_THEME_NAME,
    "mode": "light",
    "palette": {"primary": "slate", "accent": "indigo", "success": "emerald", "warning": "amber", "danger": "rose"},
    "colors": {"bg": "#ffffff", "surface": "#f8fafc", "text": "#0f172a", "muted_text": "#475569", "border": "#e2e8f0"},
    "radius": {"card": "xl", "button": "lg", "input": "lg"},
    "shadow": {"card": "soft", "button": "soft"},
    "typography": {"font_family": "inter", "heading_scale": "modern", "base_size": "md", "line_height": "comfortable"},
    "buttons": {"primary_style": "solid", "secondary_style": "outline", "cta_emphasis": "high"},
    "layout": {"container_width": "lg", "section_spacing": "comfortable"},
    "media_style": {"image_radius": "xl", "use_gradients": True, "icon_set": "lucide"},
}

SYSTEM_PRESET_NAME = "Default Component Style"
SYSTEM_PRESET = {
    "hero": {"layout": "split", "title_weight": "bold", "cta_style": "solid", "background_style": "soft_gradient"},
    "cards": {"radius": "xl", "shadow": "soft", "hover_effect": "lift"},
    "faq": {"style": "accordion", "icon": "plus"},
    "testimonials": {"layout": "grid", "avatar_style": "circle"},
}

SYSTEM_ANALYTICS_NAME = "Default Analytics (empty)"


def load_template_definition(filename=DEFAULT_TEMPLATE_FILE):
    with open(os.path.join(SEED_DIR, filename), encoding="utf-8") as fh:
        return json.load(fh)


def _system_row_exists(session, model, name):
    return session.execute(
        select(model.id).where(model.name == name, model.is_system.is_(True))
    ).first() is not None


def seed_defaults(session):
    """
    Insert the bundled template and system presets. Safe to run repeatedly.

    Returns the names of the rows created.
    """
    created = []
    definition = load_template_definition()

    with transactional(session):
        exists = session.execute(
            select(Template.id).where(Template.key == definition["key"])
        ).first()
        if not exists:
            template = Template()
            template.key = definition["key"]
            template.name = definition["name"]
            template.site_type = definition.get("siteType", "corp")
            template.version = definition.get("version", "1.0.0")
            template.definition_json = definition
            template.default_seo_rules_json = definition.get("seoRules")
            template.is_active = True
            session.add(template)
            created.append(template.key)

        if not _system_row_exists(session, ThemePreset, SYSTEM_THEME_NAME):
            session.add(ThemePreset(name=SYSTEM_THEME_NAME, json=SYSTEM_THEME, is_system=True))
            created.append(SYSTEM_THEME_NAME)

        if not _system_row_exists(session, ComponentStylePreset, SYSTEM_PRESET_NAME):
            session.add(ComponentStylePreset(name=SYSTEM_PRESET_NAME, json=SYSTEM_PRESET, is_system=True))
            created.append(SYSTEM_PRESET_NAME)

        if not _system_row_exists(session, AnalyticsProfile, SYSTEM_ANALYTICS_NAME):
            session.add(AnalyticsProfile(
                name=SYSTEM_ANALYTICS_NAME,
                scripts_json={"head": [], "body_end": []},
                verification_json={},
                is_system=True,
            ))
            created.append(SYSTEM_ANALYTICS_NAME)

    return created
