"""
Theme compiler: design tokens -> CSS.

Every field has a default, so any input (``None``, wrong types, partial
documents) compiles to a complete stylesheet.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

RADIUS_TOKENS = {
    "sm": "8px",
    "md": "12px",
    "lg": "14px",
    "xl": "16px",
    "2xl": "20px",
}

CSS_LENGTH_RE = re.compile(r"[0-9]+(px|rem|em|%)")

DEFAULT_CARD_RADIUS = "16px"
DEFAULT_BUTTON_RADIUS = "12px"
GRADIENT_BACKGROUND = "linear-gradient(90deg, var(--text), var(--muted))"
SOLID_BACKGROUND = "var(--text)"


def _section(doc: Any, key: str) -> Dict[str, Any]:
    if not isinstance(doc, dict):
        return {}
    value = doc.get(key)
    return value if isinstance(value, dict) else {}


def _string(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value else default


def resolve_radius(value: Any, fallback: str) -> str:
    """Token (``sm``..``2xl``) -> px, literal CSS length passes through, else fallback."""
    if not isinstance(value, str) or not value:
        return fallback
    if CSS_LENGTH_RE.fullmatch(value):
        return value
    return RADIUS_TOKENS.get(value, fallback)


@dataclass(frozen=True)
class ThemeTokens:
    bg: str = "#ffffff"
    surface: str = "#f8fafc"
    text: str = "#0f172a"
    muted: str = "#475569"
    border: str = "#e2e8f0"
    card_radius: str = DEFAULT_CARD_RADIUS
    button_radius: str = DEFAULT_BUTTON_RADIUS
    primary_style: str = "solid"

    @classmethod
    def from_json(cls, theme_json: Any, component_preset_json: Any = None) -> "ThemeTokens":
        colors = _section(theme_json, "colors")
        radius = _section(theme_json, "radius")
        buttons = _section(theme_json, "buttons")
        hero = _section(component_preset_json, "hero")

        # Component preset overrides the theme's default button style
        primary_style = hero.get("cta_style")
        if primary_style is None:
            primary_style = buttons.get("primary_style")

        return cls(
            bg=_string(colors.get("bg"), cls.bg),
            surface=_string(colors.get("surface"), cls.surface),
            text=_string(colors.get("text"), cls.text),
            muted=_string(colors.get("muted_text"), cls.muted),
            border=_string(colors.get("border"), cls.border),
            card_radius=resolve_radius(radius.get("card"), DEFAULT_CARD_RADIUS),
            button_radius=resolve_radius(radius.get("button"), DEFAULT_BUTTON_RADIUS),
            primary_style=_string(primary_style, "solid"),
        )

    @property
    def primary_background(self) -> str:
        return GRADIENT_BACKGROUND if self.primary_style == "gradient" else SOLID_BACKGROUND


def compile_theme_css(theme_json: Optional[Dict[str, Any]], component_preset_json: Optional[Dict[str, Any]] = None) -> str:
    t = ThemeTokens.from_json(theme_json, component_preset_json)
    return (
        f":root{{--bg:{t.bg};--surface:{t.surface};--text:{t.text};--muted:{t.muted};"
        f"--border:{t.border};--r-card:{t.card_radius};--r-btn:{t.button_radius};}}\n"
        'body{margin:0;font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;'
        " background:var(--bg); color:var(--text);}\n"
        ".container{max-width:980px;margin:0 auto;padding:24px;}\n"
        ".card{background:var(--surface);border:1px solid var(--border);border-radius:var(--r-card);padding:20px;}\n"
        "a{color:inherit}\n"
        ".btn{display:inline-block;padding:12px 16px;border-radius:var(--r-btn);"
        "border:1px solid var(--border);text-decoration:none;margin-right:10px}\n"
        f".btn.primary{{background:{t.primary_background};color:var(--bg);border-color:var(--text)}}\n"
        ".small{color:var(--muted);font-size:14px}"
    )
