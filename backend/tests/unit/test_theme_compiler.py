"""Unit tests for the theme compiler."""

import pytest

from landing_factory.rendering.theme import (
    GRADIENT_BACKGROUND,
    ThemeTokens,
    compile_theme_css,
    resolve_radius,
)


@pytest.mark.unit
class TestResolveRadius:
    """Radius token table, literal lengths and fallback."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("sm", "8px"), ("md", "12px"), ("lg", "14px"), ("xl", "16px"), ("2xl", "20px")],
    )
    def test_token_table(self, token, expected) -> None:
        """Named tokens map to fixed pixel values."""
        assert resolve_radius(token, "1px") == expected

    @pytest.mark.parametrize("literal", ["10px", "2rem", "2em", "50%"])
    def test_literal_length_passes_through(self, literal) -> None:
        """CSS lengths are used verbatim."""
        assert resolve_radius(literal, "1px") == literal

    @pytest.mark.parametrize("value", ["huge", "", None, 12, "10 px"])
    def test_unknown_values_use_fallback(self, value) -> None:
        """Anything else falls back."""
        assert resolve_radius(value, "16px") == "16px"

    @pytest.mark.parametrize("value", ["12px\n", "\u0661\u0662px", "\uff11\uff12px", " 12px", "sm\n"])
    def test_trailing_newline_and_non_ascii_digits_use_fallback(self, value) -> None:
        """Only ASCII digits and an exact match count as a CSS length."""
        assert resolve_radius(value, "16px") == "16px"


@pytest.mark.unit
class TestCompileThemeCss:
    """Whole-stylesheet compilation."""

    def test_defaults_for_missing_theme(self) -> None:
        """No theme and no preset still yields a complete stylesheet."""
        css = compile_theme_css(None, None)

        assert ":root{--bg:#ffffff;--surface:#f8fafc;--text:#0f172a;--muted:#475569;" in css
        assert "--r-card:16px;--r-btn:12px;" in css
        assert ".btn.primary{background:var(--text);" in css

    def test_theme_colors_and_radius(self) -> None:
        """Colors and radius tokens come from the theme document."""
        theme = {
            "colors": {"bg": "#000000", "muted_text": "#999999"},
            "radius": {"card": "2xl", "button": "sm"},
        }

        css = compile_theme_css(theme)

        assert "--bg:#000000;" in css
        assert "--muted:#999999;" in css
        assert "--r-card:20px;--r-btn:8px;" in css

    def test_gradient_primary_button(self) -> None:
        """A gradient primary style switches the primary button background."""
        css = compile_theme_css({"buttons": {"primary_style": "gradient"}})

        assert f".btn.primary{{background:{GRADIENT_BACKGROUND};" in css

    def test_component_preset_overrides_button_style(self) -> None:
        """The hero CTA style of the component preset wins over the theme."""
        tokens = ThemeTokens.from_json(
            {"buttons": {"primary_style": "gradient"}},
            {"hero": {"cta_style": "solid"}},
        )

        assert tokens.primary_style == "solid"
        assert tokens.primary_background == "var(--text)"

    def test_wrong_types_are_ignored(self) -> None:
        """Malformed sections do not break compilation."""
        css = compile_theme_css({"colors": "red", "radius": ["xl"]}, "not-a-dict")

        assert "--bg:#ffffff;" in css
        assert "--r-card:16px;" in css

    def test_compilation_is_deterministic(self) -> None:
        """Same input, same bytes."""
        theme = {"radius": {"card": "lg"}, "colors": {"text": "#111111"}}

        assert compile_theme_css(theme) == compile_theme_css(theme)
