#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from interface.tui_themes import (
    THEMES,
    DEFAULT_THEME,
    get_theme_palette,
    build_style,
)


class TestThemes:
    """Tests for THEMES constant."""

    def test_themes_has_default_theme(self):
        assert DEFAULT_THEME in THEMES

    def test_themes_has_expected_themes(self):
        assert "dark-olive" in THEMES
        assert "dark-contrast" in THEMES

    def test_theme_structure(self):
        """Every class used by the renderer is styled in every theme."""
        required_keys = {
            "",
            "text",
            "header",
            "border",
            "frame.border",
            "frame.label",
            "selected",
            "task.done",
            "selected.done",
            "field",
            "input",
            "hint",
            "status.warn",
        }
        for theme_name, theme_dict in THEMES.items():
            missing = required_keys - set(theme_dict.keys())
            assert not missing, f"Theme {theme_name} missing keys: {missing}"

    def test_completed_rows_are_struck_through(self):
        for theme_dict in THEMES.values():
            assert "strike" in theme_dict["task.done"]
            assert "strike" in theme_dict["selected.done"]


class TestGetThemePalette:
    def test_get_theme_palette_existing_theme(self):
        palette = get_theme_palette("dark-olive")
        assert palette == THEMES["dark-olive"]

    def test_get_theme_palette_returns_copy(self):
        palette1 = get_theme_palette("dark-olive")
        palette2 = get_theme_palette("dark-olive")
        assert palette1 == palette2
        assert palette1 is not palette2
        assert palette1 is not THEMES["dark-olive"]

    def test_get_theme_palette_unknown_theme_falls_back(self):
        default_palette = get_theme_palette(DEFAULT_THEME)
        unknown_palette = get_theme_palette("non-existent-theme")
        assert unknown_palette == default_palette


class TestBuildStyle:
    def test_build_style_all_themes(self):
        for theme_name in THEMES.keys():
            style = build_style(theme_name)
            assert style is not None
            assert len(style.style_rules) == len(THEMES[theme_name])

    def test_build_style_unknown_theme_falls_back(self):
        assert len(build_style("non-existent-theme").style_rules) == len(THEMES[DEFAULT_THEME])
