#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style

from config import DEFAULT_THEME


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "header": "#97a0a9 underline",
        "border": "#4b525a",
        "frame.border": "#4b525a",
        "title": "#ffb347 bold",
        "frame.label": "#ffb347 bold",
        "selected": "bold",
        "task.done": "#6d717a strike",
        "selected.done": "#6d717a strike bold",
        "field": "#e06c75",
        "input": "#d7dfe6",
        "hint": "#6d717a",
        "status.warn": "#e5c07b bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "header": "#a7b0ba underline",
        "border": "#5a6169",
        "frame.border": "#5a6169",
        "title": "#ffb347 bold",
        "frame.label": "#ffb347 bold",
        "selected": "bg:#3d4047 #e8eaec bold",
        "task.done": "#6f757d strike",
        "selected.done": "bg:#3d4047 #6f757d strike bold",
        "field": "#ff6b6b",
        "input": "#e8eaec",
        "hint": "#6f757d",
        "status.warn": "#f0c674 bold",
    },
}


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    return Style.from_dict(get_theme_palette(theme))


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
