"""Shared utilities: palette, UI scale, Fluent helpers."""
from .design_tokens import island_palette
from .fluent_compat import apply_icon_button, fluent_icon, init_fluent_theme
from .ui_scale import current_app_scale, px, screen_scale

__all__ = [
    "apply_icon_button",
    "current_app_scale",
    "fluent_icon",
    "init_fluent_theme",
    "island_palette",
    "px",
    "screen_scale",
]
