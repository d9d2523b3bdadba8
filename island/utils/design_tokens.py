from __future__ import annotations


def island_palette() -> dict[str, str]:
    """
    Near-black pill with soft white text, tuned for legibility over any wallpaper.
    """
    return {
        "surface": "rgba(12, 12, 12, 0.96)",
        "surface_border": "rgba(255, 255, 255, 0.12)",
        "text_primary": "#FFFFFF",
        "text_muted": "#A1A1A6",
        "track_bg": "rgba(255, 255, 255, 0.18)",
        "accent": "#FFFFFF",
        "accent_paused": "#FF9F0A",
        "notify_accent": "#0A84FF",
        "art_placeholder_top": "#A18CD1",
        "art_placeholder_bottom": "#FBC2EB",
        "font_family": '"SF Pro Display", "Segoe UI", "Helvetica Neue", sans-serif',
    }
