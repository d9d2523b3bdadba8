"""QSS for the island window and its three views."""
from __future__ import annotations

from island.utils.design_tokens import island_palette
from island.utils.ui_scale import px


def build_island_stylesheet(scale: float) -> str:
    p = island_palette()
    fs10 = px(10, scale)
    fs12 = px(12, scale)
    fs14 = px(14, scale)
    radius = px(18, scale)
    return f"""
            QWidget#islandRoot {{
                background: transparent;
            }}
            QFrame#islandCard {{
                background: {p["surface"]};
                border: 1px solid {p["surface_border"]};
                border-radius: {radius}px;
            }}
            QLabel {{
                color: {p["text_primary"]};
                font-family: {p["font_family"]};
                background: transparent;
            }}
            QLabel#compactTitle {{
                font-size: {fs10}px;
                color: {p["text_muted"]};
            }}
            QLabel#trackTitle, QLabel#notificationTitle {{
                font-size: {fs14}px;
                font-weight: 600;
            }}
            QLabel#trackArtist, QLabel#notificationBody {{
                font-size: {fs12}px;
                color: {p["text_muted"]};
            }}
            QLabel#timeLabel {{
                font-size: {fs10}px;
                color: {p["text_muted"]};
            }}
            QLabel#albumArt {{
                border-radius: {px(10, scale)}px;
                background: qlineargradient(
                    x1:0, y1:0, x2:1, y2:1,
                    stop:0 {p["art_placeholder_top"]},
                    stop:1 {p["art_placeholder_bottom"]}
                );
            }}
            QLabel#notifyBadge {{
                border-radius: {px(14, scale)}px;
                background: {p["notify_accent"]};
                color: {p["text_primary"]};
                font-size: {fs14}px;
            }}
            QProgressBar#trackProgress {{
                border: none;
                border-radius: {px(2, scale)}px;
                background: {p["track_bg"]};
                max-height: {px(4, scale)}px;
            }}
            QProgressBar#trackProgress::chunk {{
                border-radius: {px(2, scale)}px;
                background: {p["accent"]};
            }}
            QWidget#musicView[paused="true"] QProgressBar#trackProgress::chunk {{
                background: {p["accent_paused"]};
            }}
            """
