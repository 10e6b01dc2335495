"""QSS stylesheet and state colors for BrewGuide."""

from __future__ import annotations

from ..timer.engine import BrewState

# ── state colors (clock text) ────────────────────────────────────────────

STATE_COLORS: dict[BrewState, str] = {
    BrewState.IDLE:      "#7C4A1E",   # roasted brown
    BrewState.RUNNING:   "#B45309",   # amber
    BrewState.PAUSED:    "#A8A29E",   # stone gray
    BrewState.COMPLETED: "#15803D",   # green
}

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#FFF7ED",
    "surface":      "#FFFFFF",
    "surface_dim":  "#F5F5F4",
    "accent":       "#F59E0B",
    "accent_dark":  "#B45309",
    "accent_soft":  "#FEF3C7",
    "text":         "#451A03",
    "text_muted":   "#78716C",
    "text_pending": "#A8A29E",
    "start":        "#22C55E",
    "pause":        "#EAB308",
    "reset":        "#6B7280",
    "success":      "#16A34A",
    "success_soft": "#DCFCE7",
    "border":       "#E7E5E4",
}


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("SF Pro", ".AppleSystemUIFont", "Inter", "Noto Sans"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    font = resolve_font_family()
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QFrame#card {{
        background-color: {p['surface']};
        border-radius: 16px;
    }}

    /* ── clock ──────────────────────────────────── */
    QLabel#clockLabel {{
        background: transparent;
        font-family: "Menlo", "DejaVu Sans Mono", monospace;
        font-size: 56px;
        font-weight: 700;
    }}

    QLabel#statusLabel {{
        background: transparent;
        color: {p['text_muted']};
        font-size: 12px;
        letter-spacing: 2px;
    }}

    /* ── buttons ────────────────────────────────── */
    QPushButton {{
        background-color: {p['surface_dim']};
        color: {p['text']};
        border: none;
        border-radius: 12px;
        padding: 12px 24px;
        font-size: 15px;
        font-weight: 600;
    }}

    QPushButton#startButton {{
        background-color: {p['start']};
        color: white;
    }}

    QPushButton#pauseButton {{
        background-color: {p['pause']};
        color: white;
    }}

    QPushButton#resetButton {{
        background-color: {p['reset']};
        color: white;
    }}

    QPushButton#presetButton {{
        padding: 12px 16px;
    }}

    QPushButton#presetButton:checked {{
        background-color: {p['accent']};
        color: white;
    }}

    /* ── step cards ─────────────────────────────── */
    QFrame#stepCard {{
        background-color: {p['surface_dim']};
        border-radius: 12px;
        border: 2px solid transparent;
    }}

    QFrame#stepCard[active="true"] {{
        background-color: {p['accent_soft']};
        border: 2px solid {p['accent']};
    }}

    QLabel#stepNumber {{
        background-color: {p['border']};
        color: {p['text_muted']};
        border-radius: 14px;
        font-weight: 700;
    }}

    QLabel#stepNumber[active="true"] {{
        background-color: {p['accent']};
        color: white;
    }}

    QLabel#actionChip {{
        background-color: {p['border']};
        border-radius: 8px;
        padding: 2px 8px;
        font-size: 11px;
    }}

    QLabel#stepDescription {{
        background: transparent;
        color: {p['text_muted']};
        font-size: 13px;
    }}

    QLabel#stepDescription[pending="true"] {{
        color: {p['text_pending']};
    }}

    QLabel#doneBadge {{
        background-color: {p['success_soft']};
        color: {p['success']};
        border-radius: 10px;
        padding: 4px 12px;
        font-size: 12px;
    }}

    QFrame#completeBanner {{
        background-color: {p['success']};
        border-radius: 16px;
    }}

    QFrame#completeBanner QLabel {{
        background: transparent;
        color: white;
    }}
    """
