"""QSS stylesheet and palette for MyFitness."""

from __future__ import annotations

# ── palette: white on black ──────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#000000",
    "surface":      "#121212",
    "text":         "#FFFFFF",
    "text_muted":   "#9E9E9E",
    "button":       "#D0BCFF",
    "button_hover": "#E8DEFF",
    "button_text":  "#000000",
    "border":       "#49454F",
    "focus":        "#D0BCFF",
}

# ── font sizes (px) ──────────────────────────────────────────────────────

TITLE_SIZE = 32
SECTION_SIZE = 24
CLOCK_SIZE = 48
RESULT_SIZE = 24
BUTTON_SIZE = 18
FIELD_SIZE = 16


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: {FIELD_SIZE}px;
    }}

    QLabel#appTitle {{
        font-size: {TITLE_SIZE}px;
    }}

    QLabel#sectionTitle {{
        font-size: {SECTION_SIZE}px;
    }}

    QLabel#clockLabel {{
        font-size: {CLOCK_SIZE}px;
    }}

    QLabel#resultLabel {{
        font-size: {RESULT_SIZE}px;
    }}

    QLineEdit {{
        background-color: {p['surface']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 4px;
        padding: 10px 12px;
    }}

    QLineEdit:focus {{
        border: 2px solid {p['focus']};
    }}

    QPushButton {{
        background-color: {p['button']};
        color: {p['button_text']};
        border: none;
        border-radius: 20px;
        padding: 10px 24px;
        font-size: {BUTTON_SIZE}px;
    }}

    QPushButton:hover {{
        background-color: {p['button_hover']};
    }}

    QRadioButton {{
        color: {p['text']};
        spacing: 8px;
    }}
    """
