# flow/colors.py
INDUSTRY_COLORS = {
    "Construction": "#CE93D8",
    "Manufacturing": "#81C784",
    "Oilfield Services": "#4DD0E1",
    "Staffing": "#FFB74D",
    "Transportation/Logistics": "#64B5F6",
    "Wholesale/Distribution": "#EF5350",
}

UNIFIED_COLOR = "#94a3b8"
NOT_INTERESTED_COLOR = "#78909C"
APPROVED_COLOR = "#4CAF50"
REJECTED_COLOR = "#F44336"

LINK_OPACITY = 0.55


def link_color(hex_color: str, alpha: float = LINK_OPACITY) -> str:
    """'#CE93D8' -> 'rgba(206, 147, 216, 0.55)'"""
    h = hex_color.lstrip("#")
    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


NOT_INTERESTED_LINK_COLOR = "rgba(120, 144, 156, 0.4)"
REJECTED_LINK_COLOR = link_color(REJECTED_COLOR)
