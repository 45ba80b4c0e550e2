"""
Marquee Theme - Centralized color palette.

Color Philosophy:
- Amber (#F5B942) marks titles and the active breadcrumb, like a theatre marquee
- Slate blues carry secondary text and navigation chrome
- Everything sits on a near-black gradient so poster-style text stays readable
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
AMBER_PRIMARY = "#F5B942"      # Titles, active crumb, progress ring
SLATE_PRIMARY = "#7C9CBF"      # Links, icons
RED_PRIMARY = "#FF6B6B"        # Errors

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_BRIGHT = "#E6E9EE"
TEXT_MEDIUM = "#A3B1C2"
TEXT_MUTED = "#6F7F91"

# =============================================================================
# BACKGROUND / BORDER COLORS
# =============================================================================
BG_BAR = "#0b0e18"             # Breadcrumb bar
BG_GRADIENT_START = "#141828"
BG_GRADIENT_END = "#06080f"
BG_CARD = "rgba(255,255,255,0.03)"
BORDER_DIVIDER = "rgba(255,255,255,0.12)"

# =============================================================================
# SEMANTIC UI TOKENS (Use these in shell.py - change colors here only)
# =============================================================================
TEXT_TITLE = AMBER_PRIMARY
TEXT_SECTION_HEADER = AMBER_PRIMARY
TEXT_LABEL = TEXT_MUTED
TEXT_VALUE = TEXT_BRIGHT
TEXT_PLACEHOLDER = TEXT_MUTED
CRUMB_ACTIVE = AMBER_PRIMARY
CRUMB_INACTIVE = SLATE_PRIMARY

LOG_INFO = SLATE_PRIMARY
LOG_SUCCESS = "#6BCB9A"
LOG_WARNING = AMBER_PRIMARY
LOG_ERROR = RED_PRIMARY


def get_log_color(level: str) -> str:
    """Get the color for a log level."""
    colors = {
        "INFO": LOG_INFO,
        "SUCCESS": LOG_SUCCESS,
        "WARNING": LOG_WARNING,
        "ERROR": LOG_ERROR,
    }
    return colors.get(level.upper(), TEXT_MUTED)
