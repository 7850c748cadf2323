"""Theme colors for the mixer window."""


class ThemeColors:
    """Light theme palette."""

    BG_TOP = "#ffffff"
    BG_BOTTOM = "#f2f2f7"

    ACCENT_START = "#af52de"
    ACCENT_END = "#007aff"

    CARD_BG = "#ffffff"
    CARD_BORDER = "rgba(142, 142, 147, 0.2)"

    HEX_PILL_BG = "rgba(255, 255, 255, 0.55)"

    TEXT_PRIMARY = "#1c1c1e"
    TEXT_ON_ACCENT = "#ffffff"

    NOTICE_BG = "rgba(0, 0, 0, 0.7)"
    NOTICE_TEXT = "#ffffff"
