"""Theme colors and color utilities for the UI."""


class AppColors:
    """Light palette of the chore board."""

    BG_TOP = "#f5f9ff"
    BG_BOTTOM = "#e3f2fd"

    PRIMARY = "#2196F3"
    SUCCESS = "#4CAF50"
    DANGER = "#f44336"
    STREAK = "#FF9800"

    CARD_BG = "#ffffff"
    CARD_SHADOW = "rgba(0, 0, 0, 0.1)"

    TEXT_PRIMARY = "#212121"
    TEXT_SECONDARY = "#666666"

    PROGRESS_TRACK = "#e0e0e0"
    INPUT_BORDER = "#e0e0e0"

    CONFETTI = ("#f44336", "#2196F3", "#4CAF50", "#FF9800", "#9C27B0", "#FFEB3B")


# Countdown turns to the danger color at or below this many seconds.
COUNTDOWN_WARNING_SECONDS = 5


def _rgb(value: str) -> tuple[int, int, int]:
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix two #RRGGBB colors; t=0 gives a, t=1 gives b. Bad input returns a unchanged."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        start = _rgb(a)
        end = _rgb(b)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    mixed = (int(s + (e - s) * t) for s, e in zip(start, end))
    return "#" + "".join(f"{channel:02X}" for channel in mixed)


def tint(color: str, amount: float = 0.9) -> str:
    """Pale background version of *color* (blended toward white)."""
    return blend_hex(color, "#FFFFFF", amount)


def countdown_color(remaining_seconds: int) -> str:
    if remaining_seconds <= COUNTDOWN_WARNING_SECONDS:
        return AppColors.DANGER
    return AppColors.PRIMARY
