"""
Human-readable rendering of flyover windows.
"""

from datetime import datetime, timezone, tzinfo
from typing import Iterable, List, Optional

from src.iss_flyover.schemas import FlyoverWindow

PASS_TIME_FORMAT = "%a %b %d %Y %H:%M:%S %Z"


def format_flyover_window(window: FlyoverWindow, tz: Optional[tzinfo] = timezone.utc) -> str:
    """
    Render one pass, e.g. ``Next pass at Sun Sep 13 2020 12:26:40 UTC for 600 seconds!``.

    Args:
        window: Pass to render.
        tz: Display timezone. None means the machine's local timezone.
    """
    rise = datetime.fromtimestamp(window.risetime, tz=tz)
    if tz is None:
        rise = rise.astimezone()
    return f"Next pass at {rise.strftime(PASS_TIME_FORMAT)} for {window.duration} seconds!"


def format_flyover_windows(
    windows: Iterable[FlyoverWindow],
    tz: Optional[tzinfo] = timezone.utc,
) -> List[str]:
    """Render passes in the order given."""
    return [format_flyover_window(window, tz) for window in windows]
