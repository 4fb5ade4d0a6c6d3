"""Cell formatters for table columns and detail views.

Each formatter takes ``(value, row)`` and returns the display value.
They are pure so table schemas can be checked without rendering.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

NOT_AVAILABLE = "N/A"


def yes_no(value: Any, row: Optional[dict] = None) -> str:
    return "Yes" if value else "No"


def count(value: Any, row: Optional[dict] = None) -> int:
    """Length of a nested list, 0 when missing."""
    return len(value) if value else 0


def _nested(value: Any, key: str) -> Any:
    return value.get(key) if isinstance(value, dict) else None


def status_name(value: Any, row: Optional[dict] = None) -> str:
    """``{"status": "open", ...}`` -> ``open``."""
    return _nested(value, "status") or NOT_AVAILABLE


def priority_name(value: Any, row: Optional[dict] = None) -> str:
    """``{"priority": "high", ...}`` -> ``high``."""
    return _nested(value, "priority") or "None"


def name_of(value: Any, row: Optional[dict] = None) -> str:
    return _nested(value, "name") or NOT_AVAILABLE


def short_id(value: Any, row: Optional[dict] = None) -> str:
    return str(value)[:8] if value is not None else ""


def _from_epoch_ms(value: Any) -> Optional[datetime]:
    if value in (None, ""):
        return None
    try:
        return datetime.fromtimestamp(int(value) / 1000)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def epoch_date(value: Any, row: Optional[dict] = None) -> str:
    """Epoch milliseconds -> local date."""
    moment = _from_epoch_ms(value)
    return moment.strftime("%Y-%m-%d") if moment else NOT_AVAILABLE


def epoch_datetime(value: Any, row: Optional[dict] = None) -> str:
    """Epoch milliseconds -> local date and time."""
    moment = _from_epoch_ms(value)
    return moment.strftime("%Y-%m-%d %H:%M:%S") if moment else NOT_AVAILABLE
