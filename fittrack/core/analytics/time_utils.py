"""
日期与时区工具（Date / Timezone Utilities）

说明：
- 所有"日"的概念都以用户本地日历日为准，统一表示为 `YYYY-MM-DD` 字符串（day-key）；
- 时区标识采用 IANA 名称（如 America/Los_Angeles），无法识别时静默回退到 UTC；
- 数据库中保存的 naive datetime 一律视为 UTC。
"""

from typing import Any, Optional, Tuple
from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

logger = logging.getLogger(__name__)

UTC_NAME = "UTC"


def resolve_timezone(name: Optional[str]) -> Tuple[tzinfo, str]:
    """Resolve an IANA timezone name, falling back to UTC.

    The zone is accepted only if the current instant can actually be
    formatted in it. Never raises.
    """
    if not name or not str(name).strip():
        return timezone.utc, UTC_NAME
    key = str(name).strip()
    try:
        tz = ZoneInfo(key)
        datetime.now(tz).date().isoformat()
        return tz, key
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
        logger.debug("[tz][fallback] tz=%r err=%s", key, e)
        return timezone.utc, UTC_NAME


def to_aware_utc(value: Any) -> Optional[datetime]:
    """Interpret a timestamp as an aware UTC datetime.

    Accepts datetime (naive = UTC), ISO-8601 strings and epoch seconds.
    Returns None for anything that cannot be interpreted or is out of range.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc)
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value, tz=timezone.utc)
        if isinstance(value, str):
            s = value.strip()
            if s.endswith(("Z", "z")):
                s = s[:-1] + "+00:00"
            return to_aware_utc(datetime.fromisoformat(s))
    except (ValueError, OverflowError, OSError):
        return None
    return None


def day_key(instant: datetime, tz: tzinfo) -> str:
    """Local calendar day of `instant` in `tz` as YYYY-MM-DD."""
    return instant.astimezone(tz).date().isoformat()


def local_today(tz: tzinfo, now: Optional[datetime] = None) -> date:
    current = to_aware_utc(now) if now is not None else datetime.now(timezone.utc)
    return current.astimezone(tz).date()


def to_naive_utc(value: Any) -> Optional[datetime]:
    """Storage form used by the DateTime columns: naive, in UTC."""
    instant = to_aware_utc(value)
    return instant.replace(tzinfo=None) if instant is not None else None
