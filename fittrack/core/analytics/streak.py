"""
连续打卡天数计算（Streak Tracker）

给定一组事件时间戳（训练或饮食记录）和一个时区，计算：
- streak_length：以"今天"或"昨天"结尾的连续日历日数量；
- most_recent_local_date：出现过的最晚本地日期（YYYY-MM-DD）。

同一本地日多条记录只算一次；空时间戳、无法解析或越界的时间戳直接忽略；
未来日期不会开启或延长连续天数。时区无效时静默回退到 UTC，从不抛出异常。
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Any, Dict, Iterable, List, Optional, Set
import logging

from .time_utils import day_key, local_today, resolve_timezone, to_aware_utc

logger = logging.getLogger(__name__)

# 回溯上限，仅用于限制异常数据下的计算量
MAX_STREAK_WALK_DAYS = 365


@dataclass(frozen=True)
class StreakResult:
    streak_length: int = 0
    most_recent_local_date: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Response shape returned to the client."""
        return {
            "streak": self.streak_length,
            "lastEventDate": self.most_recent_local_date,
        }


def collect_day_keys(timestamps: Optional[Iterable[Any]], tz: tzinfo) -> Set[str]:
    keys: Set[str] = set()
    for ts in timestamps or []:
        instant = to_aware_utc(ts)
        if instant is None:
            continue
        try:
            keys.add(day_key(instant, tz))
        except (OverflowError, ValueError):
            continue
    return keys


def current_streak(
    timestamps: Optional[Iterable[Any]],
    tz: Optional[str] = None,
    now: Optional[datetime] = None,
    max_walk_days: int = MAX_STREAK_WALK_DAYS,
) -> StreakResult:
    """Compute the current consecutive-day streak.

    Args:
        timestamps: event timestamps in any order (datetime, ISO string or
            epoch seconds); None entries are skipped.
        tz: IANA timezone name; absent or unknown names mean UTC.
        now: the reference instant, defaults to the real current time.
        max_walk_days: cap on the backward walk.

    Returns:
        StreakResult
    """
    zone, zone_name = resolve_timezone(tz)
    keys = collect_day_keys(timestamps, zone)
    if not keys:
        return StreakResult()

    most_recent = max(keys)
    today = local_today(zone, now)

    if today.isoformat() in keys:
        days_ago = 0
    elif (today - timedelta(days=1)).isoformat() in keys:
        days_ago = 1
    else:
        return StreakResult(0, most_recent)

    streak = 1
    for _ in range(max_walk_days):
        previous = (today - timedelta(days=days_ago + 1)).isoformat()
        if previous not in keys:
            break
        streak += 1
        days_ago += 1

    logger.debug(
        "[streak][computed] tz=%s days=%d streak=%d last=%s",
        zone_name, len(keys), streak, most_recent,
    )
    return StreakResult(streak, most_recent)


def timestamps_from(rows: Iterable[Any], attribute: str) -> List[Any]:
    """Pull one timestamp attribute out of ORM rows or dicts."""
    out = []
    for row in rows or []:
        if isinstance(row, dict):
            out.append(row.get(attribute))
        else:
            out.append(getattr(row, attribute, None))
    return out
