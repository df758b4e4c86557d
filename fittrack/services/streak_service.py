"""
Streak Service（连续打卡服务）

职责：
- 从数据库读取用户全部训练 / 饮食记录的时间戳
- 交给 core.analytics.streak 计算当前连续天数（两类记录共用同一套算法）

tz 参数原样透传，无法识别时按 UTC 计算，不会导致请求失败。
"""

from typing import Optional
from sqlalchemy.orm import Session
import logging

from ..config import DEFAULT_TIMEZONE, STREAK_MAX_WALK_DAYS
from ..core.analytics.streak import StreakResult, current_streak, timestamps_from
from ..meals import crud as meal_crud
from ..workouts import crud as workout_crud

logger = logging.getLogger(__name__)


class StreakService:
    """连续打卡服务"""

    def __init__(self, default_timezone: str = DEFAULT_TIMEZONE, max_walk_days: int = STREAK_MAX_WALK_DAYS):
        self.default_timezone = default_timezone
        self.max_walk_days = max_walk_days

    def _compute(self, kind: str, user_id: int, rows, attribute: str, tz: Optional[str]) -> StreakResult:
        timestamps = timestamps_from(rows, attribute)
        result = current_streak(timestamps, tz or self.default_timezone, max_walk_days=self.max_walk_days)
        logger.info(
            "[streak][%s] user_id=%s tz=%r events=%d streak=%d last=%s",
            kind, user_id, tz, len(timestamps), result.streak_length, result.most_recent_local_date,
        )
        return result

    def workout_streak(self, db: Session, user_id: int, tz: Optional[str] = None) -> StreakResult:
        rows = workout_crud.get_workout_start_times(db, user_id)
        return self._compute("workout", user_id, rows, "start_time", tz)

    def meal_streak(self, db: Session, user_id: int, tz: Optional[str] = None) -> StreakResult:
        rows = meal_crud.get_meal_times(db, user_id)
        return self._compute("meal", user_id, rows, "meal_time", tz)


# 创建单例实例
streak_service = StreakService()
