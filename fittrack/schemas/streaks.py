"""
连续打卡接口的响应模式（训练、饮食共用）。
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class StreakResponse(BaseModel):
    """当前连续天数"""
    streak: int = Field(..., ge=0, description="以今天或昨天结尾的连续天数")
    last_event_date: Optional[str] = Field(
        None,
        alias="lastEventDate",
        description="最近一次记录的本地日期（YYYY-MM-DD），没有记录时为 null",
    )
    model_config = ConfigDict(populate_by_name=True)
