"""
训练记录相关的 Pydantic 模型。
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
import datetime

WorkoutType = Literal['strength', 'cardio', 'flexibility', 'sports', 'other']


class WorkoutBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = None
    start_time: datetime.datetime = Field(..., description="开始时间，不带时区时按 UTC 处理")
    end_time: Optional[datetime.datetime] = None
    workout_type: Optional[WorkoutType] = None
    total_calories_burned: float = Field(0, ge=0)
    total_duration_min: int = Field(0, ge=0)
    is_completed: bool = False


class WorkoutCreate(WorkoutBase):
    pass


class WorkoutUpdate(BaseModel):
    """更新训练记录（所有字段都是可选的）"""
    name: Optional[str] = Field(None, min_length=1, max_length=128)
    description: Optional[str] = None
    start_time: Optional[datetime.datetime] = None
    end_time: Optional[datetime.datetime] = None
    workout_type: Optional[WorkoutType] = None
    total_calories_burned: Optional[float] = Field(None, ge=0)
    total_duration_min: Optional[int] = Field(None, ge=0)
    is_completed: Optional[bool] = None


class Workout(WorkoutBase):
    id: int
    user_id: int
    start_time: Optional[datetime.datetime] = None
    status: str
    model_config = ConfigDict(from_attributes=True)
