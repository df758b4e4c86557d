"""
用户档案相关的 Pydantic 模型。

1. UserBase / UserCreate：创建用户的请求模型
2. UserUpdate：部分更新（所有字段可选）
3. User：完整响应模型
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
import datetime

Gender = Literal['male', 'female', 'other']
ActivityLevel = Literal['sedentary', 'lightly_active', 'moderately_active', 'very_active', 'extremely_active']


class UserBase(BaseModel):
    """用户基础模型"""
    name: str = Field(..., min_length=1, max_length=64)
    email: Optional[str] = Field(None, max_length=128)
    date_of_birth: Optional[datetime.date] = None
    height_cm: Optional[float] = Field(None, gt=0, le=300)
    weight_kg: Optional[float] = Field(None, gt=0, le=500)
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    activity_level_multiplier: Optional[float] = Field(None, ge=1.0, le=2.5)


class UserCreate(UserBase):
    """创建用户时的请求模型"""
    pass


class UserUpdate(BaseModel):
    """更新用户时的请求模型（所有字段都是可选的）"""
    name: Optional[str] = Field(None, min_length=1, max_length=64)
    email: Optional[str] = Field(None, max_length=128)
    date_of_birth: Optional[datetime.date] = None
    height_cm: Optional[float] = Field(None, gt=0, le=300)
    weight_kg: Optional[float] = Field(None, gt=0, le=500)
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    activity_level_multiplier: Optional[float] = Field(None, ge=1.0, le=2.5)


class User(UserBase):
    """用户完整响应模型"""
    id: int
    model_config = ConfigDict(from_attributes=True)
