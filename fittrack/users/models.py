"""
用户档案 ORM 模型，对应 users 表。

身体成分计算所需的档案字段（身高、出生日期、性别、活动等级/系数）都允许为空，
缺失时由 core.analytics.profile 统一补默认值。
"""

from sqlalchemy import Column, Date, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from ..db_base import Base, utcnow


class User(Base):
    """
    用户表模型
    - name: 显示名称，必填
    - email: 邮箱（唯一，可选）
    - date_of_birth: 出生日期，用于推算年龄
    - height_cm / weight_kg: 身高（cm）、体重（kg）
    - gender: male / female / other
    - activity_level: sedentary / lightly_active / moderately_active / very_active / extremely_active
    - activity_level_multiplier: 活动系数（1.2 ~ 1.9），优先于 activity_level
    """
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(64), nullable=False)
    email = Column(String(128), unique=True, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    height_cm = Column(Float, nullable=True)
    weight_kg = Column(Float, nullable=True)
    gender = Column(String(16), nullable=True)
    activity_level = Column(String(32), nullable=True)
    activity_level_multiplier = Column(Float, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    health_metrics = relationship('HealthMetric', back_populates='user', cascade='all, delete-orphan')
    workouts = relationship('Workout', back_populates='user', cascade='all, delete-orphan')
    meals = relationship('Meal', back_populates='user', cascade='all, delete-orphan')
