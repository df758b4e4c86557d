"""
身体测量记录 ORM 模型，对应 health_metrics 表。

每条记录同时保存用户提交的原始测量值和计算得到的派生指标，
派生指标在创建/更新时由 services.metrics_service 统一重算后写入。
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..db_base import Base, utcnow


class HealthMetric(Base):
    __tablename__ = 'health_metrics'
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    # 原始测量值
    current_weight_kg = Column(Float, nullable=False)
    body_fat_percent = Column(Float, nullable=True)
    goal_weight_kg = Column(Float, nullable=True)
    water_percent = Column(Float, nullable=True)
    waist_cm = Column(Float, nullable=True)
    hip_cm = Column(Float, nullable=True)
    chest_cm = Column(Float, nullable=True)
    thigh_cm = Column(Float, nullable=True)
    arm_cm = Column(Float, nullable=True)
    neck_cm = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)

    # 派生指标
    bmi = Column(Float, nullable=True)
    lean_body_mass_kg = Column(Float, nullable=True)
    skeletal_muscle_mass_kg = Column(Float, nullable=True)
    waist_to_hip_ratio = Column(Float, nullable=True)
    waist_to_height_ratio = Column(Float, nullable=True)
    absi = Column(Float, nullable=True)
    resting_metabolic_rate = Column(Float, nullable=True)
    total_daily_energy_expenditure = Column(Float, nullable=True)
    physical_activity_level = Column(Float, nullable=True)
    maximum_safe_weekly_fat_loss_kg = Column(Float, nullable=True)
    daily_calorie_deficit_target = Column(Float, nullable=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship('User', back_populates='health_metrics')
