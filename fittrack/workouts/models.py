"""
训练记录 ORM 模型，对应 workouts 表。start_time / end_time 按 naive UTC 存储。
"""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..db_base import Base, utcnow


class Workout(Base):
    __tablename__ = 'workouts'
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime, nullable=True, index=True)
    end_time = Column(DateTime, nullable=True)
    workout_type = Column(String(16), nullable=True)  # strength / cardio / flexibility / sports / other
    total_calories_burned = Column(Float, default=0)
    total_duration_min = Column(Integer, default=0)
    is_completed = Column(Boolean, default=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship('User', back_populates='workouts')

    @property
    def status(self) -> str:
        if self.is_completed:
            return 'completed'
        if self.start_time and not self.end_time:
            return 'in_progress'
        return 'scheduled'
