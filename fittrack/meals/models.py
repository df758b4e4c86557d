"""
饮食记录 ORM 模型，对应 meals 表。meal_time 按 naive UTC 存储。
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..db_base import Base, utcnow


class Meal(Base):
    __tablename__ = 'meals'
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    meal_time = Column(DateTime, nullable=True, index=True)
    meal_type = Column(String(16), nullable=True)  # breakfast / lunch / dinner / snack / other
    total_calories = Column(Float, default=0)
    total_protein_g = Column(Float, default=0)
    total_carbs_g = Column(Float, default=0)
    total_fat_g = Column(Float, default=0)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship('User', back_populates='meals')

    def _macro_percentage(self, grams, kcal_per_gram) -> float:
        if not self.total_calories:
            return 0.0
        return round((grams or 0) * kcal_per_gram / self.total_calories * 100, 1)

    @property
    def protein_percentage(self) -> float:
        return self._macro_percentage(self.total_protein_g, 4)

    @property
    def carbs_percentage(self) -> float:
        return self._macro_percentage(self.total_carbs_g, 4)

    @property
    def fat_percentage(self) -> float:
        return self._macro_percentage(self.total_fat_g, 9)
