"""
饮食记录的数据库操作函数（CRUD）。时间字段统一转换成 naive UTC 后再落库。
"""

from sqlalchemy.orm import Session
from . import models, schemas
from ..core.analytics.time_utils import to_naive_utc

TIME_FIELDS = ('meal_time',)


def _normalize_times(data: dict) -> dict:
    for field in TIME_FIELDS:
        if data.get(field) is not None:
            data[field] = to_naive_utc(data[field])
    return data


def get_meals(db: Session, user_id: int, skip: int = 0, limit: int = 100):
    """按用餐时间倒序返回"""
    return (
        db.query(models.Meal)
        .filter(models.Meal.user_id == user_id)
        .order_by(models.Meal.meal_time.desc(), models.Meal.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_meal(db: Session, user_id: int, meal_id: int):
    return (
        db.query(models.Meal)
        .filter(models.Meal.id == meal_id, models.Meal.user_id == user_id)
        .first()
    )


def get_meal_times(db: Session, user_id: int):
    """只取 meal_time 一列，供连续打卡计算使用"""
    return db.query(models.Meal.meal_time).filter(models.Meal.user_id == user_id).all()


def create_meal(db: Session, user_id: int, meal: schemas.MealCreate):
    db_meal = models.Meal(user_id=user_id, **_normalize_times(meal.model_dump()))
    db.add(db_meal)
    db.commit()
    db.refresh(db_meal)
    return db_meal


def update_meal(db: Session, user_id: int, meal_id: int, meal_update: schemas.MealUpdate):
    db_meal = get_meal(db, user_id, meal_id)
    if db_meal is None:
        return None

    update_data = _normalize_times(meal_update.model_dump(exclude_unset=True))
    for field, value in update_data.items():
        setattr(db_meal, field, value)

    db.commit()
    db.refresh(db_meal)
    return db_meal


def delete_meal(db: Session, user_id: int, meal_id: int) -> bool:
    db_meal = get_meal(db, user_id, meal_id)
    if db_meal is None:
        return False
    db.delete(db_meal)
    db.commit()
    return True
