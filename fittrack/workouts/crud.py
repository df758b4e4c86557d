"""
训练记录的数据库操作函数（CRUD）。时间字段统一转换成 naive UTC 后再落库。
"""

from sqlalchemy.orm import Session
from . import models, schemas
from ..core.analytics.time_utils import to_naive_utc

TIME_FIELDS = ('start_time', 'end_time')


def _normalize_times(data: dict) -> dict:
    for field in TIME_FIELDS:
        if data.get(field) is not None:
            data[field] = to_naive_utc(data[field])
    return data


def get_workouts(db: Session, user_id: int, skip: int = 0, limit: int = 100):
    """按开始时间倒序返回"""
    return (
        db.query(models.Workout)
        .filter(models.Workout.user_id == user_id)
        .order_by(models.Workout.start_time.desc(), models.Workout.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_workout(db: Session, user_id: int, workout_id: int):
    return (
        db.query(models.Workout)
        .filter(models.Workout.id == workout_id, models.Workout.user_id == user_id)
        .first()
    )


def get_workout_start_times(db: Session, user_id: int):
    """只取 start_time 一列，供连续打卡计算使用"""
    return db.query(models.Workout.start_time).filter(models.Workout.user_id == user_id).all()


def create_workout(db: Session, user_id: int, workout: schemas.WorkoutCreate):
    db_workout = models.Workout(user_id=user_id, **_normalize_times(workout.model_dump()))
    db.add(db_workout)
    db.commit()
    db.refresh(db_workout)
    return db_workout


def update_workout(db: Session, user_id: int, workout_id: int, workout_update: schemas.WorkoutUpdate):
    db_workout = get_workout(db, user_id, workout_id)
    if db_workout is None:
        return None

    update_data = _normalize_times(workout_update.model_dump(exclude_unset=True))
    for field, value in update_data.items():
        setattr(db_workout, field, value)

    db.commit()
    db.refresh(db_workout)
    return db_workout


def delete_workout(db: Session, user_id: int, workout_id: int) -> bool:
    db_workout = get_workout(db, user_id, workout_id)
    if db_workout is None:
        return False
    db.delete(db_workout)
    db.commit()
    return True
