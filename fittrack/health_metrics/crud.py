"""
身体测量记录的数据库操作函数（CRUD）。

所有查询都同时按 user_id 过滤，保证只能访问自己的记录。
派生指标的计算不在这里做，见 services.metrics_service。
"""

from sqlalchemy.orm import Session
from . import models


def get_health_metrics(db: Session, user_id: int, skip: int = 0, limit: int = 100):
    """获取用户的测量记录，最新的在前"""
    return (
        db.query(models.HealthMetric)
        .filter(models.HealthMetric.user_id == user_id)
        .order_by(models.HealthMetric.created_at.desc(), models.HealthMetric.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_health_metric(db: Session, user_id: int, metric_id: int):
    return (
        db.query(models.HealthMetric)
        .filter(models.HealthMetric.id == metric_id, models.HealthMetric.user_id == user_id)
        .first()
    )


def get_latest_health_metric(db: Session, user_id: int):
    return (
        db.query(models.HealthMetric)
        .filter(models.HealthMetric.user_id == user_id)
        .order_by(models.HealthMetric.created_at.desc(), models.HealthMetric.id.desc())
        .first()
    )


def save_health_metric(db: Session, entry: models.HealthMetric):
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def delete_health_metric(db: Session, user_id: int, metric_id: int) -> bool:
    entry = get_health_metric(db, user_id, metric_id)
    if entry is None:
        return False
    db.delete(entry)
    db.commit()
    return True
