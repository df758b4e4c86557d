"""
用户档案的数据库操作函数（CRUD）。
"""

from sqlalchemy.orm import Session
from . import models, schemas


def get_user(db: Session, user_id: int):
    """根据ID获取单个用户"""
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_users(db: Session, skip: int = 0, limit: int = 100):
    """获取用户列表，支持分页"""
    return db.query(models.User).order_by(models.User.id).offset(skip).limit(limit).all()


def create_user(db: Session, user: schemas.UserCreate):
    db_user = models.User(**user.model_dump())
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, user_id: int, user_update: schemas.UserUpdate):
    """只更新请求中显式提供的字段"""
    db_user = get_user(db, user_id)
    if db_user is None:
        return None

    for field, value in user_update.model_dump(exclude_unset=True).items():
        setattr(db_user, field, value)

    db.commit()
    db.refresh(db_user)
    return db_user
