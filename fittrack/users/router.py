"""
用户档案 API 路由。

1. GET / - 用户列表
2. GET /{user_id} - 单个用户
3. POST / - 创建用户
4. PUT /{user_id} - 更新用户档案（身高、性别、活动系数等）
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from . import crud, schemas
from ..utils import get_db

router = APIRouter(prefix="/users", tags=["用户"])

USER_NOT_FOUND = "User not found"


@router.get("/", response_model=list[schemas.User])
def read_users(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return crud.get_users(db, skip=skip, limit=limit)


@router.get("/{user_id}", response_model=schemas.User)
def read_user(user_id: int, db: Session = Depends(get_db)):
    db_user = crud.get_user(db, user_id=user_id)
    if db_user is None:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    return db_user


@router.post("/", response_model=schemas.User)
def create_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    """创建新用户"""
    return crud.create_user(db, user)


@router.put("/{user_id}", response_model=schemas.User)
def update_user(user_id: int, user_update: schemas.UserUpdate, db: Session = Depends(get_db)):
    """更新用户档案；已有的身体测量记录不会自动重算"""
    db_user = crud.update_user(db, user_id, user_update)
    if db_user is None:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    return db_user
