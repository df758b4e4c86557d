"""
饮食记录 API 路由（挂载在 /users/{user_id}/meals 下）。

1. GET /streak/current?tz= - 当前连续记录饮食天数
2. POST / - 新建饮食记录
3. GET / - 饮食记录列表
4. GET /{meal_id} - 单条记录
5. PATCH /{meal_id} - 部分更新
6. DELETE /{meal_id} - 删除
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from . import crud, schemas
from ..schemas.streaks import StreakResponse
from ..services.streak_service import streak_service
from ..users import crud as user_crud
from ..utils import get_db

router = APIRouter(prefix="/users/{user_id}/meals", tags=["饮食"])

NOT_FOUND = "Meal not found"


def _ensure_user(db: Session, user_id: int) -> None:
    if user_crud.get_user(db, user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("/streak/current", response_model=StreakResponse)
def read_current_meal_streak(
    user_id: int,
    tz: Optional[str] = Query(None, description="IANA 时区，如 America/Los_Angeles；无效时按 UTC"),
    db: Session = Depends(get_db),
):
    _ensure_user(db, user_id)
    return streak_service.meal_streak(db, user_id, tz).to_payload()


@router.post("/", response_model=schemas.Meal)
def create_meal(user_id: int, meal: schemas.MealCreate, db: Session = Depends(get_db)):
    _ensure_user(db, user_id)
    return crud.create_meal(db, user_id, meal)


@router.get("/", response_model=list[schemas.Meal])
def read_meals(user_id: int, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    _ensure_user(db, user_id)
    return crud.get_meals(db, user_id, skip=skip, limit=limit)


@router.get("/{meal_id}", response_model=schemas.Meal)
def read_meal(user_id: int, meal_id: int, db: Session = Depends(get_db)):
    db_meal = crud.get_meal(db, user_id, meal_id)
    if db_meal is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_meal


@router.patch("/{meal_id}", response_model=schemas.Meal)
def update_meal(
    user_id: int,
    meal_id: int,
    meal_update: schemas.MealUpdate,
    db: Session = Depends(get_db),
):
    db_meal = crud.update_meal(db, user_id, meal_id, meal_update)
    if db_meal is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_meal


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal(user_id: int, meal_id: int, db: Session = Depends(get_db)):
    if not crud.delete_meal(db, user_id, meal_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
