"""
训练记录 API 路由（挂载在 /users/{user_id}/workouts 下）。

1. GET /streak/current?tz= - 当前连续训练天数
2. POST / - 新建训练记录
3. GET / - 训练记录列表
4. GET /{workout_id} - 单条记录
5. PATCH /{workout_id} - 部分更新
6. DELETE /{workout_id} - 删除
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from . import crud, schemas
from ..schemas.streaks import StreakResponse
from ..services.streak_service import streak_service
from ..users import crud as user_crud
from ..utils import get_db

router = APIRouter(prefix="/users/{user_id}/workouts", tags=["训练"])

NOT_FOUND = "Workout not found"


def _ensure_user(db: Session, user_id: int) -> None:
    if user_crud.get_user(db, user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("/streak/current", response_model=StreakResponse)
def read_current_workout_streak(
    user_id: int,
    tz: Optional[str] = Query(None, description="IANA 时区，如 America/Los_Angeles；无效时按 UTC"),
    db: Session = Depends(get_db),
):
    _ensure_user(db, user_id)
    return streak_service.workout_streak(db, user_id, tz).to_payload()


@router.post("/", response_model=schemas.Workout)
def create_workout(user_id: int, workout: schemas.WorkoutCreate, db: Session = Depends(get_db)):
    _ensure_user(db, user_id)
    return crud.create_workout(db, user_id, workout)


@router.get("/", response_model=list[schemas.Workout])
def read_workouts(user_id: int, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    _ensure_user(db, user_id)
    return crud.get_workouts(db, user_id, skip=skip, limit=limit)


@router.get("/{workout_id}", response_model=schemas.Workout)
def read_workout(user_id: int, workout_id: int, db: Session = Depends(get_db)):
    db_workout = crud.get_workout(db, user_id, workout_id)
    if db_workout is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_workout


@router.patch("/{workout_id}", response_model=schemas.Workout)
def update_workout(
    user_id: int,
    workout_id: int,
    workout_update: schemas.WorkoutUpdate,
    db: Session = Depends(get_db),
):
    db_workout = crud.update_workout(db, user_id, workout_id, workout_update)
    if db_workout is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_workout


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(user_id: int, workout_id: int, db: Session = Depends(get_db)):
    if not crud.delete_workout(db, user_id, workout_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
