"""
身体测量 API 路由（挂载在 /users/{user_id}/health-metrics 下）。

1. POST / - 新建测量记录（自动计算派生指标）
2. GET / - 测量记录列表（最新在前）
3. GET /latest - 最新一条
4. GET /summary - 最新一条的 BMI / 体脂分类摘要
5. GET /{metric_id} - 单条记录
6. PATCH /{metric_id} - 部分更新并重算
7. DELETE /{metric_id} - 删除
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from . import crud, schemas
from ..users import crud as user_crud
from ..services.metrics_service import metrics_service
from ..utils import get_db

router = APIRouter(prefix="/users/{user_id}/health-metrics", tags=["身体指标"])

NOT_FOUND = "Health metrics not found"


def _get_user_or_404(db: Session, user_id: int):
    user = user_crud.get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/", response_model=schemas.HealthMetric)
def create_health_metric(user_id: int, payload: schemas.HealthMetricCreate, db: Session = Depends(get_db)):
    user = _get_user_or_404(db, user_id)
    return metrics_service.create_entry(db, user, payload)


@router.get("/", response_model=list[schemas.HealthMetric])
def read_health_metrics(user_id: int, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    _get_user_or_404(db, user_id)
    return crud.get_health_metrics(db, user_id, skip=skip, limit=limit)


@router.get("/latest", response_model=schemas.HealthMetric)
def read_latest_health_metric(user_id: int, db: Session = Depends(get_db)):
    _get_user_or_404(db, user_id)
    entry = crud.get_latest_health_metric(db, user_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="No health metrics found")
    return entry


@router.get("/summary", response_model=schemas.HealthMetricSummary)
def read_health_summary(user_id: int, db: Session = Depends(get_db)):
    """最新测量记录的指标摘要（仅展示，不落库）"""
    user = _get_user_or_404(db, user_id)
    summary = metrics_service.latest_summary(db, user)
    if summary is None:
        raise HTTPException(status_code=404, detail="No health metrics found")
    return summary


@router.get("/{metric_id}", response_model=schemas.HealthMetric)
def read_health_metric(user_id: int, metric_id: int, db: Session = Depends(get_db)):
    entry = crud.get_health_metric(db, user_id, metric_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return entry


@router.patch("/{metric_id}", response_model=schemas.HealthMetric)
def update_health_metric(
    user_id: int,
    metric_id: int,
    payload: schemas.HealthMetricUpdate,
    db: Session = Depends(get_db),
):
    user = _get_user_or_404(db, user_id)
    entry = metrics_service.update_entry(db, user, metric_id, payload)
    if entry is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return entry


@router.delete("/{metric_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_health_metric(user_id: int, metric_id: int, db: Session = Depends(get_db)):
    if not crud.delete_health_metric(db, user_id, metric_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
