"""
FitTrack API 主应用文件。

1. 初始化日志
2. 创建 FastAPI 应用并建表
3. 注册用户、身体指标、训练、饮食路由
"""

from fastapi import FastAPI

from .config import LOG_LEVEL, SQL_ECHO
from .db_base import Base
from .logging_config import setup_logging
from .utils import engine

from .users.router import router as users_router
from .health_metrics.router import router as health_metrics_router
from .workouts.router import router as workouts_router
from .meals.router import router as meals_router

setup_logging(LOG_LEVEL, sql_echo=SQL_ECHO)
Base.metadata.create_all(bind=engine)

app = FastAPI(title="FitTrack API")

app.include_router(users_router)
app.include_router(health_metrics_router)
app.include_router(workouts_router)
app.include_router(meals_router)
