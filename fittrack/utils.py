"""
数据库连接和会话管理。

1. 根据 config.get_database_url() 创建 engine（SQLite 时自动创建数据目录）
2. SessionLocal 会话工厂
3. get_db：FastAPI 依赖注入
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from .config import get_database_url


def build_engine(url: str):
    connect_args = {}
    parsed = make_url(url)
    if parsed.get_backend_name() == 'sqlite':
        connect_args['check_same_thread'] = False
        if parsed.database and parsed.database != ':memory:':
            os.makedirs(os.path.dirname(os.path.abspath(parsed.database)), exist_ok=True)
        return create_engine(url, connect_args=connect_args)
    return create_engine(url, pool_pre_ping=True)


DATABASE_URL = get_database_url()

engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """FastAPI 依赖项：获取数据库会话（Session）。"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
