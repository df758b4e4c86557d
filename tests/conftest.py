"""
pytest配置文件，定义测试环境和共享的测试夹具（fixtures）。

主要功能：
1. 每个测试使用独立的内存 SQLite 数据库（StaticPool 保证所有线程共用同一连接）
2. 提供数据库会话
3. 提供FastAPI测试客户端（覆盖 get_db 依赖）
4. 提供测试数据样本
"""

import os

# 必须在导入 fittrack 之前设置，避免应用在工作目录下创建 SQLite 文件
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fittrack.db_base import Base
from fittrack.main import app
from fittrack.utils import get_db

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False)


@pytest.fixture
def db_session():
    """每个测试建一个全新的内存库，测试结束后销毁"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal(bind=engine)
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(db_session):
    """提供FastAPI测试客户端"""
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user_data():
    """提供测试用的用户档案样本（25 岁男性，175 cm）"""
    return {
        "name": "测试用户",
        "email": "tester@example.com",
        "height_cm": 175.0,
        "weight_kg": 70.0,
        "gender": "male",
    }


@pytest.fixture
def sample_user_update_data():
    return {
        "height_cm": 180.0,
        "gender": "female",
        "activity_level": "moderately_active",
    }


@pytest.fixture
def user_id(client, sample_user_data):
    """先创建一个用户，返回其ID"""
    response = client.post("/users/", json=sample_user_data)
    assert response.status_code == 200
    return response.json()["id"]


@pytest.fixture
def sample_measurement_data():
    return {
        "current_weight_kg": 70.0,
        "body_fat_percent": 15.0,
        "goal_weight_kg": 65.0,
        "water_percent": 55.0,
        "waist_cm": 80.0,
        "hip_cm": 100.0,
        "neck_cm": 38.0,
        "notes": "晨起空腹",
    }
