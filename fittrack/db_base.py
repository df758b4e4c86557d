"""所有 ORM 模型共用的声明式基类和时间戳默认值"""

from sqlalchemy.orm import declarative_base
import datetime

Base = declarative_base()


def utcnow() -> datetime.datetime:
    """naive UTC 时间，数据库中的 DateTime 列统一按 UTC 存储"""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
