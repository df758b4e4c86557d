"""
日志初始化（Logging Bootstrap）

- 根日志等级取自显式参数或环境变量 LOG_LEVEL（默认 INFO）；
- SQLAlchemy 的 SQL 日志默认压到 WARNING，设置 SQL_ECHO=true 时输出每条语句；
- 业务模块统一使用 logging.getLogger(__name__)，消息格式为 "[模块][事件] key=value"。
"""

import logging
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def setup_logging(level: Optional[str] = None, sql_echo: bool = False) -> None:
    log_level = (level or os.environ.get('LOG_LEVEL', 'INFO')).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO), format=LOG_FORMAT)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.INFO if sql_echo else logging.WARNING)
