"""
Metrics Service（身体指标服务）

职责：
- 读取用户档案并归一化（缺失字段补默认值）
- 调用 core.analytics.body_composition 计算派生指标并写回测量记录
- 生成最新记录的分类摘要
"""

from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
import logging

from ..core.analytics.body_composition import MEASUREMENT_FIELDS, MeasurementInput, compute
from ..core.analytics.classification import summarize
from ..core.analytics.profile import profile_from_user
from ..health_metrics import crud, models, schemas

logger = logging.getLogger(__name__)


class MetricsService:
    """身体指标服务"""

    def apply_derived_metrics(self, entry: models.HealthMetric, user) -> models.HealthMetric:
        """按当前原始测量值和用户档案重算全部派生字段（就地修改 entry）"""
        profile = profile_from_user(user)
        measurement = MeasurementInput.from_mapping(
            {name: getattr(entry, name) for name in MEASUREMENT_FIELDS}
        )
        derived = compute(measurement, profile)
        for field, value in derived.derived_fields().items():
            setattr(entry, field, value)

        logger.info(
            "[metrics][computed] user_id=%s bmi=%s rmr=%s tdee=%s",
            getattr(user, 'id', None), derived.bmi,
            derived.resting_metabolic_rate, derived.total_daily_energy_expenditure,
        )
        return entry

    def create_entry(self, db: Session, user, payload: schemas.HealthMetricCreate) -> models.HealthMetric:
        entry = models.HealthMetric(user_id=user.id, **payload.model_dump())
        self.apply_derived_metrics(entry, user)
        return crud.save_health_metric(db, entry)

    def update_entry(
        self,
        db: Session,
        user,
        metric_id: int,
        payload: schemas.HealthMetricUpdate,
    ) -> Optional[models.HealthMetric]:
        """合并更新字段后重算；记录不存在时返回 None"""
        entry = crud.get_health_metric(db, user.id, metric_id)
        if entry is None:
            return None

        update_data = payload.model_dump(exclude_unset=True)
        # 体重为必填列，显式传 null 时保留原值
        if update_data.get('current_weight_kg', 0) is None:
            update_data.pop('current_weight_kg')
        for field, value in update_data.items():
            setattr(entry, field, value)

        self.apply_derived_metrics(entry, user)
        return crud.save_health_metric(db, entry)

    def latest_summary(self, db: Session, user) -> Optional[Dict[str, Any]]:
        latest = crud.get_latest_health_metric(db, user.id)
        if latest is None:
            return None
        return summarize(latest, profile_from_user(user).biological_sex)


# 创建单例实例
metrics_service = MetricsService()
