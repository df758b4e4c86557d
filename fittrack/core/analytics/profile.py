"""
用户档案归一化（Profile Normalization）

身体成分计算只接收"完整"的 UserProfile：缺失的身高、年龄、性别、活动系数
在这里统一补默认值，计算器本身不再做任何默认值替换。

默认值：
- 身高 175 cm
- 年龄 25 岁（若提供出生日期则按出生日期推算）
- 性别 male
- 活动系数 1.4（若提供活动等级则按等级映射）
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

DEFAULT_HEIGHT_CM = 175.0
DEFAULT_AGE_YEARS = 25
DEFAULT_SEX = "male"
DEFAULT_ACTIVITY_MULTIPLIER = 1.4

ACTIVITY_LEVEL_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extremely_active": 1.9,
}


@dataclass(frozen=True)
class UserProfile:
    """计算用的用户档案，所有字段均已填充"""
    height_cm: float = DEFAULT_HEIGHT_CM
    age_years: int = DEFAULT_AGE_YEARS
    biological_sex: str = DEFAULT_SEX
    activity_multiplier: float = DEFAULT_ACTIVITY_MULTIPLIER

    @property
    def is_male(self) -> bool:
        return self.biological_sex == "male"


def age_from_birth_date(date_of_birth: date, today: Optional[date] = None) -> int:
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def normalize_sex(value: Optional[str]) -> str:
    # 公式按 male / 非 male 两支计算，"other" 等取值走 female 一支
    s = (value or "").strip().lower()
    if not s or s == "male":
        return "male"
    return "female"


def normalize_profile(
    height_cm: Optional[float] = None,
    age_years: Optional[int] = None,
    biological_sex: Optional[str] = None,
    activity_multiplier: Optional[float] = None,
    activity_level: Optional[str] = None,
    date_of_birth: Optional[date] = None,
    today: Optional[date] = None,
) -> UserProfile:
    """把可能缺字段的用户数据转换成完整的 UserProfile。

    数值为 0 或 None 均视为未填写。
    """
    if not age_years and date_of_birth is not None:
        age_years = age_from_birth_date(date_of_birth, today)

    if not activity_multiplier and activity_level:
        activity_multiplier = ACTIVITY_LEVEL_MULTIPLIERS.get(activity_level.strip().lower())

    return UserProfile(
        height_cm=float(height_cm) if height_cm else DEFAULT_HEIGHT_CM,
        age_years=int(age_years) if age_years else DEFAULT_AGE_YEARS,
        biological_sex=normalize_sex(biological_sex),
        activity_multiplier=float(activity_multiplier) if activity_multiplier else DEFAULT_ACTIVITY_MULTIPLIER,
    )


def profile_from_user(user) -> UserProfile:
    """从 users 表的 ORM 对象构建 UserProfile；user 为 None 时全部使用默认值"""
    if user is None:
        return UserProfile()
    return normalize_profile(
        height_cm=getattr(user, "height_cm", None),
        age_years=getattr(user, "age_years", None),
        biological_sex=getattr(user, "gender", None),
        activity_multiplier=getattr(user, "activity_level_multiplier", None),
        activity_level=getattr(user, "activity_level", None),
        date_of_birth=getattr(user, "date_of_birth", None),
    )
