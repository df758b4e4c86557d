from typing import Any, Dict, Optional

# (上限, 分类) 按阈值从低到高排列，超过最后一个上限归为 Obese
BODY_FAT_BANDS = {
    "male": [(6, "Essential Fat"), (14, "Athletes"), (18, "Fitness"), (25, "Average")],
    "female": [(10, "Essential Fat"), (16, "Athletes"), (20, "Fitness"), (32, "Average")],
}


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def body_fat_category(body_fat_percent: Optional[float], sex: Optional[str] = "male") -> str:
    if body_fat_percent is None:
        return "Unknown"
    bands = BODY_FAT_BANDS["male" if (sex or "male") == "male" else "female"]
    for upper, label in bands:
        if body_fat_percent < upper:
            return label
    return "Obese"


def summarize(entry: Any, sex: Optional[str] = "male") -> Dict[str, Any]:
    """Read-only summary of a derived measurement (dataclass, ORM row or dict)."""
    def value(name: str):
        if isinstance(entry, dict):
            return entry.get(name)
        return getattr(entry, name, None)

    bmi = value("bmi")
    return {
        "bmi": bmi,
        "tdee": value("total_daily_energy_expenditure"),
        "rmr": value("resting_metabolic_rate"),
        "bmi_category": bmi_category(bmi) if bmi is not None else "Unknown",
        "body_fat_category": body_fat_category(value("body_fat_percent"), sex),
    }
