# pagecraft/domain/pricing.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

UNLIMITED_TOKEN = "unlimited"


@dataclass(frozen=True)
class SharedFeature:
    """A plan feature that points into the shared feature pool."""
    plan_feature_id: int
    feature_id: int
    label: str
    icon: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.plan_feature_id,
            "kind": "shared",
            "feature_id": self.feature_id,
            "label": self.label,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class CustomFeature:
    """A one-off feature defined inline on a single plan."""
    plan_feature_id: int
    label: str
    icon: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.plan_feature_id,
            "kind": "custom",
            "feature_id": None,
            "label": self.label,
            "icon": self.icon,
        }


PlanFeatureEntry = Union[SharedFeature, CustomFeature]


def plan_feature_entry(row) -> Optional[PlanFeatureEntry]:
    """
    Resolve a PlanFeature row into its displayed form.

    Returns None when the row is not displayed:
    - a shared feature that is not available on this plan
    - a shared reference whose pool entry no longer exists
    - a custom row without a label
    """
    if row.feature_id is not None:
        if not row.available or row.feature is None:
            return None
        return SharedFeature(
            plan_feature_id=row.id,
            feature_id=row.feature.id,
            label=row.feature.name,
            icon=row.feature.icon,
        )

    if not row.label:
        return None

    return CustomFeature(plan_feature_id=row.id, label=row.label, icon=row.icon)


def feature_limit_display(value: Optional[int], is_unlimited: bool) -> Union[int, str, None]:
    """Unlimited wins over whatever number is stored; otherwise the value is shown as is."""
    if is_unlimited:
        return UNLIMITED_TOKEN
    return value
