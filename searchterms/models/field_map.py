from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Canonical field roles and the column assignment produced by header detection.

Raw export columns (English or Russian, in any order) are mapped onto a fixed
set of semantic roles. ``search_term`` always resolves; every other role may be
absent and consumers must cope with ``None``.
"""

__all__ = [
    "CanonicalField",
    "MetricColumns",
    "CanonicalFieldMap",
    "METRIC_FIELDS",
]


class CanonicalField(Enum):
    """Semantic roles a raw column can be mapped to."""
    SEARCH_TERM = "searchTerm"
    CAMPAIGN = "campaign"
    AD_GROUP = "adGroup"
    COST = "cost"
    IMPRESSIONS = "impressions"
    CLICKS = "clicks"
    CONVERSIONS = "conversions"
    COST_PER_CONVERSION = "costPerConversion"


METRIC_FIELDS = (
    CanonicalField.COST,
    CanonicalField.IMPRESSIONS,
    CanonicalField.CLICKS,
    CanonicalField.CONVERSIONS,
    CanonicalField.COST_PER_CONVERSION,
)


@dataclass(frozen=True)
class MetricColumns:
    """Column names chosen for each metric role (``None`` when not detected)."""
    cost: str | None = None
    impressions: str | None = None
    clicks: str | None = None
    conversions: str | None = None
    cost_per_conversion: str | None = None

    def get(self, role: CanonicalField | str) -> str | None:
        role = CanonicalField(role)
        return {
            CanonicalField.COST: self.cost,
            CanonicalField.IMPRESSIONS: self.impressions,
            CanonicalField.CLICKS: self.clicks,
            CanonicalField.CONVERSIONS: self.conversions,
            CanonicalField.COST_PER_CONVERSION: self.cost_per_conversion,
        }.get(role)

    def as_dict(self) -> dict[str, str | None]:
        return {role.value: self.get(role) for role in METRIC_FIELDS}


@dataclass(frozen=True)
class CanonicalFieldMap:
    """Role -> column assignment for one report. At most one column per role."""
    search_term: str
    campaign: str | None = None
    ad_group: str | None = None
    metrics: MetricColumns = field(default_factory=MetricColumns)

    def get(self, role: CanonicalField | str) -> str | None:
        role = CanonicalField(role)
        if role is CanonicalField.SEARCH_TERM:
            return self.search_term
        if role is CanonicalField.CAMPAIGN:
            return self.campaign
        if role is CanonicalField.AD_GROUP:
            return self.ad_group
        return self.metrics.get(role)

    def as_dict(self) -> dict[str, str | None]:
        return {role.value: self.get(role) for role in CanonicalField}
