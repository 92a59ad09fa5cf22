"""
Shared data model for verticals, metrics and declarative dashboards.

Vertical metadata (``VerticalModule``, ``UseCase``, ``MetricConfig``) is static
and frozen once registered. Dashboard descriptors (``DashboardConfig``,
``TabConfig``, ``ChartConfig``, ``Kpi``) are rebuilt on every render pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union


class Polarity(str, Enum):
    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"


class Severity(str, Enum):
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.HEALTHY: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
}


class Complexity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Visualization(str, Enum):
    GAUGE = "gauge"
    LINE = "line"
    BAR = "bar"
    PIE = "pie"


class ChartType(str, Enum):
    BAR = "bar"
    LINE = "line"
    AREA = "area"
    PIE = "pie"
    RADAR = "radar"
    SCATTER = "scatter"
    COMPOSED = "composed"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Threshold:
    warning: float
    critical: float


@dataclass(frozen=True)
class MetricConfig:
    id: str
    name: str
    unit: str
    threshold: Threshold
    visualization: Visualization
    polarity: Polarity


@dataclass(frozen=True)
class SiaScores:
    security: int
    integrity: int
    accuracy: int

    def __post_init__(self) -> None:
        for axis in ("security", "integrity", "accuracy"):
            value = getattr(self, axis)
            if not 0 <= value <= 100:
                raise ValueError(f"{axis} score must be within 0-100, got {value}")

    @property
    def overall(self) -> int:
        return round((self.security + self.integrity + self.accuracy) / 3)

    def as_records(self) -> List[Dict[str, Any]]:
        return [
            {"axis": "Security", "score": self.security},
            {"axis": "Integrity", "score": self.integrity},
            {"axis": "Accuracy", "score": self.accuracy},
        ]


@dataclass(frozen=True)
class UseCase:
    id: str
    name: str
    description: str
    complexity: Complexity
    estimated_time: str
    sia_scores: SiaScores


@dataclass(frozen=True)
class VerticalModule:
    id: str
    name: str
    description: str
    features: Tuple[str, ...]
    regulations: Tuple[str, ...]
    ai_agents: Tuple[str, ...]
    use_cases: Tuple[UseCase, ...]
    metrics: Tuple[MetricConfig, ...]
    dashboard_widgets: Tuple[str, ...] = ()
    templates: Tuple[str, ...] = ()


@dataclass
class Kpi:
    title: str
    value: Union[str, float, int]
    change: float
    trend: Trend
    icon: str = "chart-bar"
    color: str = "blue"


@dataclass
class ChartConfig:
    type: Union[ChartType, str]
    title: str
    data: Sequence[Mapping[str, Any]]
    data_keys: Sequence[str] = ()
    colors: Sequence[str] = ()
    height: int = 300
    show_legend: bool = False
    series_kinds: Mapping[str, str] = field(default_factory=dict)
    secondary_axis: Sequence[str] = ()


TabContent = Callable[[], Sequence[ChartConfig]]


@dataclass
class TabConfig:
    id: str
    label: str
    icon: str
    content: TabContent
    columns: int = 2


@dataclass
class DashboardConfig:
    title: str
    description: str
    kpis: List[Kpi]
    tabs: List[TabConfig]
    default_tab: Optional[str] = None
    refresh_interval: Optional[int] = None

    def tab_ids(self) -> List[str]:
        return [tab.id for tab in self.tabs]

    def get_tab(self, tab_id: str) -> Optional[TabConfig]:
        return next((tab for tab in self.tabs if tab.id == tab_id), None)


T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Page[Any]":
        items = payload.get("items")
        if items is None:
            items = payload.get("logs", [])
        return cls(
            items=list(items),
            total=int(payload.get("total", len(items))),
            page=int(payload.get("page", 1)),
            page_size=int(payload.get("pageSize", payload.get("page_size", len(items)))),
        )

    @property
    def page_count(self) -> int:
        if self.page_size <= 0:
            return 0
        return -(-self.total // self.page_size)
