from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from vertical_dashboards.config import Settings
from vertical_dashboards.data.filters import DashboardFilters
from vertical_dashboards.data.results import Result
from vertical_dashboards.data.verticals import VerticalRegistry
from vertical_dashboards.models import ThemeMode, UseCase, VerticalModule


@dataclass
class PageContext:
    registry: VerticalRegistry
    settings: Settings
    theme: ThemeMode
    filters: DashboardFilters
    readings: Result[pd.DataFrame]
    visible_verticals: List[VerticalModule] = field(default_factory=list)
    vertical: Optional[VerticalModule] = None
    use_case: Optional[UseCase] = None
