"""
Deterministic series colors.

A series keeps its color across re-renders as long as callers pass its
position in the original config list, not a position after filtering or
sorting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple


CHART_COLORS: Tuple[str, ...] = (
    "#FFD700",  # gold
    "#00D4FF",  # vanguard blue
    "#00FF88",  # vanguard green
    "#FF4444",  # vanguard red
    "#8B5CF6",  # purple
    "#EC4899",  # pink
    "#14B8A6",  # teal
    "#F97316",  # orange
    "#6366F1",  # indigo
    "#84CC16",  # lime
)


@dataclass(frozen=True)
class ColorPalette:
    colors: Tuple[str, ...] = CHART_COLORS

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError("A palette needs at least one color")

    def color_for(self, index: int) -> str:
        return self.colors[index % len(self.colors)]

    def __len__(self) -> int:
        return len(self.colors)


DEFAULT_PALETTE = ColorPalette()


def color_for(index: int, palette: ColorPalette = DEFAULT_PALETTE) -> str:
    return palette.color_for(index)


def series_colors(
    configured: Sequence[str],
    count: int,
    palette: ColorPalette = DEFAULT_PALETTE,
) -> List[str]:
    """Colors for ``count`` series: configured colors first, then the palette by index."""
    return [
        configured[index] if index < len(configured) and configured[index] else palette.color_for(index)
        for index in range(count)
    ]
