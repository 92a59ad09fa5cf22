import pytest

from vertical_dashboards.ui.components.palette import (
    CHART_COLORS,
    DEFAULT_PALETTE,
    ColorPalette,
    color_for,
    series_colors,
)


def test_palette_wraps_around():
    assert len(DEFAULT_PALETTE) == 10
    assert color_for(len(CHART_COLORS)) == color_for(0)
    assert color_for(13) == CHART_COLORS[3]


def test_color_for_is_stable():
    assert [color_for(i) for i in range(25)] == [color_for(i) for i in range(25)]


def test_series_colors_prefers_configured():
    assert series_colors(["#111111"], 3) == ["#111111", CHART_COLORS[1], CHART_COLORS[2]]


def test_series_colors_skips_blank_entries():
    assert series_colors(["", "#222222"], 2) == [CHART_COLORS[0], "#222222"]


def test_custom_palette():
    palette = ColorPalette(colors=("#000000", "#FFFFFF"))
    assert color_for(3, palette) == "#FFFFFF"
    with pytest.raises(ValueError):
        ColorPalette(colors=())
