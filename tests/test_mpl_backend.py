"""Tests for the matplotlib backend."""

import dataclasses

import numpy as np
import pytest
from matplotlib import rcParams
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.patches import Circle, PathPatch
from matplotlib.path import Path as MplPath

from balance_chart.chart import build_chart
from balance_chart.paths import build_area_path, build_smooth_path
from balance_chart.ui.mpl_backend import MatplotlibRenderer, to_mpl_path
from balance_chart.ui.theming import apply_theme


def test_singleton_curve_codes(layout):
    path = to_mpl_path(build_smooth_path([50], layout))
    assert list(path.codes) == [MplPath.MOVETO] + [MplPath.CURVE4] * 3
    np.testing.assert_allclose(path.vertices[-1], [0.0, 93.0])


def test_area_closes_on_lead_in(layout):
    path = to_mpl_path(build_area_path([50, 60], layout))
    assert list(path.codes[-3:]) == [MplPath.LINETO, MplPath.LINETO, MplPath.CLOSEPOLY]
    np.testing.assert_allclose(path.vertices[-3], [390.0, 180.0])
    np.testing.assert_allclose(path.vertices[-1], [-32.0, 186.0])


def test_vertices_hit_every_sample(layout):
    samples = [40, 26, 22, 72, 82, 80, 88]
    path = to_mpl_path(build_smooth_path(samples, layout))
    assert len(path.vertices) == 1 + 3 * len(samples)
    on_curve = path.vertices[3::3]
    np.testing.assert_allclose(on_curve[:, 0], np.arange(len(samples)) * 65.0)


def test_empty_descriptor(layout):
    assert len(to_mpl_path(build_smooth_path([], layout)).vertices) == 0


def test_draw_chart_adds_artists(layout, style):
    renderer = MatplotlibRenderer(layout, style)
    renderer.draw_chart(build_chart([40, 26, 22], layout, style), "$ 1")
    patches = [p for p in renderer.ax.patches if isinstance(p, PathPatch)]
    # area + shadow passes + line
    assert len(patches) == 2 + len(style.shadow_passes)
    assert sum(isinstance(p, Circle) for p in renderer.ax.patches) == 1
    assert len(renderer.ax.texts) == 2
    assert renderer.ax.get_ylim() == (180.0, 0.0)


def test_clear_resets_axes(layout, style):
    renderer = MatplotlibRenderer(layout, style)
    renderer.draw_chart(build_chart([40, 26], layout, style))
    renderer.clear()
    assert len(renderer.ax.patches) == 0
    assert renderer.ax.get_xlim() == (0.0, 390.0)


def test_save_png(tmp_path, layout, style):
    renderer = MatplotlibRenderer(layout, style)
    renderer.draw_chart(build_chart([50], layout, style), "$ 1")
    target = renderer.save_png(tmp_path / "chart.png")
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_unknown_command_rejected(layout):
    from balance_chart.paths import PathCommand, PathDescriptor, Point

    with pytest.raises(KeyError):
        to_mpl_path(PathDescriptor((PathCommand("Q", (Point(0, 0),)),)))


def _pixels(layout, style, samples, balance="$ 11,950"):
    renderer = MatplotlibRenderer(layout, style)
    renderer.draw_chart(build_chart(samples, layout, style), balance)
    canvas = FigureCanvasAgg(renderer.fig)
    canvas.draw()
    return np.asarray(canvas.buffer_rgba()).copy()


def _magnified_rows(layout, style, samples):
    """Pixel rows changed by the magnified label alone."""
    full = _pixels(layout, style, samples)
    tiny = _pixels(layout, dataclasses.replace(style, magnified_font_size=0.01), samples)
    return np.nonzero(np.any(full != tiny, axis=(1, 2)))[0]


def test_magnified_label_stays_inside_area(layout, style):
    # Flat zero line: the area starts around y=158 and the magnified
    # baseline sits at y=133.4, so nothing of it may show.
    rows = _magnified_rows(layout, style, [0, 0])
    assert rows.size == 0 or rows.min() >= 157


def test_magnified_label_visible_where_area_covers_it(layout, style):
    rows = _magnified_rows(layout, style, [100, 100])
    assert rows.size > 0


def test_clipped_text_has_clipping_enabled(layout, style):
    renderer = MatplotlibRenderer(layout, style)
    geometry = build_chart([40, 60], layout, style)
    artist = renderer.render_text("$ 1", geometry.magnified_label, font_size=58, color="#000000",
                                  clip=geometry.area)
    assert artist.get_clip_on() is True
    assert artist.get_clip_path() is not None
    free = renderer.render_text("$ 1", geometry.label, font_size=54, color="#000000")
    assert free.get_clip_on() is False


def test_text_font_follows_applied_theme(layout):
    style = apply_theme("dark")
    assert rcParams["font.weight"] == style.label_weight
    assert rcParams["font.family"][0] == style.label_font
    renderer = MatplotlibRenderer(layout, style)
    artist = renderer.render_text("$ 1", build_chart([50], layout, style).label, font_size=54,
                                  color=style.label_color)
    assert artist.get_fontweight() == style.label_weight
    assert artist.get_fontfamily()[0] == style.label_font


def test_background_inner_shadow_images(layout, style):
    renderer = MatplotlibRenderer(layout, style)
    renderer.render_background()
    # gradient, top shade, corner shade
    assert len(renderer.ax.images) == 3
    assert all(image.get_clip_path() is not None for image in renderer.ax.images)
    corner = renderer.ax.images[-1]
    assert tuple(corner.get_extent()) == (-12.0, 34.0, 34.0, -12.0)
    assert renderer.ax.get_ylim() == (180.0, 0.0)

    renderer = MatplotlibRenderer(layout, dataclasses.replace(style, left_shade_alpha=0.03))
    renderer.render_background()
    assert len(renderer.ax.images) == 4
