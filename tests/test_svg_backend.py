"""Tests for the SVG backend."""

import dataclasses
import xml.etree.ElementTree as ET

from balance_chart.chart import build_chart
from balance_chart.paths import build_area_path, build_smooth_path
from balance_chart.ui.svg_backend import SvgRenderer

NS = {"svg": "http://www.w3.org/2000/svg"}
DAY = [40, 26, 22, 72, 82, 80, 88]


def _draw(layout, style, samples, balance="$ 11,950"):
    renderer = SvgRenderer(layout, style)
    renderer.draw_chart(build_chart(samples, layout, style), balance)
    return renderer.document()


def test_document_is_well_formed(layout, style):
    root = ET.fromstring(_draw(layout, style, DAY))
    assert root.get("width") == "390"
    assert root.get("viewBox") == "0 0 390 180"


def test_curve_and_area_paths_are_emitted(layout, style):
    doc = _draw(layout, style, DAY)
    assert f'd="{build_smooth_path(DAY, layout)}"' in doc
    assert f'd="{build_area_path(DAY, layout)}"' in doc


def test_magnified_label_is_clipped_to_area(layout, style):
    root = ET.fromstring(_draw(layout, style, DAY))
    clip = root.find("svg:defs/svg:clipPath", NS)
    assert clip.find("svg:path", NS).get("d") == str(build_area_path(DAY, layout))
    group = root.find("svg:g", NS)
    assert group.get("clip-path") == f"url(#{clip.get('id')})"
    assert group.find("svg:text", NS).text == "$ 11,950"


def test_marker_circle(layout, style):
    root = ET.fromstring(_draw(layout, style, DAY))
    circle = root.find("svg:circle", NS)
    assert circle.get("cx") == "360"
    assert float(circle.get("cy")) == build_chart(DAY, layout, style).marker.y


def test_shadow_layer_placement(layout, style):
    curve_d = str(build_smooth_path(DAY, layout))
    area_d = str(build_area_path(DAY, layout))

    def order(layer):
        root = ET.fromstring(_draw(layout, dataclasses.replace(style, shadow_layer=layer), DAY))
        kinds = []
        for p in root.findall("svg:path", NS):
            if p.get("d") == area_d:
                kinds.append("area")
            elif p.get("transform"):
                kinds.append("shadow")
            elif p.get("d") == curve_d:
                kinds.append("line")
        return kinds

    passes = ["shadow"] * len(style.shadow_passes)
    assert order("under-fill") == passes + ["area", "line"]
    assert order("between") == ["area"] + passes + ["line"]
    assert order("over-line") == ["area", "line"] + passes


def test_empty_samples_draw_background_only(layout, style):
    root = ET.fromstring(_draw(layout, style, []))
    assert root.findall("svg:path", NS) == []
    assert root.find("svg:circle", NS) is None
    assert root.find("svg:g", NS) is None
    # card, gradient, top and corner inner shades
    assert len(root.findall("svg:rect", NS)) == 4


def test_label_text_is_escaped(layout, style):
    doc = _draw(layout, style, [50], balance="<$ 1 & 2>")
    assert "&lt;$ 1 &amp; 2&gt;" in doc
    ET.fromstring(doc)


def test_write(tmp_path, layout, style):
    renderer = SvgRenderer(layout, style)
    renderer.draw_chart(build_chart([50, 60], layout, style))
    target = renderer.write(tmp_path / "chart.svg")
    assert target.read_text(encoding="utf-8") == renderer.document()


def test_inner_shadow_gradients(layout, style):
    root = ET.fromstring(_draw(layout, style, DAY))
    fills = [rect.get("fill") for rect in root.findall("svg:rect", NS)]
    assert fills[2:] == ["url(#topShade)", "url(#cornerShade)"]
    corner = root.find("svg:defs/svg:radialGradient[@id='cornerShade']", NS)
    assert corner.find("svg:stop", NS).get("stop-opacity") == "0.11"
    assert root.find("svg:rect[@fill='url(#cornerShade)']", NS).get("x") == "-12"


def test_left_shade_drawn_when_visible(layout, style):
    style = dataclasses.replace(style, left_shade_alpha=0.03, top_shade_alpha=0.0)
    root = ET.fromstring(_draw(layout, style, DAY))
    fills = [rect.get("fill") for rect in root.findall("svg:rect", NS)]
    assert "url(#leftShade)" in fills
    assert "url(#topShade)" not in fills


def test_text_weight_follows_style(layout, style):
    root = ET.fromstring(_draw(layout, dataclasses.replace(style, label_weight=700), DAY))
    assert {t.get("font-weight") for t in root.iter("{http://www.w3.org/2000/svg}text")} == {"700"}
