"""Tests for SVG export of documents."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from tessellate.engine import TessellationConfig, run_command
from tessellate.scenegraph import Color, Document, GroupNode, Polygon
from tessellate.svg.serializer import document_bounds, document_to_svg, polygon_to_svg_dict

_NS = {"svg": "http://www.w3.org/2000/svg"}


def test_polygon_attributes():
    shape = Polygon(corner_count=4, width=10, height=10, fill=Color.parse("A09080"), opacity=0.5)
    attrs = polygon_to_svg_dict(shape)
    assert attrs["tag"] == "polygon"
    assert attrs["fill"] == "#a09080"
    assert attrs["stroke"] == "none"
    assert attrs["opacity"] == "0.5"
    assert len(attrs["points"].split()) == 4


def test_opaque_polygon_has_no_opacity_attr():
    attrs = polygon_to_svg_dict(Polygon())
    assert "opacity" not in attrs
    assert attrs["fill"] == "none"


def test_empty_document():
    svg = document_to_svg(Document())
    root = ET.fromstring(svg.split("\n", 1)[1])
    assert root.tag.endswith("svg")
    assert document_bounds(Document()) == (0.0, 0.0, 0.0, 0.0)


def test_tessellation_writes_one_group():
    document, _ = run_command("grid.tessellateDiamond", TessellationConfig(across=3, down=2))
    svg = document_to_svg(document, title="diamonds")
    root = ET.fromstring(svg.split("\n", 1)[1])
    groups = root.findall("svg:g", _NS)
    assert len(groups) == 1
    assert len(groups[0].findall("svg:polygon", _NS)) == 6
    assert root.find("svg:title", _NS).text == "diamonds"


def test_bounds_follow_group_offset():
    document = Document()
    g = GroupNode()
    document.root.add_child(g)
    shape = Polygon(corner_count=4, width=10, height=10)
    g.add_child(shape)
    g.move_in_parent_coordinates(100, 0)
    assert document_bounds(document) == pytest.approx((100, 0, 110, 10), abs=1e-9)
    assert 'transform="translate(100 0)"' in document_to_svg(document)


def test_viewbox_covers_bounds():
    document, _ = run_command("stamp.createHexagon")
    svg = document_to_svg(document)
    root = ET.fromstring(svg.split("\n", 1)[1])
    x, y, w, h = (float(v) for v in root.get("viewBox").split())
    xmin, ymin, xmax, ymax = document_bounds(document)
    assert x <= xmin and y <= ymin
    assert x + w >= xmax and y + h >= ymax
