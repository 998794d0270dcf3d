"""Write SVG markup for a scene graph document."""

from __future__ import annotations

from typing import Any

from shapely.ops import unary_union

from tessellate.scenegraph import ContainerNode, Document, Polygon, SceneNode
from tessellate.utils.geometry import to_shapely

_PAD = 1.0


def polygon_to_svg_dict(shape: Polygon) -> dict[str, Any]:
    """SVG attributes for one polygon, in its parent's coordinates."""
    attrs: dict[str, Any] = {
        "tag": "polygon",
        "id": shape.guid,
        "points": " ".join(f"{x:.2f},{y:.2f}" for x, y in shape.vertices()),
        "fill": shape.fill.to_hex() if shape.fill is not None else "none",
        "stroke": shape.stroke.to_hex() if shape.stroke is not None else "none",
    }
    if shape.opacity < 1.0:
        attrs["opacity"] = f"{shape.opacity:g}"
    return attrs


def document_bounds(document: Document) -> tuple[float, float, float, float]:
    """Union bounds of every polygon in document coordinates."""
    outlines = [to_shapely(points) for points in _absolute_outlines(document.root, 0.0, 0.0)]
    if not outlines:
        return (0.0, 0.0, 0.0, 0.0)
    return unary_union(outlines).bounds


def document_to_svg(document: Document, title: str = "") -> str:
    """Generate SVG markup: one <g> per group, one <polygon> per polygon."""
    xmin, ymin, xmax, ymax = document_bounds(document)
    w = round(xmax - xmin + 2 * _PAD, 2)
    h = round(ymax - ymin + 2 * _PAD, 2)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{xmin - _PAD:.2f} {ymin - _PAD:.2f} {w} {h}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]
    if title:
        lines.append(f"  <title>{title}</title>")

    for child in document.root.children:
        _write_node(child, lines, depth=1)

    lines.append("</svg>")
    return "\n".join(lines)


def _write_node(node: SceneNode, lines: list[str], depth: int) -> None:
    indent = "  " * depth
    if isinstance(node, Polygon):
        elem = polygon_to_svg_dict(node)
        tag = elem.pop("tag")
        attr_str = " ".join(f'{k}="{v}"' for k, v in elem.items())
        lines.append(f"{indent}<{tag} {attr_str} />")
    elif isinstance(node, ContainerNode):
        attrs = f'id="{node.guid}"'
        if node.x or node.y:
            attrs += f' transform="translate({node.x:g} {node.y:g})"'
        lines.append(f"{indent}<g {attrs}>")
        for child in node.children:
            _write_node(child, lines, depth + 1)
        lines.append(f"{indent}</g>")


def _absolute_outlines(container: ContainerNode, ox: float, oy: float):
    for child in container.children:
        if isinstance(child, Polygon):
            yield child.vertices() + (ox, oy)
        elif isinstance(child, ContainerNode):
            yield from _absolute_outlines(child, ox + child.x, oy + child.y)
