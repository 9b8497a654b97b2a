"""Minimal SVG document builder on top of ElementTree.

Builds the markup for weight & balance charts. Coordinates are pixels in the
SVG user space (origin top-left, y growing downward); callers do their own
value-to-pixel transform.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable

SVG_NS = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Decimal places kept for pixel coordinates
COORD_PRECISION = 3


def fmt_coord(value: float) -> str:
    return f"{value:.{COORD_PRECISION}f}"


def format_points(points: Iterable[tuple[float, float]]) -> str:
    """Format ``[(x, y), ...]`` as an SVG ``points`` attribute: ``"x1,y1 x2,y2"``."""
    return " ".join(f"{fmt_coord(x)},{fmt_coord(y)}" for x, y in points)


def _attrs(**kwargs: object) -> dict[str, str]:
    """Map Python keyword names to SVG attribute names.

    ``class_`` → ``class``, ``fill_opacity`` → ``fill-opacity``; ``None`` values
    are dropped and floats are formatted as coordinates.
    """
    result: dict[str, str] = {}
    for key, value in kwargs.items():
        if value is None:
            continue
        name = key.rstrip("_").replace("_", "-")
        result[name] = fmt_coord(value) if isinstance(value, float) else str(value)
    return result


class SvgDocument:
    """An SVG document of fixed pixel size."""

    def __init__(self, width_px: int, height_px: int):
        self.width_px = width_px
        self.height_px = height_px
        self._root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "version": "1.1",
                "width": str(width_px),
                "height": str(height_px),
                "viewBox": f"0 0 {width_px} {height_px}",
            },
        )

    def group(self, parent: ET.Element | None = None, **style: object) -> ET.Element:
        return ET.SubElement(self._parent(parent), "g", _attrs(**style))

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        parent: ET.Element | None = None,
        **style: object,
    ) -> ET.Element:
        return ET.SubElement(
            self._parent(parent),
            "rect",
            _attrs(x=float(x), y=float(y), width=float(width), height=float(height), **style),
        )

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        parent: ET.Element | None = None,
        **style: object,
    ) -> ET.Element:
        return ET.SubElement(
            self._parent(parent),
            "line",
            _attrs(x1=float(x1), y1=float(y1), x2=float(x2), y2=float(y2), **style),
        )

    def polygon(
        self,
        points: Iterable[tuple[float, float]],
        parent: ET.Element | None = None,
        **style: object,
    ) -> ET.Element:
        """Closed shape through ``points``; SVG closes the last edge itself."""
        return ET.SubElement(
            self._parent(parent), "polygon", {"points": format_points(points), **_attrs(**style)}
        )

    def circle(
        self,
        cx: float,
        cy: float,
        r: float,
        parent: ET.Element | None = None,
        **style: object,
    ) -> ET.Element:
        return ET.SubElement(
            self._parent(parent), "circle", _attrs(cx=float(cx), cy=float(cy), r=float(r), **style)
        )

    def text(
        self,
        x: float,
        y: float,
        content: str,
        parent: ET.Element | None = None,
        **style: object,
    ) -> ET.Element:
        el = ET.SubElement(self._parent(parent), "text", _attrs(x=float(x), y=float(y), **style))
        el.text = content
        return el

    def to_string(self) -> str:
        """Serialize with an XML declaration."""
        return XML_DECLARATION + ET.tostring(self._root, encoding="unicode")

    def _parent(self, parent: ET.Element | None) -> ET.Element:
        return self._root if parent is None else parent
