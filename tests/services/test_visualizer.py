"""Tests for the envelope chart renderer."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from tests.builders import phdha, phdha_limits, single_load
from wnb.adapters.svg_writer import SVG_NS
from wnb.contracts.airplane import Airplane
from wnb.contracts.enums import PlotAxis, VisualizationFormat
from wnb.contracts.visualization import AxisRange, Canvas, DomainWindow, RenderConfig
from wnb.errors import DivisionByZeroError, RenderingError
from wnb.services.visualizer import (
    INSIDE_COLOR,
    OUTSIDE_COLOR,
    AxisTransform,
    axis_transforms,
    render,
)

NS = {"svg": SVG_NS}


def _config(cg=(400.0, 550.0), mass=(500.0, 800.0), size=(1000, 1000), **kwargs) -> RenderConfig:
    return RenderConfig(
        canvas=Canvas(width_px=size[0], height_px=size[1]),
        domain_window=DomainWindow(
            cg=AxisRange(min=cg[0], max=cg[1]),
            mass=AxisRange(min=mass[0], max=mass[1]),
        ),
        **kwargs,
    )


def _expected(x, mass_kg, cg=(400.0, 550.0), mass=(500.0, 800.0), size=(1000, 1000)):
    px = (x - cg[0]) / (cg[1] - cg[0]) * size[0]
    py = size[1] - (mass_kg - mass[0]) / (mass[1] - mass[0]) * size[1]
    return px, py


def _parse(markup: str) -> ET.Element:
    return ET.fromstring(markup.encode("utf-8"))


def _points(polygon: ET.Element) -> list[tuple[float, float]]:
    pairs = [p.split(",") for p in polygon.get("points").split()]
    return [(float(x), float(y)) for x, y in pairs]


class TestAxisTransform:
    def test_maps_window_onto_pixels(self):
        tf = AxisTransform(window=AxisRange(min=400.0, max=550.0), size_px=1000)
        assert tf(400.0) == 0.0
        assert tf(550.0) == pytest.approx(1000.0)
        assert tf(475.0) == pytest.approx(500.0)

    def test_inverted(self):
        tf = AxisTransform(window=AxisRange(min=500.0, max=800.0), size_px=600, inverted=True)
        assert tf(500.0) == 600.0
        assert tf(800.0) == pytest.approx(0.0)

    def test_extrapolates(self):
        tf = AxisTransform(window=AxisRange(min=0.0, max=10.0), size_px=100)
        assert tf(20.0) == pytest.approx(200.0)
        assert tf(-5.0) == pytest.approx(-50.0)

    def test_reversed_window_mirrors(self):
        tf = AxisTransform(window=AxisRange(min=550.0, max=400.0), size_px=1000)
        assert tf(550.0) == 0.0
        assert tf(400.0) == pytest.approx(1000.0)

    def test_zero_width_cg_rejected(self):
        with pytest.raises(RenderingError, match="Horizontal"):
            axis_transforms(_config(cg=(450.0, 450.0)))

    def test_zero_width_mass_rejected(self):
        with pytest.raises(RenderingError, match="Mass"):
            axis_transforms(_config(mass=(600.0, 600.0)))

    def test_overflowing_cg_width_rejected(self):
        with pytest.raises(RenderingError, match="Horizontal window is too wide"):
            axis_transforms(_config(cg=(-1e308, 1e308)))

    def test_overflowing_mass_width_rejected(self):
        with pytest.raises(RenderingError, match="Mass window is too wide"):
            axis_transforms(_config(mass=(-1e308, 1e308)))

    def test_value_without_finite_pixel_rejected(self):
        tf = AxisTransform(window=AxisRange(min=0.0, max=1e-300), size_px=1000)
        with pytest.raises(RenderingError, match="finite pixel"):
            tf(1e10)


class TestRender:
    def test_svg_document(self, airplane):
        visualization = render(airplane, _config())
        assert visualization.format == VisualizationFormat.SVG
        assert visualization.media_type == "image/svg+xml"
        assert visualization.markup.startswith("<?xml")

        root = _parse(visualization.markup)
        assert root.tag == f"{{{SVG_NS}}}svg"
        assert root.get("width") == "1000"
        assert root.get("viewBox") == "0 0 1000 1000"

    def test_envelope_corners(self, airplane):
        root = _parse(render(airplane, _config()).markup)
        polygon = root.find(".//svg:polygon[@class='envelope']", NS)
        assert polygon is not None

        expected = [
            _expected(427.0, 558.0),
            _expected(523.0, 558.0),
            _expected(523.0, 750.0),
            _expected(427.0, 750.0),
        ]
        for (x, y), (ex, ey) in zip(_points(polygon), expected, strict=True):
            assert x == pytest.approx(ex, abs=1e-3)
            assert y == pytest.approx(ey, abs=1e-3)

    def test_envelope_corners_in_reference_window(self, airplane):
        window = {"cg": (230.0, 420.0), "mass": (550.0, 760.0)}
        root = _parse(render(airplane, _config(**window)).markup)
        polygon = root.find(".//svg:polygon[@class='envelope']", NS)

        expected = [
            _expected(427.0, 558.0, **window),
            _expected(523.0, 558.0, **window),
            _expected(523.0, 750.0, **window),
            _expected(427.0, 750.0, **window),
        ]
        for (x, y), (ex, ey) in zip(_points(polygon), expected, strict=True):
            assert x == pytest.approx(ex, abs=1e-3)
            assert y == pytest.approx(ey, abs=1e-3)

    def test_envelope_corners_in_reference_window_mass_moment(self, airplane):
        window = {"cg": (230.0, 420.0), "mass": (550.0, 760.0)}
        config = _config(x_axis=PlotAxis.MASS_MOMENT, **window)
        root = _parse(render(airplane, config).markup)
        polygon = root.find(".//svg:polygon[@class='envelope']", NS)

        expected = [
            _expected(0.427 * 558.0, 558.0, **window),
            _expected(0.523 * 558.0, 558.0, **window),
            _expected(0.523 * 750.0, 750.0, **window),
            _expected(0.427 * 750.0, 750.0, **window),
        ]
        for (x, y), (ex, ey) in zip(_points(polygon), expected, strict=True):
            assert x == pytest.approx(ex, abs=1e-3)
            assert y == pytest.approx(ey, abs=1e-3)

    def test_overflowing_window_raises_instead_of_nan(self, airplane):
        with pytest.raises(RenderingError):
            render(airplane, _config(cg=(-1e308, 1e308), mass=(550.0, 760.0)))

    def test_loading_point(self, airplane):
        root = _parse(render(airplane, _config()).markup)
        circle = root.find(".//svg:circle[@class='loading']", NS)
        ex, ey = _expected(airplane.center_of_gravity().millimeters(), 745.6)
        assert float(circle.get("cx")) == pytest.approx(ex, abs=1e-3)
        assert float(circle.get("cy")) == pytest.approx(ey, abs=1e-3)
        assert circle.get("fill") == INSIDE_COLOR

    def test_outside_point_is_red(self):
        root = _parse(render(phdha(fuel_liters=62.0), _config()).markup)
        circle = root.find(".//svg:circle[@class='loading']", NS)
        assert circle.get("fill") == OUTSIDE_COLOR

    def test_point_outside_window_not_clipped(self, airplane):
        window = {"cg": (230.0, 420.0), "mass": (550.0, 760.0)}
        root = _parse(render(airplane, _config(**window)).markup)
        circle = root.find(".//svg:circle[@class='loading']", NS)
        ex, ey = _expected(airplane.center_of_gravity().millimeters(), 745.6, **window)
        assert float(circle.get("cx")) > 1000.0
        assert float(circle.get("cx")) == pytest.approx(ex, abs=1e-3)
        assert float(circle.get("cy")) == pytest.approx(ey, abs=1e-3)

    def test_non_square_canvas(self):
        airplane = single_load(0.475, 600.0)
        config = _config(size=(800, 400))
        root = _parse(render(airplane, config).markup)
        circle = root.find(".//svg:circle[@class='loading']", NS)
        ex, ey = _expected(475.0, 600.0, size=(800, 400))
        assert float(circle.get("cx")) == pytest.approx(ex, abs=1e-3)
        assert float(circle.get("cy")) == pytest.approx(ey, abs=1e-3)

    def test_mass_moment_axis(self, airplane):
        window = {"cg": (230.0, 420.0), "mass": (550.0, 760.0)}
        config = _config(x_axis=PlotAxis.MASS_MOMENT, **window)
        root = _parse(render(airplane, config).markup)

        circle = root.find(".//svg:circle[@class='loading']", NS)
        ex, _ = _expected(airplane.total_moment().kilogram_meters(), 745.6, **window)
        assert float(circle.get("cx")) == pytest.approx(ex, abs=1e-3)
        assert 0.0 < float(circle.get("cx")) < 1000.0

        polygon = root.find(".//svg:polygon[@class='envelope']", NS)
        first_x, _ = _points(polygon)[0]
        assert first_x == pytest.approx(_expected(0.427 * 558.0, 558.0, **window)[0], abs=1e-3)

        x_label = root.find(".//svg:text[@class='x-label']", NS)
        assert x_label.text == "Mass Moment [kg m]"

    def test_labels(self, airplane):
        root = _parse(render(airplane, _config()).markup)
        assert root.find(".//svg:text[@class='caption']", NS).text == "PHDHA"
        assert root.find(".//svg:text[@class='x-label']", NS).text == "Center of Gravity [mm]"
        assert root.find(".//svg:text[@class='y-label']", NS).text == "Mass [kg]"

    def test_title_overrides_callsign(self, airplane):
        root = _parse(render(airplane, _config(title="PH-DHA before departure")).markup)
        assert root.find(".//svg:text[@class='caption']", NS).text == "PH-DHA before departure"

    def test_grid_lines(self, airplane):
        root = _parse(render(airplane, _config()).markup)
        lines = root.findall(".//svg:g[@class='grid']/svg:line", NS)
        assert len(lines) == 22

    def test_zero_width_window(self, airplane):
        with pytest.raises(RenderingError):
            render(airplane, _config(mass=(700.0, 700.0)))

    def test_zero_mass(self):
        with pytest.raises(DivisionByZeroError):
            render(Airplane.new("EMPTY", [], phdha_limits()), _config())

    def test_deterministic(self, airplane):
        assert render(airplane, _config()).markup == render(airplane, _config()).markup
