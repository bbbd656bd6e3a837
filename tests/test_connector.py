"""Tests for connector shape selection, geometry and conflict resolution."""

from __future__ import annotations

import dataclasses

import pytest

from asciicanvas import (
    BoundsPolicy,
    ConfigurationError,
    ConflictResolver,
    ConnectorDescriptor,
    ConnectorShape,
    ConnectorShapeError,
    EndType,
    OutOfBoundsError,
    Side,
    TextCanvas,
    select_connector_shape,
)
from asciicanvas.canvas_components.conflict import resolve


def _end(name: str) -> EndType:
    return EndType.for_name(name)


# ---------------------------------------------------------------------------
# end types
# ---------------------------------------------------------------------------


class TestEndType:
    @pytest.mark.parametrize(
        "name, side, symbol, special",
        [
            ("left_plain", Side.LEFT, "-", False),
            ("right_plain", Side.RIGHT, "-", False),
            ("top_plain", Side.TOP, "|", False),
            ("bottom_plain", Side.BOTTOM, "|", False),
            ("left_arrow", Side.LEFT, ">", True),
            ("right_arrow", Side.RIGHT, "<", True),
            ("top_arrow", Side.TOP, "V", True),
            ("bottom_arrow", Side.BOTTOM, "A", True),
            ("top_plus", Side.TOP, "+", True),
            ("Bottom-Plus", Side.BOTTOM, "+", True),
        ],
    )
    def test_for_name(self, name, side, symbol, special) -> None:
        end = EndType.for_name(name)
        assert end.side is side
        assert end.symbol == symbol
        assert end.has_special_end_symbol() is special

    def test_for_name_passes_end_types_through(self) -> None:
        end = EndType.arrow(Side.LEFT)
        assert EndType.for_name(end) is end

    @pytest.mark.parametrize("name", ["middle_arrow", "left_dash", "left", ""])
    def test_unknown_names(self, name) -> None:
        with pytest.raises(ValueError):
            EndType.for_name(name)


# ---------------------------------------------------------------------------
# shape selection
# ---------------------------------------------------------------------------


class TestShapeSelection:
    @pytest.mark.parametrize(
        "from_side, to_side, shape",
        [
            (Side.LEFT, Side.LEFT, ConnectorShape.HVHC_LINE),
            (Side.LEFT, Side.RIGHT, ConnectorShape.HVH_LINE),
            (Side.LEFT, Side.TOP, ConnectorShape.HV_LINE),
            (Side.LEFT, Side.BOTTOM, ConnectorShape.HV_LINE),
            (Side.RIGHT, Side.LEFT, ConnectorShape.HVH_LINE),
            (Side.RIGHT, Side.RIGHT, ConnectorShape.HVHCT_LINE),
            (Side.RIGHT, Side.TOP, ConnectorShape.HV_LINE),
            (Side.RIGHT, Side.BOTTOM, ConnectorShape.HV_LINE),
            (Side.TOP, Side.LEFT, ConnectorShape.VH_LINE),
            (Side.TOP, Side.RIGHT, ConnectorShape.VH_LINE),
            (Side.TOP, Side.TOP, ConnectorShape.VHVUT_LINE),
            (Side.TOP, Side.BOTTOM, ConnectorShape.VHV_LINE),
            (Side.BOTTOM, Side.LEFT, ConnectorShape.VH_LINE),
            (Side.BOTTOM, Side.RIGHT, ConnectorShape.VH_LINE),
            (Side.BOTTOM, Side.TOP, ConnectorShape.VHV_LINE),
            (Side.BOTTOM, Side.BOTTOM, ConnectorShape.VHVU_LINE),
        ],
    )
    def test_side_table(self, from_side, to_side, shape) -> None:
        from_end = EndType.plain(from_side)
        to_end = EndType.arrow(to_side)
        assert select_connector_shape(from_end, to_end, 0, 0, 5, 5) is shape

    def test_horizontal_collapses_on_same_row(self) -> None:
        shape = select_connector_shape(_end("right_plain"), _end("left_plain"), 0, 3, 9, 3)
        assert shape is ConnectorShape.H_LINE
        shape = select_connector_shape(_end("left_plain"), _end("right_plain"), 9, 3, 0, 3)
        assert shape is ConnectorShape.H_LINE

    def test_vertical_collapses_on_same_column(self) -> None:
        shape = select_connector_shape(_end("bottom_plain"), _end("top_plain"), 4, 0, 4, 9)
        assert shape is ConnectorShape.V_LINE
        shape = select_connector_shape(_end("top_plain"), _end("bottom_plain"), 4, 9, 4, 0)
        assert shape is ConnectorShape.V_LINE

    def test_c_and_u_shapes_never_collapse(self) -> None:
        shape = select_connector_shape(_end("left_plain"), _end("left_plain"), 0, 3, 9, 3)
        assert shape is ConnectorShape.HVHC_LINE
        shape = select_connector_shape(_end("top_plain"), _end("top_plain"), 4, 0, 4, 9)
        assert shape is ConnectorShape.VHVUT_LINE

    def test_unknown_side(self) -> None:
        odd = EndType("diagonal", "x")
        with pytest.raises(ConnectorShapeError):
            select_connector_shape(odd, _end("left_plain"), 0, 0, 5, 5)


# ---------------------------------------------------------------------------
# descriptor geometry
# ---------------------------------------------------------------------------


class TestConnectorDescriptor:
    def test_plain_ends_keep_extents(self) -> None:
        d = ConnectorDescriptor.create(_end("right_plain"), 0, 0, _end("left_plain"), 9, 0)
        assert d.shape is ConnectorShape.H_LINE
        assert (d.line_from_x, d.line_from_y, d.line_to_x, d.line_to_y) == (0, 0, 9, 0)
        assert not d.suppress_horizontal_line
        assert d.suppress_vertical_line

    def test_special_ends_shorten_toward_each_other(self) -> None:
        d = ConnectorDescriptor.create(_end("right_arrow"), 16, 8, _end("left_arrow"), 25, 8)
        assert (d.line_from_x, d.line_to_x) == (17, 24)
        d = ConnectorDescriptor.create(_end("left_arrow"), 25, 8, _end("right_arrow"), 16, 8)
        assert (d.line_from_x, d.line_to_x) == (24, 17)

    def test_adjacent_special_ends_suppress_line(self) -> None:
        d = ConnectorDescriptor.create(_end("right_arrow"), 16, 6, _end("left_arrow"), 17, 6)
        assert d.suppress_horizontal_line

    def test_coincident_points_keep_line(self) -> None:
        d = ConnectorDescriptor.create(_end("right_arrow"), 16, 5, _end("left_arrow"), 16, 5)
        assert not d.suppress_horizontal_line
        assert (d.line_from_x, d.line_to_x) == (16, 16)

    def test_short_vertical_leg_suppressed(self) -> None:
        d = ConnectorDescriptor.create(_end("right_plain"), 0, 0, _end("left_plain"), 6, 1)
        assert d.shape is ConnectorShape.HVH_LINE
        assert d.suppress_vertical_line
        canvas = TextCanvas(10, 3)
        canvas.draw_line(0, 0, 6, 1, "right_plain", "left_plain")
        assert "|" not in canvas.export()

    def test_short_horizontal_leg_suppressed(self) -> None:
        d = ConnectorDescriptor.create(_end("bottom_plain"), 5, 0, _end("top_plain"), 6, 5)
        assert d.shape is ConnectorShape.VHV_LINE
        assert d.suppress_horizontal_line
        assert not d.suppress_vertical_line

    def test_c_shape_moves_line_off_the_symbol(self) -> None:
        d = ConnectorDescriptor.create(_end("left_arrow"), 10, 2, _end("left_arrow"), 10, 6)
        assert d.shape is ConnectorShape.HVHC_LINE
        assert (d.line_from_x, d.line_to_x) == (9, 9)
        assert not d.suppress_vertical_line

    def test_turned_u_shape_moves_line_off_the_symbol(self) -> None:
        d = ConnectorDescriptor.create(_end("top_plus"), 2, 10, _end("top_plain"), 8, 10)
        assert d.shape is ConnectorShape.VHVUT_LINE
        assert (d.line_from_y, d.line_to_y) == (9, 10)
        assert not d.suppress_horizontal_line

    def test_deterministic(self) -> None:
        args = (_end("bottom_arrow"), 3, 4, _end("left_plus"), 20, 11)
        assert ConnectorDescriptor.create(*args) == ConnectorDescriptor.create(*args)

    def test_frozen(self) -> None:
        d = ConnectorDescriptor.create(_end("right_plain"), 0, 0, _end("left_plain"), 9, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.line_from_x = 3


# ---------------------------------------------------------------------------
# drawing onto a canvas
# ---------------------------------------------------------------------------


class TestDrawLine:
    def test_straight_line(self) -> None:
        canvas = TextCanvas(10, 1)
        descriptor = canvas.draw_line(0, 0, 9, 0, "right_plain", "left_plain")
        assert canvas.export() == "----------"
        assert descriptor.shape is ConnectorShape.H_LINE
        assert descriptor.conflict_resolver is ConflictResolver.OVERWRITE

    def test_end_types_as_objects(self) -> None:
        canvas = TextCanvas(5, 1)
        canvas.draw_line(0, 0, 4, 0, EndType.arrow(Side.RIGHT), EndType.arrow(Side.LEFT))
        assert canvas.export() == "<--->"

    def test_preserve_keeps_label(self) -> None:
        canvas = TextCanvas(60, 3)
        canvas.set_cursor(35, 1)
        canvas.draw_box("none", 7, 1, "Comment")
        canvas.draw_line(34, 1, 42, 1, "right_plain", "left_plain", ConflictResolver.PRESERVE)
        assert canvas.rows()[1] == " " * 34 + "-Comment-" + " " * 17

    def test_overwrite_replaces_label(self) -> None:
        canvas = TextCanvas(60, 3)
        canvas.set_cursor(35, 1)
        canvas.draw_box("none", 7, 1, "Comment")
        canvas.draw_line(34, 1, 42, 1, "right_plain", "left_plain")
        assert canvas.rows()[1].strip() == "-" * 9

    def test_preserve_at_crossing(self) -> None:
        canvas = TextCanvas(9, 5)
        canvas.draw_line(0, 2, 8, 2, "right_plain", "left_plain")
        canvas.draw_line(4, 0, 4, 4, "bottom_plain", "top_plain", ConflictResolver.PRESERVE)
        assert canvas.rows()[2] == "---------"
        assert canvas.rows()[1] == "    |    "

    def test_custom_resolver(self) -> None:
        def crossing(existing: str, proposed: str) -> str:
            if {existing, proposed} == {"-", "|"}:
                return "*"
            return proposed

        canvas = TextCanvas(9, 5)
        canvas.draw_line(0, 2, 8, 2, "right_plain", "left_plain")
        canvas.draw_line(4, 0, 4, 4, "bottom_plain", "top_plain", crossing)
        assert canvas.export() == "\n".join(
            ["    |    ", "    |    ", "----*----", "    |    ", "    |    "]
        )

    def test_unknown_end_name(self) -> None:
        canvas = TextCanvas(5, 5)
        with pytest.raises(ConfigurationError):
            canvas.draw_line(0, 0, 4, 4, "left_wave", "top_plain")

    def test_resolver_must_be_callable(self) -> None:
        canvas = TextCanvas(5, 5)
        with pytest.raises(ConfigurationError):
            canvas.draw_line(0, 0, 4, 0, "right_plain", "left_plain", "preserve")

    def test_leaving_canvas_raises_midway(self) -> None:
        canvas = TextCanvas(10, 5)
        with pytest.raises(OutOfBoundsError):
            canvas.draw_line(1, 1, 1, 3, "left_plain", "left_plain")
        # end symbols were drawn before the line left the canvas
        assert canvas.rows()[1] == " -        "
        assert canvas.rows()[3] == " -        "

    def test_leaving_canvas_ignored(self) -> None:
        canvas = TextCanvas(10, 5, BoundsPolicy.IGNORE)
        canvas.draw_line(1, 1, 1, 3, "left_plain", "left_plain")
        assert canvas.rows()[1] == "--        "
        assert canvas.rows()[2] == "          "
        assert canvas.rows()[3] == "--        "


# ---------------------------------------------------------------------------
# conflict resolvers
# ---------------------------------------------------------------------------


class TestConflictResolver:
    def test_overwrite(self) -> None:
        assert ConflictResolver.OVERWRITE("a", "-") == "-"
        assert ConflictResolver.OVERWRITE(" ", "-") == "-"

    def test_preserve(self) -> None:
        assert ConflictResolver.PRESERVE("a", "-") == "a"
        assert ConflictResolver.PRESERVE(" ", "-") == "-"

    def test_missing_cell_never_conflicts(self) -> None:
        assert resolve(ConflictResolver.PRESERVE, None, "|") == "|"
        assert resolve(lambda existing, proposed: "?", None, "|") == "|"
        assert resolve(lambda existing, proposed: "?", "x", "|") == "?"
