from typing import TYPE_CHECKING

from ..errors import ConnectorShapeError
from .conflict import Resolver, resolve
from .connector import ConnectorDescriptor, ConnectorShape

if TYPE_CHECKING:
    from .canvas import TextCanvas


HORIZONTAL_GLYPH = "-"
VERTICAL_GLYPH = "|"
CORNER_GLYPH = "+"


def _half_toward(start: int, end: int) -> int:
    # start + ceil((end - start) / 2), mirrored when end < start
    if start > end:
        return start - (start - end + 1) // 2
    return start + (end - start + 1) // 2


class ConnectorRenderer:
    """Draws a :class:`ConnectorDescriptor` onto a canvas.

    Every cell goes through the descriptor's conflict resolver. Writes use the
    canvas' bounds policy, so with ``BoundsPolicy.ERROR`` a connector leaving
    the canvas raises midway and leaves the segments drawn so far in place.
    """

    def __init__(self, canvas: "TextCanvas"):
        self.canvas = canvas
        self._painters = {
            ConnectorShape.H_LINE: self._draw_h,
            ConnectorShape.HV_LINE: self._draw_hv,
            ConnectorShape.HVH_LINE: self._draw_hvh,
            ConnectorShape.HVHC_LINE: self._draw_hvhc,
            ConnectorShape.HVHCT_LINE: self._draw_hvhc,
            ConnectorShape.V_LINE: self._draw_v,
            ConnectorShape.VH_LINE: self._draw_vh,
            ConnectorShape.VHV_LINE: self._draw_vhv,
            ConnectorShape.VHVU_LINE: self._draw_vhvu,
            ConnectorShape.VHVUT_LINE: self._draw_vhvu,
        }

    def draw(self, descriptor: ConnectorDescriptor) -> None:
        resolver = descriptor.conflict_resolver
        self._put(descriptor.from_x, descriptor.from_y, descriptor.from_end.symbol, resolver)
        self._put(descriptor.to_x, descriptor.to_y, descriptor.to_end.symbol, resolver)
        painter = self._painters.get(descriptor.shape)
        if painter is None:
            raise ConnectorShapeError(f"Unsupported connector shape: {descriptor.shape!r}")
        painter(descriptor)

    def _put(self, x: int, y: int, glyph: str, resolver: Resolver) -> None:
        self.canvas.set_cursor(x, y)
        self.canvas.write_char(resolve(resolver, self.canvas.read(), glyph))

    def _corner(self, x: int, y: int, resolver: Resolver) -> None:
        self._put(x, y, CORNER_GLYPH, resolver)

    def horizontal_line(self, from_x: int, to_x: int, y: int, resolver: Resolver, glyph: str = HORIZONTAL_GLYPH) -> None:
        if to_x < from_x:
            from_x, to_x = to_x, from_x
        for x in range(from_x, to_x + 1):
            self._put(x, y, glyph, resolver)

    def vertical_line(self, x: int, from_y: int, to_y: int, resolver: Resolver, glyph: str = VERTICAL_GLYPH) -> None:
        if to_y < from_y:
            from_y, to_y = to_y, from_y
        for y in range(from_y, to_y + 1):
            self._put(x, y, glyph, resolver)

    def _draw_h(self, d: ConnectorDescriptor) -> None:
        if d.suppress_horizontal_line:
            return
        y = d.line_from_y
        if d.line_from_y != d.line_to_y and d.line_from_x > d.line_to_x:
            y = d.line_to_y
        self.horizontal_line(d.line_from_x, d.line_to_x, y, d.conflict_resolver)

    def _draw_v(self, d: ConnectorDescriptor) -> None:
        if d.suppress_vertical_line:
            return
        x = d.line_from_x
        if d.line_from_x != d.line_to_x and d.line_from_y > d.line_to_y:
            x = d.line_to_x
        self.vertical_line(x, d.line_from_y, d.line_to_y, d.conflict_resolver)

    def _draw_hv(self, d: ConnectorDescriptor) -> None:
        resolver = d.conflict_resolver
        if not d.suppress_horizontal_line:
            self.horizontal_line(d.line_from_x, d.line_to_x, d.line_from_y, resolver)
        if not d.suppress_vertical_line:
            self.vertical_line(d.line_to_x, d.line_from_y, d.line_to_y, resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._corner(d.line_to_x, d.line_from_y, resolver)

    def _draw_vh(self, d: ConnectorDescriptor) -> None:
        resolver = d.conflict_resolver
        if not d.suppress_vertical_line:
            self.vertical_line(d.line_from_x, d.line_from_y, d.line_to_y, resolver)
        if not d.suppress_horizontal_line:
            self.horizontal_line(d.line_from_x, d.line_to_x, d.line_to_y, resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._corner(d.line_from_x, d.line_to_y, resolver)

    def _draw_hvh(self, d: ConnectorDescriptor) -> None:
        resolver = d.conflict_resolver
        mid_x = _half_toward(d.line_from_x, d.line_to_x)
        if not d.suppress_horizontal_line:
            self.horizontal_line(d.line_from_x, mid_x, d.line_from_y, resolver)
            if mid_x != d.line_to_x:
                self.horizontal_line(mid_x, d.line_to_x, d.line_to_y, resolver)
        if not d.suppress_vertical_line:
            self.vertical_line(mid_x, d.line_from_y, d.line_to_y, resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._corner(mid_x, d.line_from_y, resolver)
            self._corner(mid_x, d.line_to_y, resolver)

    def _draw_vhv(self, d: ConnectorDescriptor) -> None:
        resolver = d.conflict_resolver
        mid_y = _half_toward(d.line_from_y, d.line_to_y)
        if not d.suppress_vertical_line:
            self.vertical_line(d.line_from_x, d.line_from_y, mid_y, resolver)
            if mid_y != d.line_to_y:
                self.vertical_line(d.line_to_x, mid_y, d.line_to_y, resolver)
        if not d.suppress_horizontal_line:
            self.horizontal_line(d.line_from_x, d.line_to_x, mid_y, resolver)
        if not (d.suppress_horizontal_line and d.suppress_vertical_line):
            self._corner(d.line_from_x, mid_y, resolver)
            self._corner(d.line_to_x, mid_y, resolver)

    def _draw_hvhc(self, d: ConnectorDescriptor) -> None:
        resolver = d.conflict_resolver
        if d.shape is ConnectorShape.HVHCT_LINE:
            ext_x = max(d.line_from_x, d.line_to_x) + 2
        else:
            ext_x = min(d.line_from_x, d.line_to_x) - 2
        self.horizontal_line(d.line_from_x, ext_x, d.line_from_y, resolver)
        self.horizontal_line(d.line_to_x, ext_x, d.line_to_y, resolver)
        if not d.suppress_vertical_line:
            self.vertical_line(ext_x, d.line_from_y, d.line_to_y, resolver)
        self._corner(ext_x, d.line_from_y, resolver)
        self._corner(ext_x, d.line_to_y, resolver)

    def _draw_vhvu(self, d: ConnectorDescriptor) -> None:
        resolver = d.conflict_resolver
        if d.shape is ConnectorShape.VHVUT_LINE:
            ext_y = min(d.line_from_y, d.line_to_y) - 1
        else:
            ext_y = max(d.line_from_y, d.line_to_y) + 1
        self.vertical_line(d.line_from_x, d.line_from_y, ext_y, resolver)
        self.vertical_line(d.line_to_x, d.line_to_y, ext_y, resolver)
        if not d.suppress_horizontal_line:
            self.horizontal_line(d.line_from_x, d.line_to_x, ext_y, resolver)
        self._corner(d.line_from_x, ext_y, resolver)
        self._corner(d.line_to_x, ext_y, resolver)
