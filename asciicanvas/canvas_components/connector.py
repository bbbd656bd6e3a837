import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..errors import ConnectorShapeError
from .conflict import ConflictResolver, Resolver
from .core import EndType, Side

LOGGER = logging.getLogger(__name__)


class ConnectorShape(Enum):
    """The ten ways two points on a canvas get connected.

    Letters name the segments in drawing order (H horizontal, V vertical).
    ``C`` shapes connect two left or two right sides, ``U`` shapes two top or
    two bottom sides; ``T`` marks the turned variant::

        H    (1)-------(2)

        HV   (1)---+        HVH  (1)---+        HVHC   +---(1)
                   |                   |               |
                  (2)                  +---(2)         +---(2)

        VHV  (1)            VHVU (1)    (2)
              |                   |      |
              +---+               +------+
                  |
                 (2)
    """

    H_LINE = "h"
    HV_LINE = "hv"
    HVH_LINE = "hvh"
    HVHC_LINE = "hvhc"
    HVHCT_LINE = "hvhct"
    V_LINE = "v"
    VH_LINE = "vh"
    VHV_LINE = "vhv"
    VHVU_LINE = "vhvu"
    VHVUT_LINE = "vhvut"


_SHAPE_TABLE: Dict[Tuple[Side, Side], ConnectorShape] = {
    (Side.LEFT, Side.LEFT): ConnectorShape.HVHC_LINE,
    (Side.LEFT, Side.RIGHT): ConnectorShape.HVH_LINE,
    (Side.LEFT, Side.TOP): ConnectorShape.HV_LINE,
    (Side.LEFT, Side.BOTTOM): ConnectorShape.HV_LINE,
    (Side.RIGHT, Side.LEFT): ConnectorShape.HVH_LINE,
    (Side.RIGHT, Side.RIGHT): ConnectorShape.HVHCT_LINE,
    (Side.RIGHT, Side.TOP): ConnectorShape.HV_LINE,
    (Side.RIGHT, Side.BOTTOM): ConnectorShape.HV_LINE,
    (Side.TOP, Side.LEFT): ConnectorShape.VH_LINE,
    (Side.TOP, Side.RIGHT): ConnectorShape.VH_LINE,
    (Side.TOP, Side.TOP): ConnectorShape.VHVUT_LINE,
    (Side.TOP, Side.BOTTOM): ConnectorShape.VHV_LINE,
    (Side.BOTTOM, Side.LEFT): ConnectorShape.VH_LINE,
    (Side.BOTTOM, Side.RIGHT): ConnectorShape.VH_LINE,
    (Side.BOTTOM, Side.TOP): ConnectorShape.VHV_LINE,
    (Side.BOTTOM, Side.BOTTOM): ConnectorShape.VHVU_LINE,
}


def select_connector_shape(
    from_end: EndType, to_end: EndType, from_x: int, from_y: int, to_x: int, to_y: int
) -> ConnectorShape:
    try:
        shape = _SHAPE_TABLE[(from_end.side, to_end.side)]
    except KeyError:
        raise ConnectorShapeError(
            f"No connector shape for {from_end.side!r} -> {to_end.side!r}."
        ) from None
    if shape is ConnectorShape.HVH_LINE and from_y == to_y:
        return ConnectorShape.H_LINE
    if shape is ConnectorShape.VHV_LINE and from_x == to_x:
        return ConnectorShape.V_LINE
    return shape


def _toward(start: int, end: int) -> int:
    if start < end:
        return 1
    if start > end:
        return -1
    return 0


class _Geometry:
    """Mutable scratch state while the segment extents are worked out."""

    def __init__(self, from_end: EndType, from_x: int, from_y: int, to_end: EndType, to_x: int, to_y: int, shape: ConnectorShape):
        self.from_end = from_end
        self.to_end = to_end
        self.from_x = from_x
        self.from_y = from_y
        self.to_x = to_x
        self.to_y = to_y
        self.shape = shape
        self.line_from_x = from_x
        self.line_from_y = from_y
        self.line_to_x = to_x
        self.line_to_y = to_y
        self.suppress_horizontal = False
        self.suppress_vertical = False

        calculators = {
            ConnectorShape.H_LINE: self._horizontal_to_horizontal,
            ConnectorShape.HVH_LINE: self._horizontal_to_horizontal,
            ConnectorShape.HV_LINE: self._horizontal_to_vertical,
            ConnectorShape.HVHC_LINE: self._c_shape,
            ConnectorShape.HVHCT_LINE: self._turned_c_shape,
            ConnectorShape.V_LINE: self._vertical_to_vertical,
            ConnectorShape.VHV_LINE: self._vertical_to_vertical,
            ConnectorShape.VH_LINE: self._vertical_to_horizontal,
            ConnectorShape.VHVU_LINE: self._u_shape,
            ConnectorShape.VHVUT_LINE: self._turned_u_shape,
        }
        if shape not in calculators:
            raise ConnectorShapeError(f"Unsupported connector shape: {shape!r}")
        calculators[shape]()

    @property
    def from_special(self) -> bool:
        return self.from_end.has_special_end_symbol()

    @property
    def to_special(self) -> bool:
        return self.to_end.has_special_end_symbol()

    def _coincident(self) -> bool:
        return self.from_x == self.to_x and self.from_y == self.to_y

    # shortening, always towards the opposite endpoint, never outwards

    def _shorten_from_x(self) -> None:
        self.line_from_x += _toward(self.from_x, self.to_x)

    def _shorten_from_y(self) -> None:
        self.line_from_y += _toward(self.from_y, self.to_y)

    def _shorten_to_x(self) -> None:
        self.line_to_x -= _toward(self.from_x, self.to_x)

    def _shorten_to_y(self) -> None:
        self.line_to_y -= _toward(self.from_y, self.to_y)

    # H, HVH

    def _horizontal_to_horizontal(self) -> None:
        allowance = int(self.from_special) + int(self.to_special)
        if abs(self.from_x - self.to_x) - allowance < 0:
            if not self._coincident():
                self.suppress_horizontal = True
        else:
            if self.from_special:
                self._shorten_from_x()
            if self.to_special:
                self._shorten_to_x()

        if abs(self.from_y - self.to_y) < 2:
            self.suppress_vertical = True
        elif abs(self.from_x - self.to_x) == 1 and (
            self.shape is ConnectorShape.H_LINE or (self.from_special and self.to_special)
        ):
            self._shorten_to_y()

    # HV

    def _horizontal_to_vertical(self) -> None:
        aligned_y = self.from_y == self.to_y
        allowance = int(self.from_special) + int(aligned_y and self.to_special)
        if abs(self.from_x - self.to_x) - allowance < 0:
            self.suppress_horizontal = True
        else:
            if self.from_special:
                self._shorten_from_x()
            if aligned_y and self.to_special:
                self._shorten_to_x()

        aligned_x = self.from_x == self.to_x
        allowance = int(self.to_special) + int(aligned_x and self.from_special)
        if abs(self.from_y - self.to_y) - allowance < 0:
            self.suppress_vertical = True
        else:
            if self.to_special:
                self._shorten_to_y()
            if aligned_x and self.to_special:
                self._shorten_from_y()

    # HVHC, HVHCT

    def _c_shape(self) -> None:
        if self.from_special:
            self.line_from_x -= 1
        if self.to_special:
            self.line_to_x -= 1
        if abs(self.from_y - self.to_y) < 2:
            self.suppress_vertical = True

    def _turned_c_shape(self) -> None:
        if self.from_special:
            self.line_from_x += 1
        if self.to_special:
            self.line_to_x += 1
        if abs(self.from_y - self.to_y) < 2:
            self.suppress_vertical = True

    # V, VHV

    def _vertical_to_vertical(self) -> None:
        allowance = int(self.from_special) + int(self.to_special)
        if abs(self.from_y - self.to_y) - allowance < 0:
            if not self._coincident():
                self.suppress_vertical = True
        else:
            if self.from_special:
                self._shorten_from_y()
            if self.to_special:
                self._shorten_to_y()

        if abs(self.from_x - self.to_x) < 2:
            self.suppress_horizontal = True
        elif abs(self.from_y - self.to_y) == 1 and (
            self.shape is ConnectorShape.V_LINE or (self.from_special and self.to_special)
        ):
            self._shorten_to_x()

    # VH

    def _vertical_to_horizontal(self) -> None:
        aligned_x = self.from_x == self.to_x
        allowance = int(self.from_special) + int(aligned_x and self.to_special)
        if abs(self.from_y - self.to_y) - allowance < 0:
            self.suppress_vertical = True
        else:
            if self.from_special:
                self._shorten_from_y()
            if aligned_x and self.to_special:
                self._shorten_to_y()

        aligned_y = self.from_y == self.to_y
        allowance = int(self.to_special) + int(aligned_y and self.from_special)
        if abs(self.from_x - self.to_x) - allowance < 0:
            self.suppress_horizontal = True
        else:
            if self.to_special:
                self._shorten_to_x()
            if aligned_y and self.from_special:
                self._shorten_from_x()

    # VHVU, VHVUT

    def _u_shape(self) -> None:
        if self.from_special:
            self.line_from_y += 1
        if self.to_special:
            self.line_to_y += 1
        if abs(self.from_x - self.to_x) < 2:
            self.suppress_horizontal = True

    def _turned_u_shape(self) -> None:
        if self.from_special:
            self.line_from_y -= 1
        if self.to_special:
            self.line_to_y -= 1
        if abs(self.from_x - self.to_x) < 2:
            self.suppress_horizontal = True


@dataclass(frozen=True)
class ConnectorDescriptor:
    """Everything needed to draw one connector, fixed at construction.

    ``line_*`` hold the extents actually drawn, i.e. the raw coordinates
    after making room for special end symbols.
    """

    from_x: int
    from_y: int
    to_x: int
    to_y: int
    from_end: EndType
    to_end: EndType
    shape: ConnectorShape
    line_from_x: int
    line_from_y: int
    line_to_x: int
    line_to_y: int
    suppress_horizontal_line: bool
    suppress_vertical_line: bool
    conflict_resolver: Resolver = ConflictResolver.OVERWRITE

    @classmethod
    def create(
        cls,
        from_end: EndType,
        from_x: int,
        from_y: int,
        to_end: EndType,
        to_x: int,
        to_y: int,
        conflict_resolver: Resolver = ConflictResolver.OVERWRITE,
    ) -> "ConnectorDescriptor":
        shape = select_connector_shape(from_end, to_end, from_x, from_y, to_x, to_y)
        geometry = _Geometry(from_end, from_x, from_y, to_end, to_x, to_y, shape)
        LOGGER.debug(
            "Connector (%s, %s) -> (%s, %s) uses shape %s", from_x, from_y, to_x, to_y, shape.name
        )
        return cls(
            from_x=from_x,
            from_y=from_y,
            to_x=to_x,
            to_y=to_y,
            from_end=from_end,
            to_end=to_end,
            shape=shape,
            line_from_x=geometry.line_from_x,
            line_from_y=geometry.line_from_y,
            line_to_x=geometry.line_to_x,
            line_to_y=geometry.line_to_y,
            suppress_horizontal_line=geometry.suppress_horizontal,
            suppress_vertical_line=geometry.suppress_vertical,
            conflict_resolver=conflict_resolver,
        )
