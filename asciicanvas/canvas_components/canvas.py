import logging
from typing import List, Optional, Union

from rich.text import Text
from wcwidth import wcwidth

from ..errors import ConfigurationError, InvalidDimensionError, InvalidGlyphError, OutOfBoundsError
from .alignment import TextAlignment, split_lines
from .conflict import ConflictResolver, Resolver
from .connector import ConnectorDescriptor
from .core import BoundsPolicy, BoxStyle, EndType, Side
from .renderer import ConnectorRenderer

LOGGER = logging.getLogger(__name__)


class TextCanvas:
    """Fixed-size character grid with a cursor.

    All drawing happens at the cursor position. The cursor may be moved
    anywhere, bounds are only checked when writing: ``BoundsPolicy.ERROR``
    raises :class:`OutOfBoundsError`, ``BoundsPolicy.IGNORE`` silently drops
    the characters that fall outside.
    """

    def __init__(
        self,
        width: int,
        height: int,
        bounds_policy: Union[BoundsPolicy, str] = BoundsPolicy.ERROR,
    ):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer.")
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(
                f"Canvas dimensions must be positive, given: width={width}, height={height}."
            )

        if isinstance(bounds_policy, str):
            try:
                bounds_policy = BoundsPolicy(bounds_policy.lower().strip())
            except ValueError:
                raise ConfigurationError(f"Unknown bounds policy: {bounds_policy}") from None
        if not isinstance(bounds_policy, BoundsPolicy):
            raise ConfigurationError("bounds_policy must be a BoundsPolicy or its name.")

        self._width = width
        self._height = height
        self.bounds_policy = bounds_policy
        self.grid = [[" " for _ in range(width)] for _ in range(height)]
        self.cursor_x = 0
        self.cursor_y = 0
        self._connectors = ConnectorRenderer(self)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        for row in self.grid:
            for x in range(self._width):
                row[x] = " "
        self.set_cursor(0, 0)

    def set_cursor(self, x: int, y: int) -> None:
        self.set_cursor_x(x)
        self.set_cursor_y(y)

    def set_cursor_x(self, x: int) -> None:
        self.cursor_x = x

    def set_cursor_y(self, y: int) -> None:
        self.cursor_y = y

    def is_cursor_in_bounds(self) -> bool:
        return 0 <= self.cursor_x < self._width and 0 <= self.cursor_y < self._height

    def read(self, advance: bool = False) -> Optional[str]:
        char = None
        if self.is_cursor_in_bounds():
            char = self.grid[self.cursor_y][self.cursor_x]
        if advance:
            self.cursor_x += 1
        return char

    def _check_glyph(self, ch: str) -> None:
        if not isinstance(ch, str) or len(ch) != 1 or wcwidth(ch) != 1:
            raise InvalidGlyphError(
                f"Expected a single one-column character, given: {ch!r}."
            )

    def _bounds_message(self, x: int, y: int, payload: str) -> str:
        return (
            f"Cannot write outside canvas bounds (width={self._width}, height={self._height}) "
            f"at cursor ({x}, {y}), text={payload!r}."
        )

    def write_char(self, ch: str) -> None:
        self._check_glyph(ch)
        if not self.is_cursor_in_bounds():
            if self.bounds_policy is BoundsPolicy.ERROR:
                raise OutOfBoundsError(self._bounds_message(self.cursor_x, self.cursor_y, ch))
            LOGGER.debug("Dropped %r at (%s, %s), outside canvas", ch, self.cursor_x, self.cursor_y)
            return
        self.grid[self.cursor_y][self.cursor_x] = ch
        self.cursor_x += 1

    def write_string(self, s: str, trim_whitespace_edges: bool = False) -> None:
        """Write ``s`` left to right starting at the cursor.

        With ``trim_whitespace_edges`` leading and trailing whitespace is
        skipped instead of written, which keeps whatever is underneath. The
        cursor still moves past skipped leading whitespace.
        """
        start = 0
        end = len(s)
        if trim_whitespace_edges:
            start = len(s) - len(s.lstrip())
            end = len(s.rstrip()) if s.strip() else start
        text = s[start:end]
        for ch in text:
            self._check_glyph(ch)

        first_x = self.cursor_x + start
        if self.bounds_policy is BoundsPolicy.ERROR and (
            first_x < 0
            or (text and first_x + len(text) > self._width)
            or self.cursor_y < 0
            or self.cursor_y >= self._height
        ):
            raise OutOfBoundsError(self._bounds_message(self.cursor_x, self.cursor_y, s))

        self.cursor_x = first_x
        dropped = 0
        for ch in text:
            if self.is_cursor_in_bounds():
                self.grid[self.cursor_y][self.cursor_x] = ch
            else:
                dropped += 1
            self.cursor_x += 1
        if dropped:
            LOGGER.debug(
                "Dropped %s of %s characters of %r, outside canvas", dropped, len(text), s
            )

    def fill_rect(self, width: int, height: int, ch: str) -> None:
        left = self.cursor_x
        top = self.cursor_y
        line = ch * width
        for y in range(top, top + height):
            self.set_cursor(left, y)
            self.write_string(line)

    def draw_box(
        self,
        style: Union[BoxStyle, str],
        width: int,
        height: int,
        label: Optional[str] = None,
        alignment: TextAlignment = TextAlignment.CENTER_CENTER,
        transparent: bool = False,
    ) -> None:
        """Draw a box with its upper left corner at the cursor.

        Unless ``transparent`` the whole area is blanked first. A label is
        laid out inside the border, or over the full area for borderless
        styles.
        """
        if isinstance(style, str):
            try:
                style = BoxStyle.for_style(style)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        has_label = bool(label and label.strip())
        if has_label:
            self._check_label(label)

        left = self.cursor_x
        top = self.cursor_y
        if not transparent:
            self.fill_rect(width, height, " ")

        if not style.is_borderless():
            self._draw_border(style, width, height, left, top)
            if has_label:
                self.set_cursor(left + 1, top + 1)
                self.draw_label(width - 2, height - 2, label, alignment, transparent)
        elif has_label:
            self.set_cursor(left, top)
            self.draw_label(width, height, label, alignment, transparent)

    def _draw_border(self, style: BoxStyle, width: int, height: int, left: int, top: int) -> None:
        right = left + width - 1
        bottom = top + height - 1

        if style.has_side_line(Side.TOP):
            self._put(left, top, style.corner)
            self._put(right, top, style.corner)
        if style.has_side_line(Side.BOTTOM):
            self._put(left, bottom, style.corner)
            self._put(right, bottom, style.corner)

        for x in range(left + 1, right):
            if style.has_side_line(Side.TOP):
                self._put(x, top, style.horizontal)
            if style.has_side_line(Side.BOTTOM):
                self._put(x, bottom, style.horizontal)

        for y in range(top + 1, bottom):
            if style.has_side_line(Side.LEFT):
                self._put(left, y, style.vertical)
            if style.has_side_line(Side.RIGHT):
                self._put(right, y, style.vertical)

    def _check_label(self, label: str) -> None:
        # blank-like characters become spaces during layout, the rest must fit one column
        for line in split_lines(label):
            for ch in line:
                self._check_glyph(ch)

    def _put(self, x: int, y: int, ch: str) -> None:
        self.set_cursor(x, y)
        self.write_char(ch)

    def draw_label(
        self,
        width: int,
        height: int,
        label: str,
        alignment: TextAlignment = TextAlignment.CENTER_CENTER,
        transparent: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            return
        self._check_label(label)
        left = self.cursor_x
        top = self.cursor_y
        for offset, line in enumerate(alignment.apply(label, width, height)):
            self.set_cursor(left, top + offset)
            self.write_string(line, trim_whitespace_edges=transparent)

    def draw_line(
        self,
        from_x: int,
        from_y: int,
        to_x: int,
        to_y: int,
        from_end: Union[EndType, str],
        to_end: Union[EndType, str],
        conflict_resolver: Resolver = ConflictResolver.OVERWRITE,
    ) -> ConnectorDescriptor:
        """Connect two points, picking the connector shape from the end sides.

        ``conflict_resolver`` decides per cell between the existing and the
        new character, it also applies to the end symbols.
        """
        try:
            from_end = EndType.for_name(from_end)
            to_end = EndType.for_name(to_end)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        if not callable(conflict_resolver):
            raise ConfigurationError("conflict_resolver must be callable.")

        descriptor = ConnectorDescriptor.create(
            from_end, from_x, from_y, to_end, to_x, to_y, conflict_resolver
        )
        self._connectors.draw(descriptor)
        return descriptor

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.grid]

    def export(self) -> str:
        return "\n".join(self.rows())

    def __rich__(self) -> Text:
        return Text(self.export())

    def __str__(self) -> str:
        return self.export()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width={self._width}, height={self._height}, "
            f"bounds_policy={self.bounds_policy.name})"
        )
