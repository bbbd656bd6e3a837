from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Tuple, Union


class Side(Enum):

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class BoundsPolicy(Enum):

    IGNORE = "ignore"
    ERROR = "error"


ALL_SIDES: FrozenSet[Side] = frozenset(Side)


@dataclass(frozen=True)
class BoxStyle:
    """Border glyphs of a box and the sides that get a line."""

    horizontal: str = "-"
    vertical: str = "|"
    corner: str = "+"
    sides: FrozenSet[Side] = ALL_SIDES

    def has_side_line(self, side: Side) -> bool:
        return side in self.sides

    def is_borderless(self) -> bool:
        return not any(self.has_side_line(side) for side in Side)

    @classmethod
    def for_style(cls, style: str) -> "BoxStyle":
        key = style.lower().strip().replace("-", "_").replace(" ", "_")
        if key in _BOX_STYLES:
            return _BOX_STYLES[key]
        raise ValueError(f"Unknown box style: {style}")

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(_BOX_STYLES)


_TOP_BOTTOM = frozenset({Side.TOP, Side.BOTTOM})

_BOX_STYLES: Dict[str, BoxStyle] = {
    "thin": BoxStyle("-", "|", "+"),
    "double": BoxStyle("=", "=", "="),
    "hash": BoxStyle("#", "#", "#"),
    "asterisk": BoxStyle("*", "*", "*"),
    "dotted": BoxStyle(".", ":", "."),
    "dotted_2": BoxStyle(":", ":", ":"),
    "none": BoxStyle(" ", " ", " ", frozenset()),
    "bottom": BoxStyle("-", " ", "-", frozenset({Side.BOTTOM})),
    "bottom_double": BoxStyle("=", " ", "=", frozenset({Side.BOTTOM})),
    "top": BoxStyle("-", " ", "-", frozenset({Side.TOP})),
    "top_and_bottom": BoxStyle("-", " ", "-", _TOP_BOTTOM),
    "top_double": BoxStyle("=", " ", "=", frozenset({Side.TOP})),
    "top_and_bottom_double": BoxStyle("=", " ", "=", _TOP_BOTTOM),
    "top_and_bottom_double_side_thin": BoxStyle("=", "|", "="),
    "space": BoxStyle(" ", " ", " "),
}


_PLAIN_SYMBOLS = {Side.LEFT: "-", Side.RIGHT: "-", Side.TOP: "|", Side.BOTTOM: "|"}
_ARROW_SYMBOLS = {Side.LEFT: ">", Side.RIGHT: "<", Side.TOP: "V", Side.BOTTOM: "A"}


@dataclass(frozen=True)
class EndType:
    """One end of a connector: the box side it touches and the glyph drawn there.

    Special end symbols (arrows, plus) own their cell, the line stops next to
    them. Plain ends are drawn flush with the line.
    """

    side: Side
    symbol: str
    special: bool = False

    def has_special_end_symbol(self) -> bool:
        return self.special

    @classmethod
    def plain(cls, side: Side) -> "EndType":
        return cls(side, _PLAIN_SYMBOLS[side], False)

    @classmethod
    def arrow(cls, side: Side) -> "EndType":
        return cls(side, _ARROW_SYMBOLS[side], True)

    @classmethod
    def plus(cls, side: Side) -> "EndType":
        return cls(side, "+", True)

    @classmethod
    def for_name(cls, name: Union[str, "EndType"]) -> "EndType":
        """Resolve names like ``"left_arrow"`` or ``"top-plain"``."""
        if isinstance(name, EndType):
            return name
        key = name.lower().strip().replace("-", "_")
        side_name, _, kind = key.partition("_")
        factories = {"plain": cls.plain, "arrow": cls.arrow, "plus": cls.plus}
        try:
            side = Side(side_name)
        except ValueError:
            raise ValueError(f"Unknown connector end type: {name}") from None
        if kind not in factories:
            raise ValueError(f"Unknown connector end type: {name}")
        return factories[kind](side)
