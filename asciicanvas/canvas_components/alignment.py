import re
from enum import Enum
from typing import List, Optional, Tuple

_LINE_BREAK = re.compile(r"\r?\n|\r")
# tabs, form feeds and other whitespace that is not a plain space
_BLANK = re.compile(r"[^\S ]")


def split_lines(text: str) -> List[str]:
    lines = [_BLANK.sub(" ", line) for line in _LINE_BREAK.split(str(text))]
    while len(lines) > 1 and not lines[-1]:
        lines.pop()
    return lines


class TextAlignment(Enum):
    """Where a label sits inside a ``width x height`` area.

    ``apply`` returns exactly ``height`` lines of exactly ``width``
    characters. Lines longer than ``width`` wrap onto the next line; text
    beyond ``height`` lines is dropped::

        CENTER_CENTER, 'text', 8, 3:   '        '
                                       '  text  '
                                       '        '
    """

    LEFT_TOP = ("left", "top")
    LEFT_CENTER = ("left", "center")
    LEFT_BOTTOM = ("left", "bottom")
    CENTER_TOP = ("center", "top")
    CENTER_CENTER = ("center", "center")
    CENTER_BOTTOM = ("center", "bottom")
    RIGHT_TOP = ("right", "top")
    RIGHT_CENTER = ("right", "center")
    RIGHT_BOTTOM = ("right", "bottom")

    @property
    def horizontal(self) -> str:
        return self.value[0]

    @property
    def vertical(self) -> str:
        return self.value[1]

    def align_line(self, s: str, width: int) -> str:
        if self.horizontal == "left":
            return TextAlignment.left_align(s, width)
        if self.horizontal == "right":
            return TextAlignment.right_align(s, width)
        return TextAlignment.center(s, width)

    def apply(self, text: str, width: int, height: int) -> List[str]:
        if width <= 0 or height <= 0:
            return [""] * max(height, 0)

        lines = self._wrap(text, width, height)
        blank = " " * width
        missing = height - len(lines)
        if self.vertical == "bottom":
            return [blank] * missing + lines
        if self.vertical == "center":
            above = missing // 2
            return [blank] * above + lines + [blank] * (missing - above)
        return lines + [blank] * missing

    def _wrap(self, text: str, width: int, height: int) -> List[str]:
        lines: List[str] = []
        for raw in split_lines(text):
            rest = raw.strip()
            while len(lines) < height:
                part = rest[:width]
                rest = rest[width:].strip()
                lines.append(self.align_line(part, width))
                if not rest:
                    break
            if len(lines) == height:
                break
        return lines

    @staticmethod
    def center(s: str, width: int) -> str:
        s = s.strip()
        space = width - len(s)
        if space < 0:
            return s[:width]
        before = space // 2
        return " " * before + s + " " * (space - before)

    @staticmethod
    def left_align(s: str, width: int) -> str:
        s = s.strip()
        if len(s) > width:
            return s[:width]
        return s.ljust(width)

    @staticmethod
    def right_align(s: str, width: int) -> str:
        s = s.strip()
        if len(s) > width:
            return s[:width]
        return s.rjust(width)

    @staticmethod
    def compute_trimmed_dimensions(
        text: str, width: Optional[int] = None, height: Optional[int] = None
    ) -> Tuple[int, int]:
        """Return ``(max_line_width, number_of_lines)`` of the visible text.

        Without ``width``/``height`` the raw lines are measured, otherwise the
        lines as ``CENTER_CENTER`` would lay them out in that area.
        """
        if width is None or height is None:
            lines = split_lines(text)
        else:
            lines = TextAlignment.CENTER_CENTER.apply(text, width, height)
        trimmed = [line.strip() for line in lines if line.strip()]
        return max((len(line) for line in trimmed), default=0), len(trimmed)
