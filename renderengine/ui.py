"""Screen-space buttons and bitmap font selection for the overlay UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Optional, Tuple

from .vectors import Vec4


class MouseButton(IntEnum):
    """Mouse button codes as reported by the windowing layer."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class ButtonState(IntEnum):
    """Press state of a mouse button."""

    DOWN = 0
    UP = 1


class BitmapFont(Enum):
    """Built-in bitmap fonts used for overlay text."""

    BITMAP_8_BY_13 = "8_by_13"
    TIMES_ROMAN_10 = "times_roman_10"
    HELVETICA_12 = "helvetica_12"
    BITMAP_9_BY_15 = "9_by_15"
    HELVETICA_18 = "helvetica_18"
    TIMES_ROMAN_24 = "times_roman_24"


_FONT_STEPS = (
    (8, BitmapFont.BITMAP_8_BY_13),
    (10, BitmapFont.TIMES_ROMAN_10),
    (12, BitmapFont.HELVETICA_12),
    (15, BitmapFont.BITMAP_9_BY_15),
    (18, BitmapFont.HELVETICA_18),
    (24, BitmapFont.TIMES_ROMAN_24),
)


def font_for_size(font_size: int) -> BitmapFont:
    """The smallest bitmap font at least ``font_size`` tall (24 pt at most)."""
    return next(
        (font for limit, font in _FONT_STEPS if font_size <= limit),
        BitmapFont.TIMES_ROMAN_24,
    )


def _div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class Screen:
    """Current window size in pixels."""

    window_width: int = 0
    window_height: int = 0

    def screen_change(self, width: int, height: int) -> None:
        """Record a new window size."""
        self.window_width = width
        self.window_height = height


@dataclass
class Button:
    """A rectangle in screen space, origin at the bottom-left of the window."""

    x: int
    y: int
    width: int
    height: int
    screen: Screen = field(default_factory=Screen)
    on_click: Optional[Callable[[], None]] = None
    text: str = ""
    font_size: int = 0
    button_color: Vec4 = Vec4(0.0, 0.0, 1.0, 1.0)
    text_color: Vec4 = Vec4(1.0, 1.0, 1.0, 1.0)

    @property
    def font(self) -> BitmapFont:
        return font_for_size(self.font_size)

    @property
    def label_width(self) -> int:
        """Approximate label width: 0.6 of the font size per character."""
        return len(self.text) * int(self.font_size * 0.6)

    @property
    def label_origin(self) -> Tuple[int, int]:
        """Where the label starts so that it sits roughly centred."""
        return (
            self.x + _div_trunc(self.width - self.label_width, 2),
            self.y + _div_trunc(self.height - self.font_size, 2),
        )

    @property
    def corners(self) -> Tuple[Tuple[int, int], ...]:
        """Bottom-left, bottom-right, top-right and top-left corners."""
        return (
            (self.x, self.y),
            (self.x + self.width, self.y),
            (self.x + self.width, self.y + self.height),
            (self.x, self.y + self.height),
        )

    def is_inside(self, mouse_x: int, mouse_y: int) -> bool:
        """Whether a mouse position (origin top-left) falls on the button."""
        flipped_y = self.screen.window_height - mouse_y
        return (
            self.x <= mouse_x <= self.x + self.width
            and self.y <= flipped_y <= self.y + self.height
        )

    def on_event(self, button: int, state: int, x: int, y: int) -> bool:
        """Run the click handler on a left-button release over the button.

        Returns True when the handler ran.
        """
        if (
            button == MouseButton.LEFT
            and state == ButtonState.UP
            and self.is_inside(x, y)
            and self.on_click is not None
        ):
            self.on_click()
            return True
        return False


def button_2d(
    screen: Screen,
    text: str,
    font_size: int,
    size_x: int,
    size_y: int,
    x: int,
    y: int,
    on_click: Optional[Callable[[], None]] = None,
) -> Button:
    """Lay out a labelled button at ``(x, y)`` of size ``size_x`` by ``size_y``."""
    return Button(
        x=x,
        y=y,
        width=size_x,
        height=size_y,
        screen=screen,
        on_click=on_click,
        text=text,
        font_size=font_size,
    )