# SPDX-License-Identifier: MIT

import colorsys
import random
from typing import Optional

from rich.color import Color
from rich.color_triplet import ColorTriplet

from gridcal.model.event import Event

# Used when an event's owning calendar has no color
DEFAULT_EVENT_COLOR = "grey50"

# Text drawn on top of an event's background
HIGH_CONTRAST_TEXT_COLOR = "#000000"

BACKGROUND_ALPHA = 0.3

# Filler days in the month grid
FILLER_DAY_COLOR = "bright_black"
TODAY_STYLE = "bold black on bright_cyan"
WEEKEND_STYLE = "bold white on orange4"


def get_random_color(rng: Optional[random.Random] = None) -> str:
    """Return a random color from the Rich color palette.

    These colors are chosen for good visibility in terminal displays.
    """
    colors = [
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "bright_red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "dark_orange",
        "purple",
        "deep_pink",
        "spring_green",
        "dark_violet",
        "gold",
        "orange",
        "pink",
    ]
    return (rng or random).choice(colors)


def blend(color: str, alpha: float, backdrop: str = "#ffffff") -> str:
    """Composite ``color`` at ``alpha`` opacity over ``backdrop``.

    Terminals have no translucency, so the result is the flattened hex color.
    """
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be between 0 and 1, got {alpha}")
    front = Color.parse(color).get_truecolor()
    back = Color.parse(backdrop).get_truecolor()
    return ColorTriplet(
        round(front.red * alpha + back.red * (1 - alpha)),
        round(front.green * alpha + back.green * (1 - alpha)),
        round(front.blue * alpha + back.blue * (1 - alpha)),
    ).hex


def background_color(color: str) -> str:
    return blend(color, BACKGROUND_ALPHA)


class ColorCache:
    """Random pastel colors memoized by a stable key.

    Pass ``seed`` for a reproducible sequence of colors.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        saturation: tuple[float, float] = (0.4, 0.6),
        brightness: tuple[float, float] = (0.8, 1.0),
    ) -> None:
        self._random = random.Random(seed)
        self._saturation = saturation
        self._brightness = brightness
        self._colors: dict[str, str] = {}

    def color_for(self, key: str) -> str:
        if key not in self._colors:
            self._colors[key] = self._random_pastel()
        return self._colors[key]

    def clear(self) -> None:
        self._colors.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def _random_pastel(self) -> str:
        hue = self._random.uniform(0.0, 1.0)
        saturation = self._random.uniform(*self._saturation)
        brightness = self._random.uniform(*self._brightness)
        red, green, blue = colorsys.hsv_to_rgb(hue, saturation, brightness)
        return ColorTriplet(
            round(red * 255), round(green * 255), round(blue * 255)
        ).hex


def resolve_event_color(event: Event, cache: Optional[ColorCache] = None) -> str:
    """Pick the display color of an event.

    The owning calendar's color wins; otherwise a cached random color keyed
    by the event's color seed; otherwise the default gray.
    """
    if event["color"] is not None and event["color"] != "":
        return event["color"]
    if cache is not None and event["color_seed"] is not None:
        return cache.color_for(event["color_seed"])
    return DEFAULT_EVENT_COLOR
