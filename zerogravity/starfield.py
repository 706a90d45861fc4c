"""
Animated starfield with comets, as plain state.

The model knows nothing about Tk: the canvas widget asks it to tick once per
frame and then draws the stars and comets it holds.
"""

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

FRAME_MS = 40                 # ~25 frames per second
MIN_BRIGHTNESS = 0.55
MAX_BRIGHTNESS = 1.0
OFFSCREEN_MARGIN = 40
MIN_TAIL_LENGTH = 60
MAX_TAIL_LENGTH = 109
TAIL_STEP = 2
# Upper bound on tail_points(); canvases pre-allocate this many dots per comet
MAX_TAIL_POINTS = (MAX_TAIL_LENGTH + TAIL_STEP - 1) // TAIL_STEP


@dataclass
class Star:
    x: float
    y: float
    size: int
    brightness: float
    d_brightness: float


@dataclass
class Comet:
    x: float
    y: float
    dx: float
    dy: float
    length: int
    tail_alpha: int
    color: Tuple[int, int, int] = field(default=(255, 255, 160))


class Starfield:
    """Twinkling stars and diagonal comets inside a width x height area."""

    def __init__(self, star_count: int, comet_count: int, width: int, height: int,
                 rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.width = max(1, width)
        self.height = max(2, height)
        self.stars: List[Star] = [self._make_star() for _ in range(star_count)]
        self.comets: List[Comet] = [self._make_comet() for _ in range(comet_count)]

    def _make_star(self) -> Star:
        rng = self.rng
        return Star(
            x=rng.random() * self.width,
            y=rng.random() * self.height,
            size=1 + rng.randrange(3),
            brightness=0.6 + 0.4 * rng.random(),
            d_brightness=0.008 * (rng.random() - 0.5),
        )

    def _make_comet(self) -> Comet:
        rng = self.rng
        angle = math.pi / 4 + rng.random() * math.pi / 3
        speed = 5 + rng.random() * 4
        return Comet(
            x=rng.randrange(self.width),
            y=rng.randrange(self.height // 2),
            dx=speed * math.cos(angle),
            dy=speed * math.sin(angle),
            length=rng.randint(MIN_TAIL_LENGTH, MAX_TAIL_LENGTH),
            tail_alpha=60 + rng.randrange(80),
            color=(255, 255, 80 + rng.randrange(90)),
        )

    def resize(self, width: int, height: int) -> None:
        """Scatter everything again over the new area."""
        self.width = max(1, width)
        self.height = max(2, height)
        for star in self.stars:
            star.x = self.rng.random() * self.width
            star.y = self.rng.random() * self.height
        self.comets = [self._make_comet() for _ in self.comets]

    def tick(self) -> None:
        """Advance one frame."""
        for star in self.stars:
            star.brightness += star.d_brightness
            if star.brightness > MAX_BRIGHTNESS:
                star.brightness = MAX_BRIGHTNESS
                star.d_brightness = -star.d_brightness
            elif star.brightness < MIN_BRIGHTNESS:
                star.brightness = MIN_BRIGHTNESS
                star.d_brightness = -star.d_brightness

        for i, comet in enumerate(self.comets):
            comet.x += comet.dx
            comet.y += comet.dy
            if comet.x > self.width + OFFSCREEN_MARGIN or comet.y > self.height + OFFSCREEN_MARGIN:
                fresh = self._make_comet()
                fresh.x = -OFFSCREEN_MARGIN
                fresh.y = self.rng.randrange(self.height // 2)
                self.comets[i] = fresh

    def tail_points(self, comet: Comet) -> List[Tuple[float, float, int]]:
        """(x, y, alpha) of each tail dot, head first."""
        points = []
        for i in range(0, comet.length, TAIL_STEP):
            alpha = max(0, comet.tail_alpha - i * 2)
            points.append((comet.x - comet.dx * i / 10.0, comet.y - comet.dy * i / 10.0, alpha))
        return points


def blend(color: Tuple[int, int, int], alpha: float, background: Tuple[int, int, int] = (0, 0, 0)) -> str:
    """Mix `color` over `background` (Tk has no alpha) and return a #rrggbb string."""
    alpha = max(0.0, min(1.0, alpha))
    mixed = [round(c * alpha + b * (1 - alpha)) for c, b in zip(color, background)]
    return "#{:02x}{:02x}{:02x}".format(*mixed)


def star_color(star: Star) -> str:
    alpha = (110 + 120 * star.brightness) / 255
    return blend((255, 255, 60), alpha)
