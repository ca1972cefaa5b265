import logging

import numpy as np

import constants
from .Circle import Circle
from .Color import PALETTE
from .Vec2 import Vec2

logger = logging.getLogger(__name__)


def make_rng(seed=None):
    return np.random.default_rng(seed)


def circle_count(width, height):
    """Roughly one circle per AREA_PER_CIRCLE square units, clamped."""
    count = int((width * height) // constants.AREA_PER_CIRCLE)
    return max(constants.MIN_CIRCLES, min(constants.MAX_CIRCLES, count))


def spawn_circle(rng, width, height, scale_factor, palette=PALETTE):
    base_radius = rng.uniform(*constants.RADIUS_RANGE)
    radius = base_radius * scale_factor
    max_speed = constants.MAX_SPEED * scale_factor

    # keep the whole disc inside the container
    x = radius + rng.random() * max(0.0, width - radius * 2)
    y = radius + rng.random() * max(0.0, height - radius * 2)

    return Circle(
        pos=Vec2(x, y),
        # each axis in [-max_speed/2, max_speed/2], so |vel| stays under max_speed
        vel=Vec2((rng.random() - 0.5) * max_speed, (rng.random() - 0.5) * max_speed),
        base_radius=base_radius,
        color=palette[int(rng.integers(len(palette)))],
        opacity=rng.uniform(*constants.OPACITY_RANGE),
        scale_factor=scale_factor,
    )


def generate(surface, rng=None):
    """
    Seed the circle set for a surface.

    :param surface: SurfaceHandle the circles will live in.
    :param rng: numpy Generator; a fresh unseeded one is used when omitted.
    :return: list of Circle, fixed length for the surface's lifetime.
    """
    if rng is None:
        rng = make_rng()
    count = circle_count(surface.width, surface.height)
    circles = [spawn_circle(rng, surface.width, surface.height, surface.scale_factor) for _ in range(count)]
    logger.debug("generated %d circles for %r", count, surface)
    return circles
