import logging

import constants
from .Vec2 import Vec2

logger = logging.getLogger(__name__)


def rescale(circles, old_surface, new_surface):
    """
    Refit existing circles to a resized surface, in place.

    Radius is recomputed from ``base_radius`` so repeated resizes never
    compound. Speed scales by the ratio of scale factors with a floor of
    MIN_RESCALED_SPEED and keeps its direction. Positions are clamped so every
    disc stays inside the new bounds.
    """
    new_scale = new_surface.scale_factor
    ratio = new_scale / old_surface.scale_factor
    width = new_surface.width
    height = new_surface.height

    for c in circles:
        c.radius = c.base_radius * new_scale

        speed = max(constants.MIN_RESCALED_SPEED, c.speed() * ratio)
        c.vel = Vec2.from_polar(speed, c.vel.angle())

        c.pos.x = max(c.radius, min(width - c.radius, c.pos.x))
        c.pos.y = max(c.radius, min(height - c.radius, c.pos.y))


class ResizeCoordinator:
    """
    Debounce container resize notifications.

    Every :meth:`notify` cancels the pending settle and schedules a new one
    ``delay_ms`` later on the frame loop, so a burst collapses into a single
    ``on_settle(container_box)`` call carrying the last box of the burst.
    """

    def __init__(self, loop, on_settle, delay_ms=constants.RESIZE_DEBOUNCE_MS):
        self.loop = loop
        self.on_settle = on_settle
        self.delay_ms = delay_ms
        self._pending = None
        self.settled = 0

    @property
    def pending(self):
        return self._pending is not None and self._pending.pending

    def notify(self, container_box):
        self.cancel()
        self._pending = self.loop.call_later(self.delay_ms, lambda: self._settle(container_box))

    def cancel(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _settle(self, container_box):
        self._pending = None
        self.settled += 1
        logger.debug("resize settled at %r", container_box)
        self.on_settle(container_box)
