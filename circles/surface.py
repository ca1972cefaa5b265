import logging
import math
from collections import namedtuple

import numpy as np
import pygame

import constants
from .Color import Color

logger = logging.getLogger(__name__)

# What the host reports about its container: logical size plus device pixel ratio.
SurfaceInfo = namedtuple('SurfaceInfo', ['width', 'height', 'device_pixel_ratio'], defaults=[1.0])

TRANSPARENT = (0, 0, 0, 0)


def _box_size(container_box):
    if isinstance(container_box, (tuple, list)):
        if len(container_box) < 2:
            return None
        return float(container_box[0]), float(container_box[1])
    width = getattr(container_box, 'width', None)
    height = getattr(container_box, 'height', None)
    if width is None or height is None:
        return None
    return float(width), float(height)


def sample_gradient(stops, t):
    """Colour at offset ``t`` (0..1) of a list of ``(offset, Color)`` stops."""
    offsets = [o for o, _ in stops]
    colors = [c for _, c in stops]
    return Color(
        round(np.interp(t, offsets, [c.r for c in colors])),
        round(np.interp(t, offsets, [c.g for c in colors])),
        round(np.interp(t, offsets, [c.b for c in colors])),
        np.interp(t, offsets, [c.a for c in colors]),
    )


class SurfaceHandle:
    """
    Drawable area of one mounted host container.

    ``canvas`` is the backing buffer in device pixels; every drawing method takes
    logical units and applies the ``device_scale`` transform itself.
    """

    def __init__(self, width, height, device_scale, canvas):
        self.width = float(width)
        self.height = float(height)
        self.device_scale = float(device_scale)
        self.canvas = canvas
        self.scale_factor = min(self.width, self.height) / constants.REFERENCE_SIZE

    @property
    def backing_size(self):
        return self.canvas.get_size()

    def to_device(self, value):
        return value * self.device_scale

    def clear(self):
        self.canvas.fill(TRANSPARENT)

    def _layer(self, center, radius_px):
        # pygame.draw overwrites pixels, so each shape is drawn on its own
        # SRCALPHA layer and alpha-blended onto the canvas with blit.
        size = int(math.ceil(radius_px)) * 2 + 2
        layer = pygame.Surface((size, size), pygame.SRCALPHA)
        cx = self.to_device(center[0])
        cy = self.to_device(center[1])
        topleft = (int(math.floor(cx - size / 2)), int(math.floor(cy - size / 2)))
        local = (cx - topleft[0], cy - topleft[1])
        return layer, topleft, local

    def fill_circle(self, center, radius, color):
        radius_px = self.to_device(radius)
        if radius_px <= 0:
            return
        layer, topleft, local = self._layer(center, radius_px)
        pygame.draw.circle(layer, color.to_rgba8(), local, radius_px)
        self.canvas.blit(layer, topleft)

    def gradient_circle(self, center, radius, stops):
        """
        Fill a disc with a radial gradient.

        :param stops: ``(offset, Color)`` pairs, offsets ascending in 0..1 from
            the centre to the rim.
        """
        radius_px = self.to_device(radius)
        if radius_px <= 0:
            return
        layer, topleft, local = self._layer(center, radius_px)
        rings = max(1, min(constants.GLOW_MAX_RINGS, int(math.ceil(radius_px))))
        # outermost first; each smaller disc overwrites the middle of the previous one
        for i in range(rings, 0, -1):
            outer = i / rings
            mid = (i - 0.5) / rings
            pygame.draw.circle(layer, sample_gradient(stops, mid).to_rgba8(), local, radius_px * outer)
        self.canvas.blit(layer, topleft)

    def blit_to(self, target, dest=(0, 0)):
        """Present the backing buffer on ``target`` at logical size."""
        if self.device_scale == 1.0:
            target.blit(self.canvas, dest)
            return
        size = (max(1, int(round(self.width))), max(1, int(round(self.height))))
        target.blit(pygame.transform.smoothscale(self.canvas, size), dest)

    def __eq__(self, other):
        if other is None or not isinstance(other, SurfaceHandle):
            return False
        return (self.width, self.height, self.device_scale) == (other.width, other.height, other.device_scale)

    def __hash__(self):
        return hash((self.width, self.height, self.device_scale))

    def __repr__(self):
        return (f"SurfaceHandle({self.width:g}x{self.height:g}, device_scale={self.device_scale:g}, "
                f"scale_factor={self.scale_factor:.3f})")


def initialize_surface(container_box, device_pixel_ratio=1.0):
    """
    Build the drawing surface for a container.

    Returns None when the container is missing, has no area, or pygame cannot
    allocate the backing buffer; the caller then stays idle.
    """
    if container_box is None:
        logger.debug("surface unavailable: no container")
        return None
    size = _box_size(container_box)
    if size is None:
        logger.debug("surface unavailable: container %r has no width/height", container_box)
        return None
    width, height = size
    if not (width > 0 and height > 0):
        logger.debug("surface unavailable: empty container %gx%g", width, height)
        return None

    dpr = float(device_pixel_ratio or 1.0)
    if dpr < 1.0:
        dpr = 1.0
    backing = (max(1, int(round(width * dpr))), max(1, int(round(height * dpr))))
    try:
        canvas = pygame.Surface(backing, pygame.SRCALPHA)
    except pygame.error as exc:
        logger.debug("surface unavailable: cannot allocate %r backing buffer: %s", backing, exc)
        return None
    return SurfaceHandle(width, height, dpr, canvas)
