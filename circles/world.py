import enum
import logging

import constants
from . import collision, renderer
from .population import generate
from .resize import ResizeCoordinator, rescale
from .scheduler import FrameLoop
from .surface import initialize_surface

logger = logging.getLogger(__name__)


class EngineState(enum.Enum):
    UNINITIALIZED = 'uninitialized'
    INITIALIZED = 'initialized'
    RUNNING = 'running'
    RESIZING = 'resizing'  # transient, only while a settle is being applied
    DISPOSED = 'disposed'


class BouncingCircles:
    """
    Decorative bouncing-circle animation for one host container.

    The host owns the instance and drives it through its lifecycle:
    ``initialize`` on mount, ``on_resize`` from its resize observer (or through
    ``notifier``), ``dispose`` on unmount. Frames run on ``loop``; each frame
    does one physics step and one render, then requests the next frame.
    """

    def __init__(self, loop=None, notifier=None, rng=None, device_pixel_ratio=1.0,
                 debounce_ms=constants.RESIZE_DEBOUNCE_MS):
        self.loop = loop if loop is not None else FrameLoop()
        self.notifier = notifier
        self.rng = rng
        self.device_pixel_ratio = device_pixel_ratio

        self.state = EngineState.UNINITIALIZED
        self.surface = None
        self.circles = []
        self.frame_count = 0

        self._frame = None
        self._unsubscribe = None
        self._resizer = ResizeCoordinator(self.loop, self._apply_resize, delay_ms=debounce_ms)

    @property
    def running(self):
        return self.state in (EngineState.RUNNING, EngineState.RESIZING)

    def _dpr_of(self, surface_info):
        return getattr(surface_info, 'device_pixel_ratio', None) or self.device_pixel_ratio

    def initialize(self, surface_info, start=True):
        """
        Build the surface, seed the circles and subscribe to resizes.

        Returns False, leaving the engine idle, when the surface is unavailable.
        """
        if self.state is EngineState.DISPOSED:
            return False
        if self.state is not EngineState.UNINITIALIZED:
            return True

        surface = initialize_surface(surface_info, self._dpr_of(surface_info))
        if surface is None:
            return False

        self.surface = surface
        self.circles = generate(surface, self.rng)
        self.state = EngineState.INITIALIZED
        if self.notifier is not None:
            self._unsubscribe = self.notifier.subscribe(self.on_resize)
        logger.info("initialized %d circles on %r", len(self.circles), surface)

        if start:
            self.start()
        return True

    def start(self):
        if self.state is not EngineState.INITIALIZED:
            return
        self.state = EngineState.RUNNING
        self._frame = self.loop.request_frame(self._on_frame)

    def _on_frame(self):
        self._frame = None
        if not self.running:
            return
        self.step()
        # next frame only after this one has finished
        self._frame = self.loop.request_frame(self._on_frame)

    def step(self):
        """One physics step followed by one render. No-op without a surface."""
        if self.surface is None:
            return
        collision.step(self.circles, self.surface)
        renderer.render(self.surface, self.circles)
        self.frame_count += 1

    def on_resize(self, surface_info):
        if self.state in (EngineState.UNINITIALIZED, EngineState.DISPOSED):
            return
        self._resizer.notify(surface_info)

    def _apply_resize(self, surface_info):
        new_surface = initialize_surface(surface_info, self._dpr_of(surface_info))
        if new_surface is None:
            logger.debug("resize ignored, keeping %r", self.surface)
            return

        previous = self.state
        self.state = EngineState.RESIZING
        rescale(self.circles, self.surface, new_surface)
        self.surface = new_surface
        self.state = previous
        logger.debug("rescaled %d circles to %r", len(self.circles), new_surface)

    def dispose(self):
        """Cancel the pending frame and debounce timer and unsubscribe. Idempotent."""
        if self.state is EngineState.DISPOSED:
            return
        self.loop.cancel(self._frame)
        self._frame = None
        self._resizer.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self.surface is not None:
            logger.info("disposed after %d frames", self.frame_count)
        self.circles = []
        self.surface = None
        self.state = EngineState.DISPOSED

    def snapshot(self):
        """Read-only view of the simulation for diagnostics."""
        surface = None
        if self.surface is not None:
            surface = {
                'width': self.surface.width,
                'height': self.surface.height,
                'device_scale': self.surface.device_scale,
                'scale_factor': self.surface.scale_factor,
            }
        return {
            'state': self.state.value,
            'frame_count': self.frame_count,
            'surface': surface,
            'circles': [c.to_dict() for c in self.circles],
        }
