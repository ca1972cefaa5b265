import logging

import pygame

from constants import DEVICE_PIXEL_RATIO, FPS, HEADER_BOTTOM, HEADER_TOP, HEIGHT, TITLE_COLOR, WIDTH
from circles.Color import Color
from circles.scheduler import FrameLoop, GeometryNotifier
from circles.surface import SurfaceInfo
from circles.world import BouncingCircles

logger = logging.getLogger(__name__)


def draw_header(screen):
    """Vertical gradient standing in for the dashboard header."""
    width, height = screen.get_size()
    top = Color(*HEADER_TOP)
    bottom = Color(*HEADER_BOTTOM)
    for y in range(height):
        t = y / max(1, height - 1)
        color = top.lerp(bottom, t)
        pygame.draw.line(screen, color.to_rgba8(), (0, y), (width, y))


def mount(loop, notifier, screen):
    engine = BouncingCircles(loop=loop, notifier=notifier, device_pixel_ratio=DEVICE_PIXEL_RATIO)
    width, height = screen.get_size()
    engine.initialize(SurfaceInfo(width, height, DEVICE_PIXEL_RATIO))
    return engine


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Dashboard header")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 48)

    loop = FrameLoop()
    notifier = GeometryNotifier()
    engine = mount(loop, notifier, screen)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.get_surface()
                notifier.notify(SurfaceInfo(event.w, event.h, DEVICE_PIXEL_RATIO))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    # remount: fresh population for the current size
                    engine.dispose()
                    engine = mount(loop, notifier, screen)
                elif event.key == pygame.K_ESCAPE:
                    running = False

        # --- Update ---
        loop.tick()

        # --- Draw ---
        draw_header(screen)
        if engine.surface is not None:
            engine.surface.blit_to(screen)

        title = font.render("Good morning", True, TITLE_COLOR)
        screen.blit(title, (24, 24))

        pygame.display.flip()
        clock.tick(FPS)

    engine.dispose()
    logger.info("pending callbacks at exit: %d", loop.pending())
    pygame.quit()


if __name__ == "__main__":
    main()
