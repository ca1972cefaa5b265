import math

import pytest

from circles.Circle import Circle
from circles.Color import PALETTE
from circles.population import generate, make_rng
from circles.resize import ResizeCoordinator, rescale
from circles.surface import initialize_surface
from circles.Vec2 import Vec2


def test_concrete_scale_up_scenario():
    small = initialize_surface((400, 400), 1)
    large = initialize_surface((800, 800), 1)
    angle = 0.7
    c = Circle(Vec2(200, 200), Vec2.from_polar(0.3, angle), base_radius=20,
               color=PALETTE[1], opacity=0.3, scale_factor=small.scale_factor)
    assert c.radius == 20

    rescale([c], small, large)

    assert c.radius == pytest.approx(40)
    assert c.speed() == pytest.approx(0.6)
    assert c.vel.angle() == pytest.approx(angle)
    assert c.base_radius == 20


def test_speed_has_a_floor():
    large = initialize_surface((800, 800), 1)
    small = initialize_surface((400, 400), 1)
    c = Circle(Vec2(300, 300), Vec2(0.0, -0.3), base_radius=20, color=PALETTE[0],
               opacity=0.2, scale_factor=large.scale_factor)
    rescale([c], large, small)
    assert c.speed() == pytest.approx(0.2)
    assert c.vel.angle() == pytest.approx(-math.pi / 2)


def test_stationary_circle_starts_moving_along_x():
    s = initialize_surface((400, 400), 1)
    c = Circle(Vec2(100, 100), Vec2(0, 0), base_radius=20, color=PALETTE[0], opacity=0.2)
    rescale([c], s, s)
    assert (c.vel.x, c.vel.y) == (pytest.approx(0.2), pytest.approx(0.0))


def test_positions_clamped_into_smaller_surface():
    big = initialize_surface((400, 400), 1)
    small = initialize_surface((200, 200), 1)
    c = Circle(Vec2(390, 12), Vec2(1, 1), base_radius=10, color=PALETTE[0], opacity=0.2)
    rescale([c], big, small)
    assert c.radius == pytest.approx(5)
    assert c.pos.x == pytest.approx(195)
    assert c.pos.y == pytest.approx(12)


def test_resize_there_and_back_restores_radius():
    a = initialize_surface((400, 400), 1)
    b = initialize_surface((1000, 700), 1)
    circles = generate(a, make_rng(5))
    before = [c.radius for c in circles]

    rescale(circles, a, b)
    rescale(circles, b, a)
    rescale(circles, a, b)
    rescale(circles, b, a)

    assert [c.radius for c in circles] == pytest.approx(before)
    assert len(circles) == len(before)


def test_burst_settles_once_with_last_box(loop, clock):
    settled = []
    coordinator = ResizeCoordinator(loop, settled.append, delay_ms=100)
    for width in (500, 520, 540, 560, 580):
        coordinator.notify((width, 300))
        clock.advance(40)
        loop.tick()
    assert settled == []
    assert coordinator.pending

    clock.advance(60)
    loop.tick()
    assert settled == [(580, 300)]
    assert coordinator.settled == 1
    assert not coordinator.pending

    clock.advance(500)
    loop.tick()
    assert settled == [(580, 300)]


def test_separate_bursts_settle_separately(loop, clock):
    settled = []
    coordinator = ResizeCoordinator(loop, settled.append, delay_ms=100)
    coordinator.notify((500, 300))
    clock.advance(100)
    loop.tick()
    coordinator.notify((600, 300))
    clock.advance(100)
    loop.tick()
    assert settled == [(500, 300), (600, 300)]


def test_cancel_drops_pending_settle(loop, clock):
    settled = []
    coordinator = ResizeCoordinator(loop, settled.append, delay_ms=100)
    coordinator.notify((500, 300))
    coordinator.cancel()
    coordinator.cancel()
    clock.advance(200)
    loop.tick()
    assert settled == []
    assert loop.pending() == 0
