import pytest

from circles.Circle import Circle
from circles.Color import Color
from circles.renderer import draw_circle, glow_stops, render
from circles.surface import initialize_surface
from circles.Vec2 import Vec2


def white_circle(x=100, y=100, radius=20):
    return Circle(Vec2(x, y), Vec2(0.5, 0.5), base_radius=radius,
                  color=Color(255, 255, 255, 0.25), opacity=0.3)


def test_render_paints_circle_and_leaves_background_clear():
    surface = initialize_surface((200, 200), 1)
    render(surface, [white_circle()])
    assert surface.canvas.get_at((100, 100)).a > 0
    assert surface.canvas.get_at((2, 2)).a == 0
    assert surface.canvas.get_at((197, 197)).a == 0


def test_glow_extends_past_radius():
    surface = initialize_surface((200, 200), 1)
    render(surface, [white_circle()])
    # between radius 20 and glow radius 26
    assert surface.canvas.get_at((100 + 22, 100)).a > 0
    assert surface.canvas.get_at((100 + 30, 100)).a == 0


def test_highlight_sits_up_and_left():
    surface = initialize_surface((200, 200), 1)
    render(surface, [white_circle()])
    upper_left = surface.canvas.get_at((94, 94)).a
    lower_right = surface.canvas.get_at((106, 106)).a
    assert upper_left > lower_right


def test_render_clears_previous_frame():
    surface = initialize_surface((200, 200), 1)
    render(surface, [white_circle()])
    render(surface, [])
    assert surface.canvas.get_at((100, 100)).a == 0


def test_render_does_not_touch_state():
    surface = initialize_surface((200, 200), 1)
    circle = white_circle()
    before = circle.to_dict()
    render(surface, [circle])
    assert circle.to_dict() == before


def test_render_follows_device_scale():
    surface = initialize_surface((200, 200), 2)
    draw_circle(surface, white_circle())
    assert surface.canvas.get_at((200, 200)).a > 0
    assert surface.canvas.get_at((100, 100)).a == 0


def test_glow_stops_derive_alpha_from_base_color():
    base = Color(255, 215, 0, 0.3)
    stops = glow_stops(base)
    assert [offset for offset, _ in stops] == [0.0, 0.7, 1.0]
    assert stops[0][1] == base
    assert stops[1][1] == Color(255, 215, 0, 0.1)
    assert stops[2][1].a == 0.0
    assert base.a == pytest.approx(0.3)


def test_color_lerp_and_alpha_clamp():
    a = Color(0, 0, 0, 0.0)
    b = Color(200, 100, 50, 1.0)
    mid = a.lerp(b, 0.5)
    assert (mid.r, mid.g, mid.b) == (100, 50, 25)
    assert mid.a == pytest.approx(0.5)
    assert Color(1, 2, 3, 1.7).a == 1.0
    assert b.with_alpha(0.4).to_rgba8() == (200, 100, 50, 102)
