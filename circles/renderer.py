import constants


def glow_stops(color):
    # base colour at the centre, dimmed at GLOW_MID_STOP, transparent at the rim
    return [
        (0.0, color),
        (constants.GLOW_MID_STOP, color.with_alpha(constants.GLOW_MID_ALPHA)),
        (1.0, color.transparent()),
    ]


def draw_circle(surface, circle):
    """Fill, glow, then highlight; later layers composite over earlier ones."""
    center = circle.pos.as_tuple()
    r = circle.radius

    surface.fill_circle(center, r, circle.color.with_alpha(circle.opacity))

    surface.gradient_circle(center, r * constants.GLOW_RADIUS_SCALE, glow_stops(circle.color))

    offset = r * constants.HIGHLIGHT_OFFSET
    surface.fill_circle((center[0] - offset, center[1] - offset),
                        r * constants.HIGHLIGHT_RADIUS_SCALE,
                        circle.color.with_alpha(constants.HIGHLIGHT_ALPHA))


def render(surface, circles):
    """Repaint the whole surface from the current circle set. Reads state only."""
    surface.clear()
    for c in circles:
        draw_circle(surface, c)
