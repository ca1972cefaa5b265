def _clamp(value, low, high):
    return max(low, min(high, value))


def resolve_wall_collision(circle, width, height):
    """
    Bounce a circle off the container walls.

    Elastic and axis-aligned: only the sign of the velocity component of the
    wall that was hit changes, so speed is preserved. The position is clamped
    back inside ``[radius, size - radius]`` on that axis.
    """
    r = circle.radius
    if circle.pos.x + r >= width or circle.pos.x - r <= 0:
        circle.vel.x = -circle.vel.x
        circle.pos.x = _clamp(circle.pos.x, r, width - r)
    if circle.pos.y + r >= height or circle.pos.y - r <= 0:
        circle.vel.y = -circle.vel.y
        circle.pos.y = _clamp(circle.pos.y, r, height - r)


def step(circles, surface):
    """Advance every circle by one frame of velocity and resolve wall hits."""
    width = surface.width
    height = surface.height
    for c in circles:
        c.pos += c.vel
        resolve_wall_collision(c, width, height)
