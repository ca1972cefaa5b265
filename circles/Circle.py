from .Vec2 import Vec2


class Circle:
    def __init__(self, pos, vel, base_radius, color, opacity, scale_factor=1.0):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        self.vel = vel.copy() if isinstance(vel, Vec2) else Vec2(vel[0], vel[1])
        # reference radius at scale_factor == 1; never rewritten after creation
        self.base_radius = float(base_radius)
        self.radius = self.base_radius * scale_factor
        self.color = color
        self.opacity = float(opacity)

    def speed(self):
        return self.vel.length()

    def __repr__(self):
        return (f"Circle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), "
                f"radius={self.radius:.2f}, base_radius={self.base_radius:.2f}, opacity={self.opacity:.2f})")

    def to_dict(self):
        return {
            'pos': (self.pos.x, self.pos.y),
            'vel': (self.vel.x, self.vel.y),
            'radius': self.radius,
            'base_radius': self.base_radius,
            'color': self.color.to_rgba8(),
            'opacity': self.opacity
        }
