import math

class Vec2:
    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def from_polar(cls, length, angle):
        return cls(math.cos(angle) * length, math.sin(angle) * length)

    def __iadd__(self, other):
        # in place: circles are shared by reference between step/render/resize
        self.x += other.x
        self.y += other.y
        return self

    def length(self):
        return math.hypot(self.x, self.y)

    def angle(self):
        """Direction in radians, atan2(y, x). A zero vector points along +x."""
        return math.atan2(self.y, self.x)

    def copy(self):
        return Vec2(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
