class Color:
    """Straight (non-premultiplied) RGBA colour.

    Channels ``r``, ``g`` and ``b`` are 0..255, ``a`` is 0..1. Variants of the
    same hue (glow, highlight, transparent gradient edge) are derived with
    :meth:`with_alpha` instead of being spelled out as separate colours.
    """

    __slots__ = ('r', 'g', 'b', 'a')

    def __init__(self, r, g, b, a=1.0):
        self.r = int(r)
        self.g = int(g)
        self.b = int(b)
        self.a = min(1.0, max(0.0, float(a)))

    def with_alpha(self, alpha):
        return Color(self.r, self.g, self.b, alpha)

    def transparent(self):
        return self.with_alpha(0.0)

    def lerp(self, other, t):
        """Linear blend towards ``other``; t=0 gives self, t=1 gives other."""
        t = min(1.0, max(0.0, float(t)))
        return Color(
            round(self.r + (other.r - self.r) * t),
            round(self.g + (other.g - self.g) * t),
            round(self.b + (other.b - self.b) * t),
            self.a + (other.a - self.a) * t,
        )

    def to_rgba8(self):
        """Tuple accepted by pygame drawing calls on SRCALPHA surfaces."""
        return (self.r, self.g, self.b, int(round(self.a * 255)))

    def __eq__(self, other):
        if other is None or not isinstance(other, Color):
            return False
        return (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)

    def __hash__(self):
        return hash((self.r, self.g, self.b, self.a))

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b}, {self.a:.2f})"


# Translucent colours that stay visible on a saturated gradient header.
PALETTE = (
    Color(255, 255, 255, 0.25),  # white
    Color(255, 215, 0, 0.3),     # gold
    Color(255, 105, 180, 0.25),  # hot pink
    Color(0, 255, 255, 0.25),    # cyan
    Color(255, 69, 0, 0.3),      # red-orange
    Color(50, 205, 50, 0.25),    # lime green
    Color(255, 20, 147, 0.25),   # deep pink
    Color(255, 255, 255, 0.2),   # faint white
    Color(255, 165, 0, 0.3),     # orange
    Color(173, 216, 230, 0.3),   # light blue
    Color(255, 192, 203, 0.25),  # pink
    Color(144, 238, 144, 0.25),  # light green
)
