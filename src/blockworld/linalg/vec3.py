import math


def round_half_away(v):
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


class Vec3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x, self.y, self.z = x, y, z

    @classmethod
    def of(cls, v):
        if isinstance(v, Vec3):
            return v
        x, y, z = v
        return cls(x, y, z)

    def mag(self):
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def norm(self):
        mag = self.mag()
        if mag > 0:
            return Vec3(
                self.x / mag,
                self.y / mag,
                self.z / mag,
            )
        return self

    def is_unit(self, tol=1e-6):
        return abs(self.mag() - 1.0) <= tol

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __repr__(self):
        return (
            self.x,
            self.y,
            self.z,
        ).__repr__()

    def cell(self):
        """Nearest integer block position."""
        return (
            round_half_away(self.x),
            round_half_away(self.y),
            round_half_away(self.z),
        )

    def to_tuple(self):
        return (self.x, self.y, self.z)
