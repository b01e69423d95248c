# core/vector.py
import math

class Vector3:
    """
    A simple 3D vector class used for points, directions and RGB colors.
    Supports arithmetic, dot and cross products, and normalization.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        # Scalar scale or element-wise (color attenuation) product.
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in the same direction.

        A zero vector has no direction: its components come back as NaN
        rather than raising, and the NaN poisons only the sample using it.
        """
        l = self.length()
        if l == 0:
            return Vector3(math.nan, math.nan, math.nan)
        return self / l

    @classmethod
    def from_iterable(cls, values) -> "Vector3":
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


ZERO = Vector3(0.0, 0.0, 0.0)
ONE = Vector3(1.0, 1.0, 1.0)
