"""
Vector and point types for 3D math operations.

This is the fundamental building block of the ray tracer, used for:
- Direction and displacement vectors (Vec3)
- Positions in 3D space (Point3)
- RGB color values (Color, an alias of Vec3)

Both types are immutable float64 triples. A Point3 only combines with a
Vec3 (point + vector -> point, point - point -> vector); every other mix
raises TypeError.
"""

from __future__ import annotations
import math
from numbers import Real
from typing import Iterator, Tuple, Union
import numpy as np


class NonFiniteError(ValueError):
    """A vector or point component came out NaN or infinite."""
    pass


class DegenerateVectorError(ZeroDivisionError):
    """A zero-length vector was used where a direction is required."""
    pass


class _Triple:
    """Shared storage for Vec3 and Point3.

    Components live in a read-only numpy array. Every constructor path goes
    through from_array, which rejects NaN and infinite components.
    """

    __slots__ = ('_data',)

    # Keep numpy from broadcasting over us in `np.float64(2) * v`
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        object.__setattr__(self, '_data', self._checked(np.array([x, y, z], dtype=np.float64)))

    @classmethod
    def from_array(cls, arr: np.ndarray):
        """Create from a length-3 numpy array (the array is copied)."""
        data = np.array(arr, dtype=np.float64)
        if data.shape != (3,):
            raise ValueError(f"{cls.__name__} needs 3 components, got shape {data.shape}")
        v = cls.__new__(cls)
        object.__setattr__(v, '_data', cls._checked(data))
        return v

    @classmethod
    def _checked(cls, data: np.ndarray) -> np.ndarray:
        if not np.all(np.isfinite(data)):
            raise NonFiniteError(f"{cls.__name__} components must be finite, got {data.tolist()}")
        data.flags.writeable = False
        return data

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + tuple(self._data))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __len__(self) -> int:
        return 3

    def isclose(self, other: _Triple, tol: float = 1e-9) -> bool:
        """Component-wise comparison with an absolute tolerance."""
        if type(other) is not type(self):
            return False
        return bool(np.all(np.abs(self._data - other._data) <= tol))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (writeable copy)."""
        return self._data.copy()


class Vec3(_Triple):
    """A direction or displacement in 3D space.

    Closed under addition, subtraction, negation, scalar multiplication
    and division, dot and cross product.
    """

    __slots__ = ()

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        if type(other) is Vec3:
            return Vec3.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: Vec3) -> Vec3:
        if type(other) is Vec3:
            return Vec3.from_array(self._data - other._data)
        return NotImplemented

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if type(other) is Vec3:
            # Component-wise, used for color modulation
            return Vec3.from_array(self._data * other._data)
        if isinstance(other, Real):
            return Vec3.from_array(self._data * float(other))
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, Real):
            return Vec3.from_array(float(other) * self._data)
        return NotImplemented

    def __truediv__(self, other: float) -> Vec3:
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Vec3 division by zero")
        return Vec3.from_array(self._data / float(other))

    def _rescaled(self) -> Tuple[float, np.ndarray]:
        # Dividing by the largest component keeps the squares away from
        # underflow and overflow
        largest = float(np.max(np.abs(self._data)))
        if largest == 0:
            return 0.0, self._data
        return largest, self._data / largest

    def length(self) -> float:
        """Return the magnitude (length) of the vector.

        Zero only for the zero vector, however small the components.

        Raises:
            NonFiniteError: if the length does not fit in a float
        """
        largest, rescaled = self._rescaled()
        if largest == 0:
            return 0.0
        return _finite(largest * math.sqrt(float(np.dot(rescaled, rescaled))), 'length')

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons).

        Raises:
            NonFiniteError: if the square overflows
        """
        with np.errstate(over='ignore', invalid='ignore'):
            return _finite(float(np.dot(self._data, self._data)), 'length_squared')

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        Works for every non-zero vector, including ones whose squared
        length would underflow or overflow.

        Raises:
            DegenerateVectorError: if the vector has zero length
        """
        largest, rescaled = self._rescaled()
        if largest == 0:
            raise DegenerateVectorError("Cannot normalize a zero-length vector")
        return Vec3.from_array(rescaled / math.sqrt(float(np.dot(rescaled, rescaled))))

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        _require(other, Vec3, 'dot')
        with np.errstate(over='ignore', invalid='ignore'):
            return _finite(float(np.dot(self._data, other._data)), 'dot')

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        _require(other, Vec3, 'cross')
        return Vec3.from_array(np.cross(self._data, other._data))

    def is_zero(self) -> bool:
        """True only when every component is exactly zero."""
        return not np.any(self._data)


class Point3(_Triple):
    """A position in 3D space.

    Points translate by vectors and subtract to vectors. Adding two points
    or scaling a point is not defined and raises TypeError.
    """

    __slots__ = ()

    def __add__(self, other: Vec3) -> Point3:
        if type(other) is Vec3:
            return Point3.from_array(self._data + other._data)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union[Point3, Vec3]) -> Union[Vec3, Point3]:
        if type(other) is Point3:
            return Vec3.from_array(self._data - other._data)
        if type(other) is Vec3:
            return Point3.from_array(self._data - other._data)
        return NotImplemented

    def to_vec(self) -> Vec3:
        """Displacement of this point from the origin."""
        return Vec3.from_array(self._data)


def _require(value, cls, op: str) -> None:
    if type(value) is not cls:
        raise TypeError(f"{op} expects {cls.__name__}, got {type(value).__name__}")


def _finite(value: float, op: str) -> float:
    if not math.isfinite(value):
        raise NonFiniteError(f"{op} is not representable as a finite float, got {value}")
    return value


# Functional forms of the operations above

def add(a: Vec3, b: Vec3) -> Vec3:
    _require(a, Vec3, 'add')
    _require(b, Vec3, 'add')
    return a + b


def sub(a: Vec3, b: Vec3) -> Vec3:
    _require(a, Vec3, 'sub')
    _require(b, Vec3, 'sub')
    return a - b


def scale(v: Vec3, t: float) -> Vec3:
    _require(v, Vec3, 'scale')
    if not isinstance(t, Real):
        raise TypeError(f"scale expects a real scalar, got {type(t).__name__}")
    return v * t


def dot(a: Vec3, b: Vec3) -> float:
    _require(a, Vec3, 'dot')
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    _require(a, Vec3, 'cross')
    return a.cross(b)


def length(v: Vec3) -> float:
    _require(v, Vec3, 'length')
    return v.length()


def length_squared(v: Vec3) -> float:
    _require(v, Vec3, 'length_squared')
    return v.length_squared()


def normalize(v: Vec3) -> Vec3:
    """Unit vector along v; raises DegenerateVectorError for the zero vector."""
    _require(v, Vec3, 'normalize')
    return v.normalize()


def point_add_vector(p: Point3, v: Vec3) -> Point3:
    _require(p, Point3, 'point_add_vector')
    _require(v, Vec3, 'point_add_vector')
    return p + v


def point_sub_point(p1: Point3, p2: Point3) -> Vec3:
    _require(p1, Point3, 'point_sub_point')
    _require(p2, Point3, 'point_sub_point')
    return p1 - p2


# Convenience type alias
Color = Vec3
