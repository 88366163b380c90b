"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec3 import Vec3, Point3


class DegenerateRayError(ValueError):
    """A ray was built with a zero-length direction."""
    pass


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    where t >= 0 represents points in front of the origin. Rays are
    immutable and hold their own origin and direction values.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vec3):
        """Create a ray with given origin and direction.

        No validation of the direction is done here; use Ray.validated
        when a zero-length direction must be rejected.

        Args:
            origin: The starting point of the ray
            direction: The direction vector (need not be normalized)
        """
        if type(origin) is not Point3:
            raise TypeError(f"Ray origin must be a Point3, got {type(origin).__name__}")
        if type(direction) is not Vec3:
            raise TypeError(f"Ray direction must be a Vec3, got {type(direction).__name__}")
        object.__setattr__(self, 'origin', origin)
        object.__setattr__(self, 'direction', direction)

    @classmethod
    def validated(cls, origin: Point3, direction: Vec3) -> Ray:
        """Create a ray, rejecting a zero-length direction.

        Raises:
            DegenerateRayError: if direction is the zero vector
        """
        ray = cls(origin, direction)
        if direction.is_zero():
            raise DegenerateRayError(f"Ray direction must be non-zero (origin={origin})")
        return ray

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized).
                Negative values give points behind the origin.

        Returns:
            The point at origin + t * direction
        """
        return self.origin + self.direction * t

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def __delattr__(self, name):
        raise AttributeError("Ray is immutable")

    def __reduce__(self):
        return (Ray, (self.origin, self.direction))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    def __hash__(self) -> int:
        return hash((self.origin, self.direction))

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
