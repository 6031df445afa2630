"""Mutable 2D vector with in-place, chainable operations.

Every mutating method changes the receiver and returns it, so calls can be
chained: ``Vec2(1.0, 0.0).rotate(angle).scale(2.0)``. Clone first when the
original value must survive. Operators (``+``, ``-``, ``*``) and the
``*ed`` methods (``scaled``, ``rotated``...) allocate a new vector instead.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from vec2kit import config

logger = logging.getLogger(__name__)

Operand = Union["Vec2", float]


def _components(op: str, x: Operand, y: Optional[float]) -> tuple[float, float]:
    if isinstance(x, Vec2):
        if y is not None:
            raise TypeError(f"Vec2.{op}() takes a Vec2 or x and y components, not both")
        return x.x, x.y
    if y is None:
        raise TypeError(f"Vec2.{op}() needs a Vec2 or both x and y components")
    return x, y


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields nan/inf on a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(eq=False)
class Vec2:
    """Two-component vector of floats.

    ``Vec2()`` is the origin, ``Vec2(x, y)`` sets both components and
    ``Vec2(other)`` copies another vector.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        if isinstance(self.x, Vec2):
            source = self.x
            self.x = source.x
            self.y = source.y

    def clone(self) -> "Vec2":
        return Vec2(self.x, self.y)

    # ---- In-place operations ----

    def set(self, x: Operand, y: Optional[float] = None) -> "Vec2":
        self.x, self.y = _components("set", x, y)
        return self

    def add(self, x: Operand, y: Optional[float] = None) -> "Vec2":
        dx, dy = _components("add", x, y)
        self.x += dx
        self.y += dy
        return self

    def sub(self, x: Operand, y: Optional[float] = None) -> "Vec2":
        dx, dy = _components("sub", x, y)
        self.x -= dx
        self.y -= dy
        return self

    def inv(self) -> "Vec2":
        self.x = -self.x
        self.y = -self.y
        return self

    def ort(self) -> "Vec2":
        """Rotate by 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
        x = self.x
        self.x = -self.y
        self.y = x
        return self

    def scale(self, f: float) -> "Vec2":
        self.x *= f
        self.y *= f
        return self

    def norm(self) -> "Vec2":
        """Scale to unit length. A zero-length vector is left unchanged."""
        length = math.sqrt(self.dot(self))
        if length == 0.0:
            logger.debug("norm() on zero-length vector, leaving it unchanged")
            return self
        self.x /= length
        self.y /= length
        return self

    def rotate(self, theta: float) -> "Vec2":
        """Rotate counter-clockwise by theta radians."""
        if math.isinf(theta):
            sin_t = cos_t = math.nan
        else:
            sin_t = math.sin(theta)
            cos_t = math.cos(theta)
        x = self.x * cos_t - self.y * sin_t
        self.y = self.x * sin_t + self.y * cos_t
        self.x = x
        return self

    def project(self, v: "Vec2") -> "Vec2":
        """Replace self with its projection onto v.

        A zero-length v is not guarded: the components become nan/inf.
        """
        return self.set(v.clone().scale(_divide(self.dot(v), v.dot(v))))

    def reject(self, v: "Vec2") -> "Vec2":
        """Replace self with the part of it orthogonal to v."""
        return self.sub(self.clone().project(v))

    def reflect(self, v: "Vec2") -> "Vec2":
        """Reflect self about the direction of v."""
        n = v.clone().norm()
        return self.set(n.scale(2.0 * self.dot(n)).sub(self))

    def reflect_and_scale(self, v: "Vec2", project_factor: float, reject_factor: float) -> "Vec2":
        """Reflect self about v, scaling the parallel and orthogonal parts.

        With both factors at 1.0 this matches ``reflect``.
        """
        p = v.clone().norm()
        r = v.clone().ort().norm()
        return self.set(p.scale(self.dot(p) * project_factor).add(r.scale(-self.dot(r) * reject_factor)))

    def lerp(self, v: "Vec2", percent: float) -> "Vec2":
        """Move towards v by percent of the way; values outside [0, 1] extrapolate."""
        return self.add(v.clone().sub(self).scale(percent))

    # ---- Queries ----

    def dot(self, v: "Vec2") -> float:
        return self.x * v.x + self.y * v.y

    def dist_sq(self, v: "Vec2") -> float:
        dx = self.x - v.x
        dy = self.y - v.y
        return dx * dx + dy * dy

    def dist(self, v: "Vec2") -> float:
        return math.sqrt(self.dist_sq(v))

    def dir(self) -> float:
        """Angle of the vector in radians, in [-pi, pi].

        Follows atan2 sign rules, so a y of -0.0 on the negative x axis gives -pi.
        """
        return math.atan2(self.y, self.x)

    def mag_sq(self) -> float:
        return self.dot(self)

    def mag(self) -> float:
        return math.sqrt(self.mag_sq())

    def in_rect(self, p1: "Vec2", p2: "Vec2") -> bool:
        """True if self lies in the rectangle spanned by corners p1 and p2 (inclusive)."""
        return ((p1.x <= self.x <= p2.x) or (p1.x >= self.x >= p2.x)) and (
            (p1.y <= self.y <= p2.y) or (p1.y >= self.y >= p2.y)
        )

    @staticmethod
    def det(v1: "Vec2", v2: "Vec2") -> float:
        """Determinant of [v1, v2], the signed area of their parallelogram."""
        return v1.x * v2.y - v2.x * v1.y

    def is_close(
        self,
        other: object,
        rel_tol: float = config.DEFAULT_REL_TOL,
        abs_tol: float = config.DEFAULT_ABS_TOL,
    ) -> bool:
        if not isinstance(other, Vec2):
            return False
        return math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # ---- Copying counterparts ----

    def scaled(self, f: float) -> "Vec2":
        return self.clone().scale(f)

    def normalized(self) -> "Vec2":
        return self.clone().norm()

    def rotated(self, theta: float) -> "Vec2":
        return self.clone().rotate(theta)

    def orthogonal(self) -> "Vec2":
        return self.clone().ort()

    def rotated_about(self, origin: "Vec2", theta: float) -> "Vec2":
        """Copy of self rotated by theta radians around origin."""
        return self.clone().sub(origin).rotate(theta).add(origin)

    def lerped(self, v: "Vec2", percent: float) -> "Vec2":
        return self.clone().lerp(v, percent)

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __abs__(self) -> float:
        return self.mag()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # ---- Equality, ordering, hashing ----

    def equals(self, other: object) -> bool:
        """Component-wise equality; False for anything that is not a Vec2."""
        if not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def compare_to(self, other: object) -> int:
        """Order by magnitude only. Non-vectors compare as 0."""
        if not isinstance(other, Vec2):
            logger.debug("compare_to() with non-Vec2 %r, treating as equal", other)
            return 0
        m = self.mag()
        mv = other.mag()
        if m < mv:
            return -1
        if m > mv:
            return 1
        return 0

    def hash_code(self) -> int:
        return hash(self.x) ^ hash(self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: "Vec2") -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Vec2") -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Vec2") -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Vec2") -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return self.hash_code()

    def __str__(self) -> str:
        return f"Vec2({self.x}/{self.y})"
