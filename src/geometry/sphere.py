# geometry/sphere.py
import math
import numpy as np
from dataclasses import dataclass
from typing import Tuple
from core.vector import Vector3
from core.color import Color
from geometry.hittable import Hittable

INFINITY = float("inf")

@dataclass(frozen=True)
class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and flat color.
    """
    center: Vector3
    radius: float
    color: Color

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius!r}")

    def intersect(self, origin: Vector3, direction: Vector3) -> Tuple[float, float]:
        return intersect_ray_sphere(origin, direction, self)


def intersect_ray_sphere(origin: Vector3, direction: Vector3, sphere: Sphere) -> Tuple[float, float]:
    """
    Solves |origin + t*direction - center|^2 = radius^2 for t.

    Returns (t1, t2) with the square root added for t1 and subtracted for t2,
    so t1 >= t2. A miss is reported as (inf, inf). The direction is not
    normalized, so t scales inversely with its length. A zero-length direction
    is not checked; the division follows IEEE-754 and yields inf/nan roots.
    """
    oc = origin - sphere.center

    k1 = direction.dot(direction)
    k2 = 2.0 * oc.dot(direction)
    k3 = oc.dot(oc) - sphere.radius * sphere.radius

    discriminant = k2 * k2 - 4.0 * k1 * k3
    if discriminant < 0:
        return INFINITY, INFINITY

    sqrt_disc = math.sqrt(discriminant)
    denominator = np.float64(2.0 * k1)
    with np.errstate(divide="ignore", invalid="ignore"):
        t1 = (-k2 + sqrt_disc) / denominator
        t2 = (-k2 - sqrt_disc) / denominator
    return float(t1), float(t2)
