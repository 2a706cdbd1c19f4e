# geometry/hittable.py
from typing import Tuple
from core.vector import Vector3

class HitRecord:
    """
    Records the nearest accepted intersection along a ray.
    """
    __slots__ = ("t", "obj")

    def __init__(self, t: float, obj: "Hittable"):
        self.t = t        # Ray parameter at intersection
        self.obj = obj    # Object owning the intersection

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, obj={self.obj!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, origin: Vector3, direction: Vector3) -> Tuple[float, float]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
