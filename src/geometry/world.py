# geometry/world.py
from typing import Iterable, Optional, Tuple
import numpy as np
from core.color import Color, ColorPresets
from core.vector import Vector3
from geometry.hittable import HitRecord
from geometry.sphere import Sphere, INFINITY

class Scene:
    """
    A fixed, ordered collection of spheres plus the background color.

    Every sphere is tested for every ray; there is no acceleration structure.
    Scene order only matters for exact ties, where the first sphere wins.
    """
    def __init__(self, spheres: Iterable[Sphere], background: Color = ColorPresets.WHITE):
        self._spheres: Tuple[Sphere, ...] = tuple(spheres)
        self._background = background

    @property
    def spheres(self) -> Tuple[Sphere, ...]:
        return self._spheres

    @property
    def background(self) -> Color:
        return self._background

    def __len__(self) -> int:
        return len(self._spheres)

    def closest_hit(self, origin: Vector3, direction: Vector3,
                    t_min: float, t_max: float) -> Optional[HitRecord]:
        closest_t = INFINITY
        closest_sphere = None

        for sphere in self._spheres:
            t1, t2 = sphere.intersect(origin, direction)
            # Strict comparisons: NaN never passes and the first minimum is kept.
            if t1 < closest_t and t_min < t1 and t1 < t_max:
                closest_t = t1
                closest_sphere = sphere
            if t2 < closest_t and t_min < t2 and t2 < t_max:
                closest_t = t2
                closest_sphere = sphere

        if closest_sphere is None:
            return None
        return HitRecord(closest_t, closest_sphere)

    def to_arrays(self):
        """
        Flattens the scene into numpy arrays for the compiled kernels.

        Returns:
            (centers (N,3) float64, radii (N,) float64,
             colors (N,3) int64, background (3,) int64)
        """
        n = len(self._spheres)
        centers = np.zeros((n, 3), dtype=np.float64)
        radii = np.zeros(n, dtype=np.float64)
        colors = np.zeros((n, 3), dtype=np.int64)
        for i, sphere in enumerate(self._spheres):
            centers[i] = sphere.center.to_tuple()
            radii[i] = sphere.radius
            colors[i] = sphere.color.to_tuple()
        background = np.array(self._background.to_tuple(), dtype=np.int64)
        return centers, radii, colors, background

    def __repr__(self) -> str:
        return f"Scene({len(self._spheres)} spheres, background={self._background})"
