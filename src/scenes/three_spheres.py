# scenes/three_spheres.py
from core.vector import Vector3
from core.color import ColorPresets
from geometry.sphere import Sphere
from geometry.world import Scene

def create_scene() -> Scene:
    """Red sphere below center, blue to the right and green to the left, on white."""
    return Scene(
        [
            Sphere(Vector3(0.0, -1.0, 3.0), 1.0, ColorPresets.RED),
            Sphere(Vector3(2.0, 0.0, 4.0), 1.0, ColorPresets.BLUE),
            Sphere(Vector3(-2.0, 0.0, 4.0), 1.0, ColorPresets.GREEN),
        ],
        background=ColorPresets.WHITE,
    )
