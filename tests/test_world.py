import math

from core.color import Color, ColorPresets
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import Scene

ORIGIN = Vector3(0.0, 0.0, 0.0)
FORWARD = Vector3(0.0, 0.0, 1.0)


def test_empty_scene_has_no_hit():
    scene = Scene([])
    assert len(scene) == 0
    assert scene.closest_hit(ORIGIN, FORWARD, 1.0, math.inf) is None
    assert scene.background == ColorPresets.WHITE


def test_closest_hit_records_t_and_sphere():
    sphere = Sphere(Vector3(0.0, 0.0, 3.0), 1.0, ColorPresets.RED)
    hit = Scene([sphere]).closest_hit(ORIGIN, FORWARD, 1.0, math.inf)
    assert hit.t == 2.0
    assert hit.obj is sphere


def test_far_root_used_when_near_root_is_out_of_range():
    # Origin inside the sphere: only t1 lies past the near bound
    sphere = Sphere(Vector3(0.0, 0.0, 0.0), 5.0, ColorPresets.RED)
    hit = Scene([sphere]).closest_hit(ORIGIN, FORWARD, 1.0, math.inf)
    assert hit.t == 5.0


def test_bounds_are_strict():
    sphere = Sphere(Vector3(0.0, 0.0, 3.0), 1.0, ColorPresets.RED)
    scene = Scene([sphere])
    assert scene.closest_hit(ORIGIN, FORWARD, 2.0, 4.0) is None
    assert scene.closest_hit(ORIGIN, FORWARD, 2.0, 4.5).t == 4.0


def test_exact_tie_keeps_first_sphere():
    first = Sphere(Vector3(0.0, 0.0, 3.0), 1.0, ColorPresets.RED)
    second = Sphere(Vector3(0.0, 0.0, 3.0), 1.0, ColorPresets.BLUE)
    hit = Scene([first, second]).closest_hit(ORIGIN, FORWARD, 1.0, math.inf)
    assert hit.obj is first
    hit = Scene([second, first]).closest_hit(ORIGIN, FORWARD, 1.0, math.inf)
    assert hit.obj is second


def test_nan_ray_is_a_miss():
    sphere = Sphere(Vector3(0.0, 0.0, 3.0), 1.0, ColorPresets.RED)
    origin = Vector3(math.nan, 0.0, 0.0)
    assert Scene([sphere]).closest_hit(origin, FORWARD, 1.0, math.inf) is None


def test_scene_is_a_fixed_sequence():
    spheres = [Sphere(Vector3(0.0, 0.0, 3.0), 1.0, ColorPresets.RED)]
    scene = Scene(spheres)
    spheres.append(Sphere(Vector3(0.0, 0.0, 6.0), 1.0, ColorPresets.BLUE))
    assert len(scene) == 1
    assert isinstance(scene.spheres, tuple)


def test_to_arrays():
    scene = Scene(
        [
            Sphere(Vector3(0.0, -1.0, 3.0), 1.0, ColorPresets.RED),
            Sphere(Vector3(2.0, 0.0, 4.0), 0.5, Color(1, 2, 3)),
        ],
        background=ColorPresets.BLACK,
    )
    centers, radii, colors, background = scene.to_arrays()
    assert centers.shape == (2, 3)
    assert centers[0].tolist() == [0.0, -1.0, 3.0]
    assert radii.tolist() == [1.0, 0.5]
    assert colors[1].tolist() == [1, 2, 3]
    assert background.tolist() == [0, 0, 0]
