from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere, intersect_ray_sphere
from geometry.world import Scene
