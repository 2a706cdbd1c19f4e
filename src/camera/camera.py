# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Fixed pinhole camera looking down +z.

    Pixels are addressed in a centered frame: x grows to the right, y grows
    upwards and (0, 0) is the image center. Each pixel maps linearly onto a
    square viewport placed at projection_plane_z in front of the camera.
    """
    def __init__(self, width: int, height: int, viewport_size: float = 1.0,
                 projection_plane_z: float = 1.0, position: Vector3 = Vector3(0.0, 0.0, 0.0)):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.viewport_size = viewport_size
        self.projection_plane_z = projection_plane_z
        self.position = position

    def canvas_to_viewport(self, px: float, py: float) -> Vector3:
        """Direction from the camera through centered pixel (px, py). Not normalized."""
        return Vector3(
            px * self.viewport_size / self.width,
            py * self.viewport_size / self.height,
            self.projection_plane_z,
        )

    pixel_to_ray_direction = canvas_to_viewport

    def get_ray(self, px: float, py: float) -> Ray:
        return Ray(self.position, self.canvas_to_viewport(px, py))

    def x_range(self) -> range:
        return range(-(self.width // 2), self.width // 2)

    def y_range(self) -> range:
        return range(-(self.height // 2), self.height // 2)

    def __repr__(self) -> str:
        return (f"Camera({self.width}x{self.height}, viewport={self.viewport_size}, "
                f"d={self.projection_plane_z}, position={self.position})")
