# renderer/raytracer.py
import numpy as np
from core.color import Color
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import Scene
from renderer.framebuffer import FrameBuffer
from renderer.cpu_kernels import render_kernel
from config import RenderConfig

MIN_T = RenderConfig.MIN_T
MAX_T = RenderConfig.MAX_T

BACKENDS = ("numba", "python")

class Renderer:
    """
    Casts one primary ray per pixel and reports the color of the nearest sphere.

    Scene and camera are read-only for the renderer's lifetime, so every pixel
    is an independent, pure computation.
    """
    def __init__(self, camera: Camera, scene: Scene):
        self.camera = camera
        self.scene = scene
        # Flattened scene for the compiled kernel
        self._scene_arrays = None

    def trace(self, origin: Vector3, direction: Vector3,
              min_t: float = MIN_T, max_t: float = MAX_T) -> Color:
        """
        Returns the color seen along the ray origin + t*direction for t in (min_t, max_t).
        """
        hit = self.scene.closest_hit(origin, direction, min_t, max_t)
        if hit is None:
            return self.scene.background
        return hit.obj.color

    def render_pixel(self, px: int, py: int) -> Color:
        ray = self.camera.get_ray(px, py)
        return self.trace(ray.origin, ray.direction, MIN_T, MAX_T)

    def new_framebuffer(self) -> FrameBuffer:
        return FrameBuffer(self.camera.width, self.camera.height)

    def render(self, framebuffer: FrameBuffer = None) -> FrameBuffer:
        """Pure Python render over the centered pixel grid."""
        if framebuffer is None:
            framebuffer = self.new_framebuffer()
        else:
            framebuffer.clear()
        for px in self.camera.x_range():
            for py in self.camera.y_range():
                framebuffer.put_pixel(px, py, self.render_pixel(px, py))
        return framebuffer

    def render_parallel(self, framebuffer: FrameBuffer = None) -> FrameBuffer:
        """Same image as render(), computed by the multi-threaded numba kernel."""
        if framebuffer is None:
            framebuffer = self.new_framebuffer()
        else:
            framebuffer.clear()
        if self._scene_arrays is None:
            self._scene_arrays = self.scene.to_arrays()
        centers, radii, colors, background = self._scene_arrays
        camera = self.camera
        render_kernel(
            camera.width, camera.height,
            float(camera.viewport_size), float(camera.projection_plane_z),
            np.array(camera.position.to_tuple(), dtype=np.float64),
            MIN_T, MAX_T,
            centers, radii, colors, background,
            framebuffer.pixels,
        )
        return framebuffer

    def render_with(self, backend: str, framebuffer: FrameBuffer = None) -> FrameBuffer:
        if backend == "numba":
            return self.render_parallel(framebuffer)
        if backend == "python":
            return self.render(framebuffer)
        raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
