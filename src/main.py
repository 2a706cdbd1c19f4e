# main.py
import argparse
import time
import traceback
import pygame
from camera.camera import Camera
from config import DisplayConfig, CameraConfig, RenderConfig
from renderer.framebuffer import FrameBuffer
from renderer.raytracer import Renderer, BACKENDS
from scenes.three_spheres import create_scene

class Application:
    def __init__(self, width: int = DisplayConfig.WIDTH, height: int = DisplayConfig.HEIGHT,
                 backend: str = RenderConfig.BACKEND):
        self.width = width
        self.height = height
        self.backend = backend

        self.camera = Camera(
            width, height,
            viewport_size=CameraConfig.VIEWPORT_SIZE,
            projection_plane_z=CameraConfig.PROJECTION_PLANE_Z,
            position=CameraConfig.POSITION,
        )
        self.scene = create_scene()
        self.renderer = Renderer(self.camera, self.scene)
        self.framebuffer = None

    def render(self) -> FrameBuffer:
        """Renders the still image once and keeps the buffer for display."""
        print("\n=== Rendering ===")
        print(f"Resolution: {self.width}x{self.height}")
        print(f"Backend: {self.backend}")
        print(f"Scene: {self.scene}")

        start = time.perf_counter()
        self.framebuffer = self.renderer.render_with(self.backend)
        elapsed = time.perf_counter() - start
        # The first numba call includes JIT compilation
        print(f"Render finished in {elapsed:.3f}s")
        return self.framebuffer

    def run(self):
        if self.framebuffer is None:
            self.render()

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(DisplayConfig.WINDOW_TITLE)
            surface = pygame.surfarray.make_surface(self.framebuffer.to_surface_array())
            clock = pygame.time.Clock()

            running = True
            while running:
                clock.tick(DisplayConfig.TARGET_FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False

                keys = pygame.key.get_pressed()
                if keys[pygame.K_ESCAPE]:
                    running = False

                screen.blit(surface, (0, 0))
                pygame.display.flip()
        finally:
            print("Cleaning up...")
            pygame.quit()

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Ray cast a fixed scene of spheres.")
    parser.add_argument("--width", type=int, default=DisplayConfig.WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=DisplayConfig.HEIGHT, help="Image height in pixels")
    parser.add_argument("--backend", choices=BACKENDS, default=RenderConfig.BACKEND,
                        help="numba runs the parallel kernel, python the reference loop")
    parser.add_argument("--output", default=None, help="Save the rendered image as a PNG")
    parser.add_argument("--headless", action="store_true", help="Do not open a window")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error(f"image size must be positive, got {args.width}x{args.height}")
    return args

def main(argv=None):
    args = parse_args(argv)
    app = Application(args.width, args.height, args.backend)

    try:
        app.render()
        if args.output:
            app.framebuffer.save(args.output)
            print(f"Saved image to {args.output}")
        if not args.headless:
            app.run()
    except Exception as e:
        print(f"Error during execution: {e}")
        traceback.print_exc()
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
