"""Configuration for the sphere caster.

Defaults for the window, camera and renderer live here. The command line can
override the image size and backend; nothing changes once rendering starts.
"""
from core.vector import Vector3


# ==============================================================================
# DISPLAY
# ==============================================================================

class DisplayConfig:
    """Window and output image parameters."""

    WIDTH = 600                 # Image width in pixels
    HEIGHT = 600                # Image height in pixels

    WINDOW_TITLE = "Sphere Caster - ESC to exit"

    TARGET_FPS = 60             # Display loop cap; the image itself is static


# ==============================================================================
# CAMERA
# ==============================================================================

class CameraConfig:
    """Fixed pinhole camera."""

    POSITION = Vector3(0.0, 0.0, 0.0)
    VIEWPORT_SIZE = 1.0         # Side of the square viewport in world units
    PROJECTION_PLANE_Z = 1.0    # Distance from camera to the viewport


# ==============================================================================
# RENDERER
# ==============================================================================

class RenderConfig:
    """Ray casting parameters."""

    BACKEND = "numba"           # "numba" (parallel kernel) or "python"
    MIN_T = 1.0                 # Near bound, t = 1 is the projection plane
    MAX_T = float("inf")        # No far clipping
