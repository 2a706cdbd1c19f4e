# renderer/cpu_kernels.py

from numba import njit, prange
import numpy as np
import math

INFINITY = math.inf

# error_model="numpy" keeps IEEE-754 behaviour for the unguarded division:
# a zero-length direction produces inf/nan, which the range tests reject.

@njit(error_model="numpy")
def intersect_ray_sphere(ox, oy, oz, dx, dy, dz, center, radius):
    """Ray-sphere intersection on the CPU. Returns (t1, t2), (inf, inf) on a miss."""
    ocx = ox - center[0]
    ocy = oy - center[1]
    ocz = oz - center[2]

    k1 = dx * dx + dy * dy + dz * dz
    k2 = 2.0 * (ocx * dx + ocy * dy + ocz * dz)
    k3 = (ocx * ocx + ocy * ocy + ocz * ocz) - radius * radius

    discriminant = k2 * k2 - 4.0 * k1 * k3
    if discriminant < 0.0:
        return INFINITY, INFINITY

    sqrt_disc = math.sqrt(discriminant)
    t1 = (-k2 + sqrt_disc) / (2.0 * k1)
    t2 = (-k2 - sqrt_disc) / (2.0 * k1)
    return t1, t2

@njit(error_model="numpy")
def trace_ray(ox, oy, oz, dx, dy, dz, t_min, t_max, centers, radii):
    """
    Index of the sphere owning the nearest hit in (t_min, t_max), or -1.
    """
    closest_t = INFINITY
    closest_index = -1

    for i in range(radii.shape[0]):
        t1, t2 = intersect_ray_sphere(ox, oy, oz, dx, dy, dz, centers[i], radii[i])
        if t1 < closest_t and t_min < t1 and t1 < t_max:
            closest_t = t1
            closest_index = i
        if t2 < closest_t and t_min < t2 and t2 < t_max:
            closest_t = t2
            closest_index = i

    return closest_index

@njit(parallel=True, error_model="numpy")
def render_kernel(width, height, viewport_size, projection_plane_z, camera_position,
                  t_min, t_max, centers, radii, colors, background, pixels):
    """
    Renders every centered pixel of a width x height image into pixels, a
    row-major uint32 buffer of packed 0xRRGGBB words. Pixels are placed
    relative to the buffer center and dropped when they fall outside it.
    Columns are split across threads.
    """
    half_w = width // 2
    half_h = height // 2
    buffer_height = pixels.shape[0]
    buffer_width = pixels.shape[1]
    buffer_half_w = buffer_width // 2
    buffer_half_h = buffer_height // 2
    ox = camera_position[0]
    oy = camera_position[1]
    oz = camera_position[2]

    for i in prange(2 * half_w):
        px = np.int64(i) - half_w
        bx = buffer_half_w + px
        if bx < 0 or bx >= buffer_width:
            continue
        dx = px * viewport_size / width
        for j in range(2 * half_h):
            py = j - half_h
            by = buffer_half_h - py - 1
            if by < 0 or by >= buffer_height:
                continue
            dy = py * viewport_size / height

            index = trace_ray(ox, oy, oz, dx, dy, projection_plane_z, t_min, t_max, centers, radii)
            if index < 0:
                r = background[0]
                g = background[1]
                b = background[2]
            else:
                r = colors[index, 0]
                g = colors[index, 1]
                b = colors[index, 2]
            pixels[by, bx] = np.uint32((r << 16) | (g << 8) | b)
