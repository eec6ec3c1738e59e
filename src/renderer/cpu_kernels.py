# renderer/cpu_kernels.py
#
# Compiled CPU path of the renderer. Works on the arrays produced by
# Scene.pack() and mirrors the object-based pipeline operation for operation
# (including the double normalization done by Ray) so both paths agree.

from numba import njit, prange
import numpy as np
import math
from geometry.hittable import RAY_EPSILON
from geometry.plane import PARALLEL_EPSILON
from geometry.world import SHADOW_BIAS, KIND_SPHERE

INFINITY = np.inf

@njit
def dot(ax, ay, az, bx, by, bz):
    return ax * bx + ay * by + az * bz

@njit
def normalize(x, y, z):
    l = math.sqrt(dot(x, y, z, x, y, z))
    if l > 0.0:
        inv = 1.0 / l
        return x * inv, y * inv, z * inv
    return x, y, z

@njit
def clamp_channel(v):
    if v < 0:
        return 0
    if v > 255:
        return 255
    return v

@njit
def scale_color(r, g, b, s):
    return (clamp_channel(int(r * s)),
            clamp_channel(int(g * s)),
            clamp_channel(int(b * s)))

@njit
def add_color(r0, g0, b0, r1, g1, b1):
    return clamp_channel(r0 + r1), clamp_channel(g0 + g1), clamp_channel(b0 + b1)

@njit
def intersect_object(kind, geo, ox, oy, oz, dx, dy, dz):
    """Ray parameter of a hit on one packed object, or -1.0 on a miss."""
    if kind == KIND_SPHERE:
        ocx = ox - geo[0]
        ocy = oy - geo[1]
        ocz = oz - geo[2]
        radius = geo[3]
        a = dot(dx, dy, dz, dx, dy, dz)
        b = 2.0 * dot(ocx, ocy, ocz, dx, dy, dz)
        c = dot(ocx, ocy, ocz, ocx, ocy, ocz) - radius * radius
        disc = b * b - 4.0 * a * c
        if a == 0.0 or disc < 0:
            return -1.0
        sq = math.sqrt(disc)
        t0 = (-b - sq) / (2.0 * a)
        t1 = (-b + sq) / (2.0 * a)
        t = t0 if t0 > RAY_EPSILON else t1
        if t > RAY_EPSILON:
            return t
        return -1.0

    denom = dot(geo[3], geo[4], geo[5], dx, dy, dz)
    if abs(denom) <= PARALLEL_EPSILON:
        return -1.0
    t = dot(geo[0] - ox, geo[1] - oy, geo[2] - oz, geo[3], geo[4], geo[5]) / denom
    if t >= RAY_EPSILON:
        return t
    return -1.0

@njit
def nearest_hit(kinds, geometry, ox, oy, oz, dx, dy, dz):
    """Index and ray parameter of the nearest object; index -1 on a miss."""
    best = -1
    best_t = INFINITY
    for i in range(kinds.shape[0]):
        t = intersect_object(kinds[i], geometry[i], ox, oy, oz, dx, dy, dz)
        if t >= 0.0 and t < best_t:
            best_t = t
            best = i
    return best, best_t

@njit
def in_shadow(kinds, geometry, px, py, pz, lx, ly, lz):
    tx = lx - px
    ty = ly - py
    tz = lz - pz
    light_dist = math.sqrt(dot(tx, ty, tz, tx, ty, tz))
    if light_dist == 0.0:
        return False
    dx, dy, dz = normalize(tx, ty, tz)
    ox = px + dx * SHADOW_BIAS
    oy = py + dy * SHADOW_BIAS
    oz = pz + dz * SHADOW_BIAS
    dx, dy, dz = normalize(dx, dy, dz)
    idx, t = nearest_hit(kinds, geometry, ox, oy, oz, dx, dy, dz)
    return idx >= 0 and t < light_dist

@njit
def shade_pixel(kinds, geometry, colors, coefficients, light_positions, light_colors,
                light_intensities, background, ox, oy, oz, dx, dy, dz):
    """Returns (r, g, b, hit_index, px, py, pz) for one primary ray."""
    idx, t = nearest_hit(kinds, geometry, ox, oy, oz, dx, dy, dz)
    if idx < 0:
        return background[0], background[1], background[2], -1, 0.0, 0.0, 0.0

    px = ox + dx * t
    py = oy + dy * t
    pz = oz + dz * t
    geo = geometry[idx]
    if kinds[idx] == KIND_SPHERE:
        nx, ny, nz = normalize(px - geo[0], py - geo[1], pz - geo[2])
    else:
        nx, ny, nz = geo[3], geo[4], geo[5]

    cr = colors[idx, 0]
    cg = colors[idx, 1]
    cb = colors[idx, 2]
    ambient = coefficients[idx, 0]
    diffuse_k = coefficients[idx, 1]
    specular_k = coefficients[idx, 2]
    shininess = coefficients[idx, 3]

    r, g, b = scale_color(cr, cg, cb, ambient)
    vx, vy, vz = normalize(-dx, -dy, -dz)
    for li in range(light_positions.shape[0]):
        lpx = light_positions[li, 0]
        lpy = light_positions[li, 1]
        lpz = light_positions[li, 2]
        if in_shadow(kinds, geometry, px, py, pz, lpx, lpy, lpz):
            continue
        lx, ly, lz = normalize(lpx - px, lpy - py, lpz - pz)
        diff = max(0.0, dot(nx, ny, nz, lx, ly, lz))
        dr, dg, db = scale_color(cr, cg, cb, diffuse_k * diff)

        hx, hy, hz = normalize(lx + vx, ly + vy, lz + vz)
        spec = max(0.0, dot(nx, ny, nz, hx, hy, hz)) ** shininess
        sr, sg, sb = scale_color(light_colors[li, 0], light_colors[li, 1],
                                 light_colors[li, 2], specular_k * spec)

        kr, kg, kb = add_color(dr, dg, db, sr, sg, sb)
        kr, kg, kb = scale_color(kr, kg, kb, light_intensities[li])
        r, g, b = add_color(r, g, b, kr, kg, kb)

    return r, g, b, idx, px, py, pz

@njit(parallel=True)
def render_kernel(image, mask, width, height, origin, forward, right, up, half_height, aspect,
                  kinds, geometry, colors, coefficients, light_positions, light_colors,
                  light_intensities, background, mask_light):
    """
    Fill ``image`` and ``mask`` (both (height, width, 3) uint8). Rows are
    independent so they are distributed across threads.
    """
    ox = origin[0]
    oy = origin[1]
    oz = origin[2]
    has_lights = light_positions.shape[0] > 0
    for y in prange(height):
        for x in range(width):
            sx = (2.0 * (x + 0.5) / width - 1.0) * half_height * aspect
            sy = (1.0 - 2.0 * (y + 0.5) / height) * half_height
            dx = forward[0] + right[0] * sx + up[0] * sy
            dy = forward[1] + right[1] * sx + up[1] * sy
            dz = forward[2] + right[2] * sx + up[2] * sy
            dx, dy, dz = normalize(dx, dy, dz)
            dx, dy, dz = normalize(dx, dy, dz)

            r, g, b, idx, px, py, pz = shade_pixel(
                kinds, geometry, colors, coefficients, light_positions, light_colors,
                light_intensities, background, ox, oy, oz, dx, dy, dz)
            image[y, x, 0] = r
            image[y, x, 1] = g
            image[y, x, 2] = b

            shadowed = False
            if idx >= 0 and has_lights:
                shadowed = in_shadow(kinds, geometry, px, py, pz,
                                     light_positions[mask_light, 0],
                                     light_positions[mask_light, 1],
                                     light_positions[mask_light, 2])
            value = 0 if shadowed else 255
            mask[y, x, 0] = value
            mask[y, x, 1] = value
            mask[y, x, 2] = value
