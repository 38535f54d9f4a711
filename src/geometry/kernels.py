# geometry/kernels.py

import math

from numba import njit

from core.utils import DETERMINANT_EPSILON, NO_HIT

@njit(nogil=True)
def ray_triangle_solve(eye, direction, va, vb, vc):
    """
    Ray-triangle intersection by Cramer's rule on

        E + t*D = A + beta*(B - A) + gamma*(C - A)

    All arguments are float triples in the triangle's object space.
    Returns (t, alpha, beta, gamma); t is NO_HIT when the system is
    degenerate or the solution lies outside the triangle or behind the
    origin. Edges and vertices count as inside.
    """
    a = va[0] - vb[0]
    b = va[1] - vb[1]
    c = va[2] - vb[2]
    d = va[0] - vc[0]
    e = va[1] - vc[1]
    f = va[2] - vc[2]
    g = direction[0]
    h = direction[1]
    i = direction[2]
    j = va[0] - eye[0]
    k = va[1] - eye[1]
    l = va[2] - eye[2]

    # Cofactors shared between M, beta, gamma and t
    ei_hf = e * i - h * f
    gf_di = g * f - d * i
    dh_eg = d * h - e * g
    ak_jb = a * k - j * b
    jc_al = j * c - a * l
    bl_kc = b * l - k * c

    m = a * ei_hf + b * gf_di + c * dh_eg

    # |M| = |D . (B - A) x (C - A)|, so compare it against |D| * |(B - A) x (C - A)|
    nx = b * f - c * e
    ny = c * d - a * f
    nz = a * e - b * d
    scale = math.sqrt((g * g + h * h + i * i) * (nx * nx + ny * ny + nz * nz))
    if not abs(m) > DETERMINANT_EPSILON * scale:
        return NO_HIT, 0.0, 0.0, 0.0

    t = -(f * ak_jb + e * jc_al + d * bl_kc) / m
    if not t >= 0.0:
        return NO_HIT, 0.0, 0.0, 0.0

    gamma = (i * ak_jb + h * jc_al + g * bl_kc) / m
    if not 0.0 <= gamma <= 1.0:
        return NO_HIT, 0.0, 0.0, 0.0

    beta = (j * ei_hf + k * gf_di + l * dh_eg) / m
    if not 0.0 <= beta <= 1.0 - gamma:
        return NO_HIT, 0.0, 0.0, 0.0

    # Rounding on the B-C edge can push 1 - beta - gamma just below zero
    alpha = max(0.0, 1.0 - beta - gamma)
    return t, alpha, beta, gamma

@njit(nogil=True)
def ray_sphere_solve(eye, direction, radius):
    """
    Ray intersection with a sphere of the given radius centred at the
    object-space origin. Returns the nearer positive root, the farther one
    when the origin is inside the sphere, or NO_HIT.
    """
    dd = direction[0] * direction[0] + direction[1] * direction[1] + direction[2] * direction[2]
    if dd == 0.0:
        return NO_HIT

    d_ec = direction[0] * eye[0] + direction[1] * eye[1] + direction[2] * eye[2]
    ec_ec = eye[0] * eye[0] + eye[1] * eye[1] + eye[2] * eye[2]

    discriminant = d_ec * d_ec - dd * (ec_ec - radius * radius)
    if discriminant < 0.0:
        return NO_HIT

    sqrtd = math.sqrt(discriminant)
    t1 = (-d_ec + sqrtd) / dd
    t2 = (-d_ec - sqrtd) / dd

    # Sphere entirely behind the ray origin
    if t1 <= 0.0:
        return NO_HIT
    if t2 > 0.0:
        return t2
    return t1
