"""Predefined mesh helpers."""

from __future__ import annotations

import math
from typing import List, Tuple

from .engine import Face, Vec3, WireMesh

GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0

# Triples of mutually adjacent vertices, wound so normals point outward.
ICOSAHEDRON_FACES: Tuple[Face, ...] = (
    (0, 8, 2), (0, 4, 8), (0, 6, 4), (0, 9, 6), (0, 2, 9),
    (1, 3, 10), (1, 10, 4), (1, 4, 6), (1, 6, 11), (1, 11, 3),
    (2, 8, 5), (2, 5, 7), (2, 7, 9),
    (3, 5, 10), (3, 7, 5), (3, 11, 7),
    (4, 10, 8), (5, 8, 10), (6, 9, 11), (7, 11, 9),
)


def icosahedron_vertices(scale: float = 1.0) -> List[Vec3]:
    """Return the 12 cyclic permutations of ``(0, ±1, ±φ)`` scaled by ``scale``."""

    phi = GOLDEN_RATIO
    raw = [
        (0.0, -1.0, -phi), (0.0, -1.0, phi), (0.0, 1.0, -phi), (0.0, 1.0, phi),
        (-1.0, -phi, 0.0), (-1.0, phi, 0.0), (1.0, -phi, 0.0), (1.0, phi, 0.0),
        (-phi, 0.0, -1.0), (phi, 0.0, -1.0), (-phi, 0.0, 1.0), (phi, 0.0, 1.0),
    ]
    return [Vec3(x, y, z) * scale for x, y, z in raw]


def icosahedron_mesh(scale: float = 1.0) -> WireMesh:
    """Return a regular icosahedron centred at the origin with edge length ``2 * scale``."""

    if scale <= 0.0:
        raise ValueError("icosahedron scale must be positive")
    return WireMesh(icosahedron_vertices(scale), ICOSAHEDRON_FACES)
