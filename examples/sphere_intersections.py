#!/usr/bin/env python3
"""Intersect rays with a unit sphere and print the hits.

Walks the five textbook ray/sphere cases (through the center, tangent,
miss, starting inside, sphere behind the ray), then prints the surface
normal of a sphere that has been rotated and squashed.

Usage:
    python examples/sphere_intersections.py
"""

from __future__ import annotations

import math
import sys

from raycore import Point, Ray, Sphere, Vector, rotation_z, scaling

CASES = [
    ("through center", Ray(Point(0, 0, -5), Vector(0, 0, 1))),
    ("tangent", Ray(Point(0, 1, -5), Vector(0, 0, 1))),
    ("miss", Ray(Point(0, 2, -5), Vector(0, 0, 1))),
    ("from inside", Ray(Point(0, 0, 0), Vector(0, 0, 1))),
    ("sphere behind", Ray(Point(0, 0, 5), Vector(0, 0, 1))),
]


def main() -> int:
    """Print intersections for each case and one transformed normal."""
    print("=" * 60)
    print("Sphere Intersection Demo")
    print("=" * 60)

    sphere = Sphere()
    for label, ray in CASES:
        xs = sphere.intersect(ray)
        hit = xs.hit()
        print(f"{label:>15}: t = {[x.t for x in xs]}, hit = {hit.t if hit else None}")

    print("\n--- Transformed Sphere ---")
    sphere.transform = scaling(1, 0.5, 1) @ rotation_z(math.pi / 5)
    n = sphere.normal_at(Point(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
    print(f"Normal: {n}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
