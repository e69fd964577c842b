"""
Route Clustering — groups nearby route points so one climate lookup can
serve several of them.

Compute:
    - Planar distance in degree space (not geodesic)
    - Seeded single-link grouping: each group is a seed point plus every later
      unassigned point within the threshold of that seed
    - Centroid (arithmetic mean position) of a group
"""

import math

import numpy as np


def distance(a, b) -> float:
    """
    Euclidean distance between two points in (latitude, longitude) degrees.

    Only used to bound provider fan-out, so no geodesic correction.
    """
    return math.sqrt((a.latitude - b.latitude) ** 2 + (a.longitude - b.longitude) ** 2)


def cluster(points, threshold: float) -> list[list]:
    """
    Seeded single-link grouping of points, O(n²).

    Points are taken in input order. Each point not yet assigned opens a new
    group as its seed; every later unassigned point closer than `threshold`
    to that seed (not to any other member) joins the group. The result is
    order-dependent and is a partition of the input.

    Args:
        points: sequence of objects with latitude/longitude attributes
        threshold: grouping radius in degrees (strict: distance < threshold)

    Returns:
        List of groups, each a list of the original points, seed first.
    """
    points = list(points)
    assigned = [False] * len(points)
    groups = []

    for i, seed in enumerate(points):
        if assigned[i]:
            continue
        assigned[i] = True
        group = [seed]

        for j in range(i + 1, len(points)):
            if assigned[j]:
                continue
            if distance(seed, points[j]) < threshold:
                group.append(points[j])
                assigned[j] = True

        groups.append(group)

    return groups


def centroid(points) -> tuple[float, float]:
    """Mean (latitude, longitude) of a non-empty group."""
    if not points:
        raise ValueError("centroid of an empty group is undefined")
    lats = np.array([p.latitude for p in points], dtype=float)
    lons = np.array([p.longitude for p in points], dtype=float)
    return float(lats.mean()), float(lons.mean())


if __name__ == "__main__":
    from climate_types import DailyPoint
    from datetime import datetime, timezone

    noon = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
    demo = [
        DailyPoint(noon, 10.00, 20.00),
        DailyPoint(noon, 10.05, 20.05),
        DailyPoint(noon, 10.50, 20.50),
    ]
    for k, g in enumerate(cluster(demo, 0.1)):
        print(f"  group {k}: {len(g)} point(s), centroid={centroid(g)}")
