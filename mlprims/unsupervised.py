"""Unsupervised learning: k-means clustering and pairwise-distance clustering."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = [
    "kmeans_clustering",
    "HierarchicalClusteringResult",
    "hierarchical_clustering",
]

Points = list[list[float]]


def _points(data: Sequence[Sequence[float]], what: str) -> Points:
    rows = [[float(v) for v in row] for row in data]
    if not rows:
        raise ValueError(f"{what} must hold at least one point")
    width = len(rows[0])
    if width == 0:
        raise ValueError(f"{what} must have at least one feature")
    if any(len(row) != width for row in rows):
        raise ValueError(f"every point in {what} must have {width} features")
    return rows


def _squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def _nearest(point: Sequence[float], centroids: Points) -> int:
    best_index, best_distance = 0, math.inf
    for index, centroid in enumerate(centroids):
        distance = _squared_distance(point, centroid)
        if distance < best_distance:
            best_index, best_distance = index, distance
    return best_index


def _centroid(members: list[list[float]], width: int) -> list[float]:
    if not members:
        # An empty cluster has no mean; it keeps no position.
        return [math.nan] * width
    return [sum(column) / len(members) for column in zip(*members)]


def kmeans_clustering(
    data: Sequence[Sequence[float]],
    centroids: Sequence[Sequence[float]],
    max_iterations: int = 100,
    tolerance: float = 1e-4,
) -> tuple[list[int], Points]:
    """Run Lloyd's k-means from the given initial centroids.

    Returns (labels, centroids). The labels are those of the last assignment
    step, made before the final centroid update. A cluster that receives no
    points gets NaN coordinates. Iteration stops once no centroid coordinate
    moves by tolerance or more, or after max_iterations rounds.
    """
    points = _points(data, "data")
    current = _points(centroids, "centroids")
    width = len(points[0])
    if len(current[0]) != width:
        raise ValueError("centroids must have as many features as the data")
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")

    labels: list[int] = []
    for _ in range(max_iterations):
        labels = [_nearest(point, current) for point in points]
        members: list[list[list[float]]] = [[] for _ in current]
        for point, label in zip(points, labels):
            members[label].append(point)
        updated = [_centroid(group, width) for group in members]

        max_shift = 0.0
        for old, new in zip(current, updated):
            for a, b in zip(old, new):
                shift = abs(b - a)
                if shift > max_shift:
                    max_shift = shift
        current = updated
        if max_shift < tolerance:
            break
    return labels, current


@dataclass
class HierarchicalClusteringResult:
    """Cluster index per point and the full matrix of pairwise distances."""

    clusters: list[int] = field(default_factory=list)
    distances: Points = field(default_factory=list)


def hierarchical_clustering(data: Sequence[Sequence[float]]) -> HierarchicalClusteringResult:
    """Compute pairwise Euclidean distances and put every point in its own cluster."""
    points = _points(data, "data")
    distances = [
        [math.sqrt(_squared_distance(a, b)) for b in points] for a in points
    ]
    return HierarchicalClusteringResult(
        clusters=list(range(len(points))), distances=distances
    )