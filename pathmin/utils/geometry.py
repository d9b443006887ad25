"""Leaf-node geometry helpers for checking that two path strings draw the same thing. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Path, parse_path

# Points compared per block, keeps the pairwise distance matrix small
_BLOCK = 256


def _parse(d: str) -> Path:
    try:
        return parse_path(d)
    except AssertionError as e:
        # svgpathtools rejects arcs that end where they start
        raise ValueError(f"cannot sample path data {d[:32]!r}") from e


def sample_segments(d: str, samples_per_segment: int = 32, scale: float = 1.0) -> list[NDArray[np.float64]]:
    """Sample every drawn segment of ``d`` into an (n, 2) polyline, divided by ``scale``.

    Raises ValueError when svgpathtools cannot build the path.
    """
    path = _parse(d)
    ts = np.linspace(0.0, 1.0, samples_per_segment)
    polylines: list[NDArray[np.float64]] = []
    for seg in path:
        pts = np.array([seg.point(t) for t in ts], dtype=complex)
        polylines.append(np.column_stack([pts.real, pts.imag]) / scale)
    return polylines


def _pieces(polylines: list[NDArray[np.float64]]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    starts = np.concatenate([p[:-1] for p in polylines])
    ends = np.concatenate([p[1:] for p in polylines])
    return starts, ends


def point_to_pieces_distance(
    points: NDArray[np.float64],
    starts: NDArray[np.float64],
    ends: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Distance from each point to the nearest line piece (starts[i] → ends[i])."""
    ab = ends - starts
    ab_len2 = np.einsum("ij,ij->i", ab, ab)
    ab_len2 = np.where(ab_len2 == 0, 1.0, ab_len2)

    out = np.empty(len(points))
    for lo in range(0, len(points), _BLOCK):
        p = points[lo : lo + _BLOCK]
        ap = p[:, None, :] - starts[None, :, :]
        t = np.clip(np.einsum("ijk,jk->ij", ap, ab) / ab_len2, 0.0, 1.0)
        closest = starts[None, :, :] + t[..., None] * ab[None, :, :]
        out[lo : lo + _BLOCK] = np.linalg.norm(p[:, None, :] - closest, axis=-1).min(axis=1)
    return out


def max_deviation(original_d: str, optimized_d: str, scale: float = 1.0, samples_per_segment: int = 32) -> float:
    """Symmetric Hausdorff distance between the drawn geometry of two paths.

    ``optimized_d`` is taken to live in a space scaled by ``scale`` and is
    mapped back before comparing. Moves draw nothing and are ignored.
    """
    a = sample_segments(original_d, samples_per_segment)
    b = sample_segments(optimized_d, samples_per_segment, scale)
    if not a and not b:
        return 0.0
    if not a or not b:
        return float("inf")

    a_pts, b_pts = np.concatenate(a), np.concatenate(b)
    a_starts, a_ends = _pieces(a)
    b_starts, b_ends = _pieces(b)
    forward = point_to_pieces_distance(a_pts, b_starts, b_ends).max()
    backward = point_to_pieces_distance(b_pts, a_starts, a_ends).max()
    return float(max(forward, backward))
