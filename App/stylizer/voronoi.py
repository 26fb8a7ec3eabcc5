"""Exact polygonal Voronoi cells by successive half-plane clipping.

AIDEV-NOTE: Each cell starts as the full frame rectangle and is clipped
(Sutherland-Hodgman) against the perpendicular bisector between its seed
and every other seed. O(n^2) clips overall, which is fine for the tens to
low hundreds of seeds the adaptive sampler produces.
"""

import logging
from typing import TYPE_CHECKING

from models import Cell

if TYPE_CHECKING:
    from models import Seed

logger = logging.getLogger(__name__)

PARALLEL_EPSILON = 1e-10


def bounding_box(width: float, height: float) -> "list[tuple[float, float]]":
    """Frame rectangle as a 4-vertex polygon, clockwise on screen."""
    return [(0, 0), (width, 0), (width, height), (0, height)]


def _dist2(a, b) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def intersect_bisector(a, b, p, q) -> "tuple[float, float] | None":
    """Point where segment a->b crosses the perpendicular bisector of p, q.

    Returns:
        Intersection point, or None if the segment is parallel to the
        bisector or the crossing lies outside the segment
    """
    mx = (p[0] + q[0]) / 2
    my = (p[1] + q[1]) / 2
    ab_dx = b[0] - a[0]
    ab_dy = b[1] - a[1]
    pq_dx = q[0] - p[0]
    pq_dy = q[1] - p[1]

    denom = ab_dx * pq_dx + ab_dy * pq_dy
    if abs(denom) < PARALLEL_EPSILON:
        return None

    numer = (mx - a[0]) * pq_dx + (my - a[1]) * pq_dy
    t = numer / denom

    if t < 0 or t > 1:
        return None

    return (a[0] + t * ab_dx, a[1] + t * ab_dy)


def clip_polygon(poly, p, q) -> "list[tuple[float, float]]":
    """Keep the part of a convex polygon at least as close to p as to q.

    Args:
        poly: Polygon vertices in order
        p: Seed owning the cell
        q: Competing seed

    Returns:
        Clipped polygon, possibly empty
    """
    clipped = []
    count = len(poly)

    for i in range(count):
        curr = poly[i]
        nxt = poly[(i + 1) % count]
        curr_inside = _dist2(curr, p) <= _dist2(curr, q)
        next_inside = _dist2(nxt, p) <= _dist2(nxt, q)

        if curr_inside and next_inside:
            clipped.append(nxt)
        elif curr_inside:
            crossing = intersect_bisector(curr, nxt, p, q)
            if crossing is not None:
                clipped.append(crossing)
        elif next_inside:
            crossing = intersect_bisector(curr, nxt, p, q)
            if crossing is not None:
                clipped.append(crossing)
            # A parallel edge still hands over its inside endpoint
            clipped.append(nxt)

    return clipped


def compute_cell(index: int, seeds: "list[Seed]", bbox) -> Cell:
    """Build the cell of ``seeds[index]`` inside ``bbox``."""
    seed = seeds[index]
    p = seed.point
    cell = list(bbox)

    for other_index, other in enumerate(seeds):
        if other_index == index:
            continue

        cell = clip_polygon(cell, p, other.point)

        # Nothing can grow an empty cell back
        if not cell:
            break

    return Cell(seed=seed, points=cell)


def build(seeds: "list[Seed]", width: float, height: float) -> "list[Cell]":
    """Compute one cell per seed over the [0, width] x [0, height] frame.

    Returns:
        Cells in seed order; fully clipped cells have no points
    """
    if not seeds or width <= 0 or height <= 0:
        return []

    bbox = bounding_box(width, height)
    cells = [compute_cell(i, seeds, bbox) for i in range(len(seeds))]

    logger.debug(
        "Built %d cells (%d empty) over %sx%s",
        len(cells),
        sum(1 for cell in cells if cell.is_empty),
        width,
        height,
    )
    return cells


def polygon_area(points) -> float:
    """Absolute shoelace area of a simple polygon."""
    if len(points) < 3:
        return 0.0

    total = 0.0
    for i, (x1, y1) in enumerate(points):
        x2, y2 = points[(i + 1) % len(points)]
        total += x1 * y2 - x2 * y1
    return abs(total) / 2


def contains_point(points, pt, tolerance: float = 1e-9) -> bool:
    """Whether a convex polygon contains ``pt`` (boundary included)."""
    if len(points) < 3:
        return False

    sign = 0
    for i, (x1, y1) in enumerate(points):
        x2, y2 = points[(i + 1) % len(points)]
        cross = (x2 - x1) * (pt[1] - y1) - (y2 - y1) * (pt[0] - x1)

        if abs(cross) <= tolerance:
            continue
        if sign == 0:
            sign = 1 if cross > 0 else -1
        elif (cross > 0) != (sign > 0):
            return False

    return True
