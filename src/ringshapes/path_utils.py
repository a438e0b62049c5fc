"""
path_utils.py
-------------

Path construction and composition on top of `matplotlib.path.Path`.

Ring generators describe their outlines with a small incremental builder
(`PathBuilder`), which emits Matplotlib ``MOVETO``/``LINETO``/``CURVE4``/
``CLOSEPOLY`` codes. Circular arcs are modeled as chains of cubic Bezier
segments, each spanning at most 90deg and using the analytic
``4/3*tan(dtheta/4)`` handle length.

Hollow shapes and gear cutouts are composed with the even-odd rule. Matplotlib
renders compound paths with the nonzero rule, so `evenodd_compound` computes the
even-odd region with shapely (symmetric difference of the flattened contours)
and emits it with counter-clockwise exteriors and clockwise holes.

Core API:

    PathBuilder().move_to(p).line_to(p).arc(...).close().to_path() -> mplPath

    split_subpaths(path: mplPath) -> list[mplPath]

        Splits a compound path at every MOVETO.

    flatten_contour(contour: mplPath) -> np.ndarray

        Polyline vertices of one contour, curves sampled.

    evenodd_compound(*paths: mplPath) -> mplPath

        Combines contours so that nonzero filling matches even-odd filling.

    contains_point_evenodd(path: mplPath, point: PointXY) -> bool

        Even-odd point containment across all contours of a compound path.
"""

from __future__ import annotations

__all__ = [
    "MAX_ARC_STEP", "PathBuilder", "empty_path", "circle_path",
    "split_subpaths", "flatten_contour", "signed_area",
    "polygons_to_path", "evenodd_compound", "contains_point_evenodd",
]

import math
import logging
from typing import Optional

import numpy as np
from matplotlib.path import Path as mplPath
from shapely.geometry import Polygon
from shapely.geometry.polygon import orient
from shapely.validation import make_valid

from .geometry import PointXY, arc_sweep, point_on_circle, TAU

logger = logging.getLogger(__name__)

MAX_ARC_STEP = math.pi / 2
CURVE_SAMPLES = 16


def empty_path() -> mplPath:
    return mplPath(np.empty((0, 2), dtype=float))


# ---------------------------------------------------------------------------
# Incremental path builder
# ---------------------------------------------------------------------------
class PathBuilder:
    """Accumulates vertices and codes for a `matplotlib.path.Path`.

    Mirrors the usual retained-mode drawing calls: `arc` connects to the
    current point with a straight line (or starts a new subpath when there is
    none), `close` returns the current point to the subpath start.
    """

    __slots__ = ("_verts", "_codes", "_start", "_current")

    def __init__(self) -> None:
        self._verts: list[PointXY] = []
        self._codes: list[int] = []
        self._start: Optional[PointXY] = None
        self._current: Optional[PointXY] = None

    @property
    def current_point(self) -> Optional[PointXY]:
        return self._current

    def move_to(self, point: PointXY) -> PathBuilder:
        point = (float(point[0]), float(point[1]))
        self._verts.append(point)
        self._codes.append(mplPath.MOVETO)
        self._start = self._current = point
        return self

    def line_to(self, point: PointXY) -> PathBuilder:
        if self._current is None:
            return self.move_to(point)
        point = (float(point[0]), float(point[1]))
        self._verts.append(point)
        self._codes.append(mplPath.LINETO)
        self._current = point
        return self

    def curve_to(self, end: PointXY, control1: PointXY, control2: PointXY) -> PathBuilder:
        """Cubic Bezier from the current point to ``end``."""
        if self._current is None:
            self.move_to(end)
            return self
        self._verts.extend([tuple(control1), tuple(control2), tuple(end)])
        self._codes.extend([mplPath.CURVE4] * 3)
        self._current = (float(end[0]), float(end[1]))
        return self

    def arc(
            self,
            center    : PointXY,
            radius    : float,
            start     : float,
            end       : float,
            clockwise : bool = False,
        ) -> PathBuilder:
        """Append a circular arc from angle ``start`` to ``end`` (radians).

        The sweep follows `geometry.arc_sweep`. Each sub-arc spans at most
        `MAX_ARC_STEP`.
        """
        first = point_on_circle(center, radius, start)
        if self._current is None:
            self.move_to(first)
        elif not np.allclose(self._current, first):
            self.line_to(first)

        sweep = arc_sweep(start, end, clockwise)
        if sweep == 0 or radius == 0:
            return self

        steps = max(1, math.ceil(sweep / MAX_ARC_STEP - 1e-9))
        step = (-sweep if clockwise else sweep) / steps
        t = 4.0 / 3.0 * math.tan(step / 4.0)
        cx, cy = center

        theta_beg = start
        for _ in range(steps):
            theta_end = theta_beg + step
            cos_b, sin_b = math.cos(theta_beg), math.sin(theta_beg)
            cos_e, sin_e = math.cos(theta_end), math.sin(theta_end)

            P1 = (cx + radius * (cos_b - t * sin_b), cy + radius * (sin_b + t * cos_b))
            P2 = (cx + radius * (cos_e + t * sin_e), cy + radius * (sin_e - t * cos_e))
            P3 = (cx + radius * cos_e, cy + radius * sin_e)

            self._verts.extend([P1, P2, P3])
            self._codes.extend([mplPath.CURVE4] * 3)
            theta_beg = theta_end

        self._current = self._verts[-1]
        return self

    def add_circle(self, center: PointXY, radius: float) -> PathBuilder:
        """Append a full circle as its own closed subpath."""
        self.move_to(point_on_circle(center, radius, 0.0))
        self.arc(center, radius, 0.0, TAU)
        return self.close()

    def close(self) -> PathBuilder:
        if self._start is None or self._codes[-1] == mplPath.CLOSEPOLY:
            return self
        self._verts.append(self._start)
        self._codes.append(mplPath.CLOSEPOLY)
        self._current = self._start
        return self

    def to_path(self) -> mplPath:
        if not self._verts:
            return empty_path()
        return mplPath(np.array(self._verts, dtype=float),
                       np.array(self._codes, dtype=mplPath.code_type))


def circle_path(center: PointXY, radius: float) -> mplPath:
    return PathBuilder().add_circle(center, radius).to_path()




# ---------------------------------------------------------------------------
# Contour utilities
# ---------------------------------------------------------------------------
def _codes_of(path: mplPath) -> np.ndarray:
    if path.codes is not None:
        return np.asarray(path.codes)
    codes = np.full(len(path.vertices), mplPath.LINETO, dtype=mplPath.code_type)
    if len(codes):
        codes[0] = mplPath.MOVETO
    return codes


def split_subpaths(path: mplPath) -> list[mplPath]:
    """Split a compound path into one path per contour."""
    verts = np.asarray(path.vertices, dtype=float)
    codes = _codes_of(path)
    if len(codes) == 0:
        return []

    starts = np.flatnonzero(codes == mplPath.MOVETO)
    if len(starts) == 0 or starts[0] != 0:
        starts = np.concatenate([[0], starts])
    bounds = list(starts) + [len(codes)]

    subpaths = []
    for beg, end in zip(bounds, bounds[1:]):
        if end - beg < 1:
            continue
        sub_codes = codes[beg:end].copy()
        sub_codes[0] = mplPath.MOVETO
        subpaths.append(mplPath(verts[beg:end], sub_codes))
    return subpaths


def flatten_contour(contour: mplPath, samples: int = CURVE_SAMPLES) -> np.ndarray:
    """Polyline vertices of a single contour.

    Curve segments are evaluated at ``samples`` evenly spaced parameters, so
    the tolerance does not depend on the coordinate scale.
    """
    pts = []
    t = np.linspace(0.0, 1.0, samples + 1)[1:]
    for curve, code in contour.iter_bezier(simplify=False):
        if code == mplPath.MOVETO:
            pts.append(curve.control_points[0])
        elif code in (mplPath.CURVE3, mplPath.CURVE4):
            pts.extend(curve(t))
        else:
            pts.append(curve.control_points[-1])
    return np.asarray(pts, dtype=float).reshape(-1, 2)


def signed_area(path: mplPath) -> float:
    """Shoelace area of the flattened contour(s); positive when counter-clockwise."""
    area = 0.0
    for sub in split_subpaths(path):
        poly = flatten_contour(sub)
        if len(poly) < 3:
            continue
        x, y = poly[:, 0], poly[:, 1]
        area += 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))
    return area


def _is_closed(path: mplPath) -> bool:
    codes = _codes_of(path)
    if len(codes) and codes[-1] == mplPath.CLOSEPOLY:
        return True
    verts = path.vertices
    return len(verts) > 2 and np.allclose(verts[0], verts[-1])


# ---------------------------------------------------------------------------
# Even-odd composition
# ---------------------------------------------------------------------------
def _polygonal_parts(geom) -> list[Polygon]:
    if geom is None or geom.is_empty:
        return []
    if geom.geom_type == "Polygon":
        return [geom]
    out: list[Polygon] = []
    for g in getattr(geom, "geoms", []):
        out.extend(_polygonal_parts(g))
    return out


def _contour_polygons(contour: mplPath) -> list[Polygon]:
    pts = flatten_contour(contour)
    if len(pts) < 3:
        return []
    poly = Polygon(pts)
    if not poly.is_valid:
        poly = make_valid(poly)
    return [p for p in _polygonal_parts(poly) if p.area > 0]


def polygons_to_path(polygons: list[Polygon]) -> mplPath:
    """Closed polyline path of shapely polygons, holes wound clockwise."""
    builder = PathBuilder()
    for poly in polygons:
        poly = orient(poly, sign=1.0)
        for ring in (poly.exterior, *poly.interiors):
            coords = list(ring.coords)[:-1]
            if len(coords) < 3:
                continue
            builder.move_to(coords[0])
            for xy in coords[1:]:
                builder.line_to(xy)
            builder.close()
    return builder.to_path()


def evenodd_compound(*paths: mplPath) -> mplPath:
    """Compose contours with the even-odd fill rule.

    Closed contours are flattened to shapely polygons and combined by
    symmetric difference. The region is converted back to a polyline path with
    counter-clockwise exteriors and clockwise holes, so Matplotlib's nonzero
    renderer fills exactly the even-odd region, crossing contours included.
    Open contours are appended unchanged.

    Args:
        *paths: Simple or compound Matplotlib paths.

    Returns:
        A single compound path; empty if nothing encloses any area.
    """
    contours = [sub for p in paths for sub in split_subpaths(p)]

    region = None
    open_contours = []
    for contour in contours:
        if not _is_closed(contour):
            open_contours.append(contour)
            continue
        for poly in _contour_polygons(contour):
            region = poly if region is None else region.symmetric_difference(poly)

    parts = [polygons_to_path(_polygonal_parts(region))] if region is not None else []
    parts = [p for p in parts + open_contours if len(p.vertices)]
    if not parts:
        return empty_path()

    logger.debug(f"evenodd_compound: {len(contours)} contours composed")
    return mplPath.make_compound_path(*parts)


def contains_point_evenodd(path: mplPath, point: PointXY) -> bool:
    """True if ``point`` is inside an odd number of the path's contours."""
    hits = sum(1 for sub in split_subpaths(path) if sub.contains_point(point))
    return hits % 2 == 1
