#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: FlatGeobuf Inspector (FGBI)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""
World Map Raster for the Map tab.

Draws a coarse longitude/latitude world map into a character grid and
outlines a bounding box on top of it. The land mask is a 10-degree grid,
which is enough to orient the reader on an overview map.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple
from fgbinspect.utils.data_models import BoundingBox

MAX_LONGITUDE_RANGE = (-180.0, 180.0)
MAX_LATITUDE_RANGE = (-90.0, 90.0)

CELL_DEGREES = 10
MASK_COLS = 36
MASK_ROWS = 18

LAND_CHAR = '.'
WATER_CHAR = ' '
BOX_CHAR = '#'
POINT_CHAR = '+'

# Land cells per 10-degree row (row 0 is 80N-90N), as inclusive column ranges
# where column 0 is 180W-170W.
LAND_SPANS: Dict[int, Tuple[Tuple[int, int], ...]] = {
    0: ((11, 15),),
    1: ((6, 15), (19, 20), (23, 23), (27, 32)),
    2: ((1, 11), (13, 14), (16, 16), (18, 35)),
    3: ((2, 3), (5, 11), (17, 31), (33, 33)),
    4: ((5, 11), (17, 30), (32, 32)),
    5: ((6, 10), (17, 31)),
    6: ((7, 9), (16, 29)),
    7: ((8, 9), (16, 22), (25, 25), (28, 28), (30, 30)),
    8: ((10, 12), (17, 22), (28, 29)),
    9: ((10, 14), (19, 21), (28, 32)),
    10: ((10, 13), (19, 22), (30, 32)),
    11: ((11, 13), (19, 20), (22, 22), (29, 32)),
    12: ((10, 12), (19, 19), (29, 32), (35, 35)),
    13: ((10, 11), (32, 32), (34, 35)),
    14: ((11, 11),),
    15: ((11, 11), (22, 33)),
    16: ((1, 12), (15, 34)),
    17: ((0, 35),),
}


def _build_land_mask() -> List[List[bool]]:
    mask = [[False] * MASK_COLS for _ in range(MASK_ROWS)]
    for row, spans in LAND_SPANS.items():
        for start, end in spans:
            for col in range(start, end + 1):
                mask[row][col] = True
    return mask


LAND_MASK = _build_land_mask()


def is_land(lon: float, lat: float) -> bool:
    """Coarse land lookup for a longitude/latitude pair."""
    col = int((lon - MAX_LONGITUDE_RANGE[0]) // CELL_DEGREES)
    row = int((MAX_LATITUDE_RANGE[1] - lat) // CELL_DEGREES)
    col = min(max(col, 0), MASK_COLS - 1)
    row = min(max(row, 0), MASK_ROWS - 1)
    return LAND_MASK[row][col]


@dataclass
class MapCanvas:
    """
    A rendered map.

    Attributes:
        rows: One string per screen row, each `width` characters long.
        overlay: (row, col) cells that belong to the bounding box outline.
    """
    rows: List[str]
    overlay: Set[Tuple[int, int]] = field(default_factory=set)


def _to_cell(lon: float, lat: float, width: int, height: int) -> Tuple[int, int]:
    lon_span = MAX_LONGITUDE_RANGE[1] - MAX_LONGITUDE_RANGE[0]
    lat_span = MAX_LATITUDE_RANGE[1] - MAX_LATITUDE_RANGE[0]
    col = int((lon - MAX_LONGITUDE_RANGE[0]) / lon_span * width)
    row = int((MAX_LATITUDE_RANGE[1] - lat) / lat_span * height)
    return min(max(row, 0), height - 1), min(max(col, 0), width - 1)


def _clip(bbox: BoundingBox) -> Optional[BoundingBox]:
    """Clip a box to the world; None if it lies entirely outside or is not finite."""
    if not bbox.is_finite():
        return None
    box = bbox.normalized()
    xmin = max(box.xmin, MAX_LONGITUDE_RANGE[0])
    xmax = min(box.xmax, MAX_LONGITUDE_RANGE[1])
    ymin = max(box.ymin, MAX_LATITUDE_RANGE[0])
    ymax = min(box.ymax, MAX_LATITUDE_RANGE[1])
    if xmin > xmax or ymin > ymax:
        return None
    return BoundingBox(xmin, ymin, xmax, ymax)


def render_world_map(width: int, height: int, bbox: Optional[BoundingBox] = None) -> MapCanvas:
    """
    Render the world map with an optional bounding box outline.

    Args:
        width: Canvas width in character cells.
        height: Canvas height in character cells.
        bbox: Extent in longitude/latitude to outline, if any.

    Returns:
        MapCanvas: The rendered rows and the cells covered by the outline.
    """
    if width <= 0 or height <= 0:
        return MapCanvas(rows=[])

    grid = []
    for r in range(height):
        lat = MAX_LATITUDE_RANGE[1] - (r + 0.5) * 180.0 / height
        row_chars = []
        for c in range(width):
            lon = MAX_LONGITUDE_RANGE[0] + (c + 0.5) * 360.0 / width
            row_chars.append(LAND_CHAR if is_land(lon, lat) else WATER_CHAR)
        grid.append(row_chars)

    overlay: Set[Tuple[int, int]] = set()
    clipped = _clip(bbox) if bbox is not None else None
    if clipped is not None:
        top, left = _to_cell(clipped.xmin, clipped.ymax, width, height)
        bottom, right = _to_cell(clipped.xmax, clipped.ymin, width, height)
        if top == bottom and left == right:
            grid[top][left] = POINT_CHAR
            overlay.add((top, left))
        else:
            for c in range(left, right + 1):
                overlay.update({(top, c), (bottom, c)})
            for r in range(top, bottom + 1):
                overlay.update({(r, left), (r, right)})
            for r, c in overlay:
                grid[r][c] = BOX_CHAR

    return MapCanvas(rows=[''.join(row) for row in grid], overlay=overlay)
