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
Map overlay for the Map tab.

The dataset extent is reprojected once, when the session starts, and the
result is cached for the whole session. Each failure mode is kept distinct
so the Map tab can say exactly why it cannot draw a trustworthy rectangle:

- MISSING_EXTENT: the header has no bounding box (never drawn as [0, 0, 0, 0]);
- INVALID_EXTENT: the bounding box holds a NaN or infinite coordinate;
- ASSUMED_DISPLAY_CRS: the header has an extent but no CRS; the extent is
  assumed to already be in the display CRS and labelled as such;
- REPROJECTION_FAILED: the CRS is unknown or the extent is outside its domain.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from fgbinspect.utils.data_models import BoundingBox, HeaderRecord
from fgbinspect.utils.exceptions import MissingExtentError, ReprojectionError
from fgbinspect.utils.srs_logic import DISPLAY_CRS, reproject_bbox

logger = logging.getLogger(__name__)


class MapStatus(Enum):
    OK = 'ok'
    ASSUMED_DISPLAY_CRS = 'assumed_display_crs'
    MISSING_EXTENT = 'missing_extent'
    INVALID_EXTENT = 'invalid_extent'
    REPROJECTION_FAILED = 'reprojection_failed'


@dataclass(frozen=True)
class MapOverlay:
    """
    The extent to draw on the world map, with its provenance.

    Attributes:
        status: Outcome of the reprojection step.
        label: Human-readable provenance, used as the map title.
        bbox: Extent in the display CRS; None unless the status is drawable.
        error: Error message for the failure statuses.
        display_crs: The CRS the map is drawn in.
    """
    status: MapStatus
    label: str
    bbox: Optional[BoundingBox] = None
    error: Optional[str] = None
    display_crs: str = DISPLAY_CRS

    @property
    def drawable(self) -> bool:
        return self.bbox is not None and self.status in (MapStatus.OK, MapStatus.ASSUMED_DISPLAY_CRS)


def require_extent(header: HeaderRecord) -> BoundingBox:
    """
    Return the header extent.

    Raises:
        MissingExtentError: If the header carries no bounding box.
    """
    if header.envelope is None:
        raise MissingExtentError("No bbox extent envelope found in the FlatGeobuf header; no map can be rendered")
    return header.envelope


def build_map_overlay(header: HeaderRecord, display_crs: str = DISPLAY_CRS) -> MapOverlay:
    """
    Compute the map overlay for a header.

    Args:
        header (HeaderRecord): The decoded header.
        display_crs (str): The CRS the world map is drawn in.

    Returns:
        MapOverlay: The cached overlay for the session. Never raises for
        data problems; they are reported through the overlay status.
    """
    try:
        extent = require_extent(header)
    except MissingExtentError as e:
        logger.warning(str(e))
        return MapOverlay(MapStatus.MISSING_EXTENT, "No extent defined", error=str(e), display_crs=display_crs)

    if not extent.is_finite():
        message = f"Extent {extent.to_list()} has non-finite coordinates; no map can be rendered"
        logger.warning(message)
        return MapOverlay(MapStatus.INVALID_EXTENT, "Invalid extent", error=message, display_crs=display_crs)
    if not extent.is_valid():
        logger.debug(f"Extent {extent.to_list()} is not ordered; its normalized box will be drawn")

    if header.crs is None:
        logger.warning(f"Header has no CRS; assuming the extent is in {display_crs}")
        bbox, _ = reproject_bbox(extent, display_crs, display_crs)
        return MapOverlay(
            MapStatus.ASSUMED_DISPLAY_CRS,
            f"Extent of data (CRS undefined, assumed {display_crs})",
            bbox=bbox,
            display_crs=display_crs,
        )

    source_crs = header.crs.identifier()
    try:
        bbox, label = reproject_bbox(extent, source_crs, display_crs)
    except ReprojectionError as e:
        logger.warning(f"Reprojection failed: {e}")
        return MapOverlay(
            MapStatus.REPROJECTION_FAILED,
            f"Cannot project extent to {display_crs}",
            error=str(e),
            display_crs=display_crs,
        )

    return MapOverlay(MapStatus.OK, label, bbox=bbox, display_crs=display_crs)
