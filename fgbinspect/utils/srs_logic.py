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
Spatial Reference System (SRS) Handling and Logic for the Inspector.

This module centralizes all functionality related to Spatial Reference Systems.
It parses CRS identifiers (authority codes, WKT, PROJ strings) into OSR objects
and reprojects a dataset extent into the fixed display CRS used by the map view.

Only the two diagonal corners of a bounding box are transformed. Under
non-linear projections the true envelope of the reprojected box can be larger
than the rectangle spanned by those two corners; this is an accepted
approximation for an overview map.
"""
import logging
import math
from osgeo import osr
from typing import Optional, Tuple
from fgbinspect.utils.data_models import BoundingBox
from fgbinspect.utils.exceptions import ReprojectionError

logger = logging.getLogger(__name__)
osr.UseExceptions()

# The map canvas is always drawn in longitude/latitude.
DISPLAY_CRS = "EPSG:4326"


def same_crs_id(first: str, second: str) -> bool:
    """Compare two CRS identifiers textually, ignoring case and surrounding whitespace."""
    return first.strip().upper() == second.strip().upper()


def get_srs_from_user_input(srs_input: str) -> Optional[osr.SpatialReference]:
    """
    Creates an osr.SpatialReference object from a CRS identifier.

    Args:
        srs_input (str): An EPSG code (e.g., "4326", "EPSG:4326"), an
                         'AUTHORITY:CODE' pair, a WKT string, or any other
                         format recognized by OSR.

    Returns:
        Optional[osr.SpatialReference]: A spatial reference object, or None if parsing fails.
    """
    if not srs_input or not srs_input.strip():
        return None

    srs = osr.SpatialReference()
    srs_upper = srs_input.strip().upper()
    try:
        if srs_upper.startswith('EPSG:') and srs_upper[5:].isdigit():
            err = srs.ImportFromEPSG(int(srs_upper[5:]))
        elif srs_upper.isdigit():
            err = srs.ImportFromEPSG(int(srs_upper))
        else:
            err = srs.SetFromUserInput(srs_input.strip())
    except (RuntimeError, ValueError) as e:
        logger.debug(f"OSR rejected CRS '{srs_input}': {e}")
        return None

    if err != 0:
        logger.debug(f"OSR returned error code {err} for CRS '{srs_input}'")
        return None

    # GDAL 3+ honours authority axis order (lat/lon for EPSG:4326) unless told otherwise.
    srs.SetAxisMappingStrategy(osr.OAMS_TRADITIONAL_GIS_ORDER)
    return srs


def _create_transform(source_crs: str, display_crs: str) -> osr.CoordinateTransformation:
    """Build a coordinate transformation or raise ReprojectionError."""
    source_srs = get_srs_from_user_input(source_crs)
    if source_srs is None:
        raise ReprojectionError(f"Unknown or unsupported source CRS: '{source_crs}'")

    target_srs = get_srs_from_user_input(display_crs)
    if target_srs is None:
        raise ReprojectionError(f"Unknown or unsupported display CRS: '{display_crs}'")

    try:
        transform = osr.CreateCoordinateTransformation(source_srs, target_srs)
    except RuntimeError as e:
        raise ReprojectionError(f"Cannot transform from {source_crs} to {display_crs}: {e}") from e
    if transform is None:
        raise ReprojectionError(f"Cannot transform from {source_crs} to {display_crs}")
    return transform


def _transform_corner(transform: osr.CoordinateTransformation, x: float, y: float) -> Tuple[float, float]:
    """Transform one corner; out-of-domain points surface as ReprojectionError."""
    try:
        new_x, new_y, _ = transform.TransformPoint(x, y)
    except RuntimeError as e:
        raise ReprojectionError(f"Coordinate ({x}, {y}) is outside the valid domain of the transform: {e}") from e

    if not (math.isfinite(new_x) and math.isfinite(new_y)):
        raise ReprojectionError(f"Coordinate ({x}, {y}) is outside the valid domain of the transform")
    return new_x, new_y


def reproject_bbox(bbox: BoundingBox, source_crs: str, display_crs: str = DISPLAY_CRS) -> Tuple[BoundingBox, str]:
    """
    Reprojects a bounding box into the display CRS.

    When the source and display CRS identifiers match, the input box is
    returned as-is and OSR is never touched.

    Args:
        bbox (BoundingBox): The extent in its native CRS.
        source_crs (str): Identifier of the native CRS.
        display_crs (str): Identifier of the display CRS.

    Returns:
        Tuple[BoundingBox, str]: The extent in the display CRS and a label describing its provenance.

    Raises:
        ReprojectionError: If the source CRS cannot be resolved or a corner cannot be transformed.
    """
    if same_crs_id(source_crs, display_crs):
        return bbox, f"Extent of data already in display CRS {display_crs}"

    logger.debug(f"Reprojecting extent {bbox.to_list()} from {source_crs} to {display_crs}")
    transform = _create_transform(source_crs, display_crs)
    new_xmin, new_ymin = _transform_corner(transform, bbox.xmin, bbox.ymin)
    new_xmax, new_ymax = _transform_corner(transform, bbox.xmax, bbox.ymax)

    # Some projections flip an axis, so rebuild the box from the corners' min/max.
    projected = BoundingBox(new_xmin, new_ymin, new_xmax, new_ymax).normalized()

    label_source = source_crs if len(source_crs) <= 40 else "custom CRS"
    return projected, f"Extent of data in {label_source} projected to {display_crs}"
