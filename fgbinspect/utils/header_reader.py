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
FlatGeobuf Header Reader.

Decodes a local or remote FlatGeobuf file into a HeaderRecord. The layer
schema, geometry type, feature count, extent and CRS come from GDAL's
FlatGeobuf driver; the fields the OGR API does not surface come from the raw
header probe. Remote files are read through /vsicurl/, which fetches only
the byte ranges the header needs.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from osgeo import gdal, ogr, osr
from fgbinspect.utils.data_models import BoundingBox, ColumnDescriptor, CrsDescriptor, HeaderRecord
from fgbinspect.utils.exceptions import HeaderReadError
from fgbinspect.utils.header_probe import HeaderProbe, probe_header
from fgbinspect.utils.path_helpers import is_remote_file, to_gdal_path

gdal.UseExceptions()
ogr.UseExceptions()
osr.UseExceptions()
logger = logging.getLogger(__name__)

DRIVER_NAME = 'FlatGeobuf'

# Layer metadata items that hold header fields rather than custom metadata
RESERVED_METADATA_KEYS = ('TITLE', 'DESCRIPTION')

GEOMETRY_TYPE_NAMES = {
    ogr.wkbUnknown: 'Unknown',
    ogr.wkbPoint: 'Point',
    ogr.wkbLineString: 'LineString',
    ogr.wkbPolygon: 'Polygon',
    ogr.wkbMultiPoint: 'MultiPoint',
    ogr.wkbMultiLineString: 'MultiLineString',
    ogr.wkbMultiPolygon: 'MultiPolygon',
    ogr.wkbGeometryCollection: 'GeometryCollection',
    ogr.wkbCircularString: 'CircularString',
    ogr.wkbCompoundCurve: 'CompoundCurve',
    ogr.wkbCurvePolygon: 'CurvePolygon',
    ogr.wkbMultiCurve: 'MultiCurve',
    ogr.wkbMultiSurface: 'MultiSurface',
    ogr.wkbCurve: 'Curve',
    ogr.wkbSurface: 'Surface',
    ogr.wkbPolyhedralSurface: 'PolyhedralSurface',
    ogr.wkbTIN: 'TIN',
    ogr.wkbTriangle: 'Triangle',
}


def column_type_name(field_defn) -> str:
    """
    Map an OGR field definition to a FlatGeobuf column type name.

    Args:
        field_defn (ogr.FieldDefn): The field definition.

    Returns:
        str: e.g. 'Int', 'Double', 'String', 'Bool'.
    """
    field_type = field_defn.GetType()
    subtype = field_defn.GetSubType()
    if field_type == ogr.OFTInteger:
        if subtype == ogr.OFSTBoolean:
            return 'Bool'
        if subtype == ogr.OFSTInt16:
            return 'Short'
        return 'Int'
    if field_type == ogr.OFTInteger64:
        return 'Long'
    if field_type == ogr.OFTReal:
        return 'Float' if subtype == ogr.OFSTFloat32 else 'Double'
    if field_type == ogr.OFTString:
        return 'Json' if subtype == ogr.OFSTJSON else 'String'
    if field_type in (ogr.OFTDate, ogr.OFTTime, ogr.OFTDateTime):
        return 'DateTime'
    if field_type == ogr.OFTBinary:
        return 'Binary'
    return ogr.GetFieldTypeName(field_type)


def geometry_type_name(geom_type: int) -> str:
    flat = ogr.GT_Flatten(geom_type)
    return GEOMETRY_TYPE_NAMES.get(flat, ogr.GeometryTypeToName(flat))


def crs_from_srs(srs: Optional[osr.SpatialReference], probe: HeaderProbe) -> Optional[CrsDescriptor]:
    """
    Build a CRS descriptor from the layer spatial reference.

    Returns:
        Optional[CrsDescriptor]: None when the layer has no CRS.
    """
    if srs is None:
        return None
    org = srs.GetAuthorityName(None)
    code_text = srs.GetAuthorityCode(None)
    code = int(code_text) if code_text and code_text.isdigit() else 0
    code_string = probe.crs_code_string
    if code_text and not code_text.isdigit() and not code_string:
        code_string = code_text
    wkt = srs.ExportToWkt() or None
    if not org and not wkt:
        return None
    return CrsDescriptor(
        org=org,
        code=code,
        name=srs.GetName(),
        description=probe.crs_description,
        wkt=wkt,
        code_string=code_string,
    )


def read_columns(layer_defn, probe: HeaderProbe) -> Tuple[ColumnDescriptor, ...]:
    """Read the attribute schema in order, merged with the probed column fields."""
    probed = {c.name: c for c in probe.columns if c.name}
    columns: List[ColumnDescriptor] = []
    for i in range(layer_defn.GetFieldCount()):
        field_defn = layer_defn.GetFieldDefn(i)
        name = field_defn.GetName()
        extra = probed.get(name)
        width = field_defn.GetWidth()
        precision = field_defn.GetPrecision()
        columns.append(ColumnDescriptor(
            name=name,
            type=column_type_name(field_defn),
            description=(extra.description if extra else None) or field_defn.GetComment() or None,
            nullable=bool(field_defn.IsNullable()),
            primary_key=extra.primary_key if extra else None,
            unique=bool(field_defn.IsUnique()),
            title=(extra.title if extra else None) or field_defn.GetAlternativeName() or None,
            width=width if width > 0 else None,
            precision=precision if precision > 0 else None,
        ))
    return tuple(columns)


def custom_metadata(items: Dict[str, str], probe: HeaderProbe) -> Optional[str]:
    """
    Return the custom metadata blob.

    The verbatim header string is preferred. When only the layer metadata
    items are available, the non-reserved items are re-serialized as JSON.
    """
    if probe.metadata:
        return probe.metadata
    extra = {k: v for k, v in (items or {}).items() if k.upper() not in RESERVED_METADATA_KEYS}
    if not extra:
        return None
    return json.dumps(extra, ensure_ascii=False)


def read_extent(layer) -> Optional[BoundingBox]:
    try:
        extent = layer.GetExtent(force=0, can_return_null=True)
    except RuntimeError as e:
        logger.debug(f"Layer extent unavailable: {e}")
        return None
    if extent is None:
        return None
    return BoundingBox.from_ogr_extent(extent)


def get_file_size(path: str) -> Optional[int]:
    """
    Return the size of a local or remote file in bytes, or None when unknown.
    """
    if not is_remote_file(path):
        try:
            return Path(path).stat().st_size
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None
    try:
        stat = gdal.VSIStatL(to_gdal_path(path))
    except RuntimeError as e:
        logger.debug(f"Could not stat {path}: {e}")
        return None
    if stat is None:
        return None
    return stat.size


def read_header(path: str) -> Tuple[HeaderRecord, Optional[int]]:
    """
    Decode the header of a FlatGeobuf file.

    Args:
        path (str): Local path or HTTP(S) URL.

    Returns:
        Tuple[HeaderRecord, Optional[int]]: The header and the file size in bytes.

    Raises:
        HeaderReadError: If the file cannot be opened or decoded.
    """
    path = str(path)
    gdal_path = to_gdal_path(path)
    logger.debug(f"Reading FlatGeobuf header from {gdal_path}")

    try:
        ds = gdal.OpenEx(gdal_path, gdal.OF_VECTOR | gdal.OF_READONLY, allowed_drivers=[DRIVER_NAME])
    except RuntimeError as e:
        raise HeaderReadError(f"Could not open {path} as FlatGeobuf: {e}") from e
    if ds is None or ds.GetLayerCount() == 0:
        raise HeaderReadError(f"Could not open {path} as FlatGeobuf")

    try:
        probe = probe_header(gdal_path)
    except HeaderReadError as e:
        # GDAL read the file; only the probed fields are unknown
        logger.warning(f"Could not read the raw header fields of {path}: {e}")
        probe = HeaderProbe()

    try:
        layer = ds.GetLayer(0)
        layer_defn = layer.GetLayerDefn()
        geom_type = layer.GetGeomType()
        items = layer.GetMetadata() or {}
        features_count = layer.GetFeatureCount(force=0)

        header = HeaderRecord(
            name=layer.GetName() or None,
            description=probe.description or items.get('DESCRIPTION'),
            title=probe.title or items.get('TITLE'),
            features_count=max(features_count, 0),
            geometry_type=geometry_type_name(geom_type),
            index_node_size=probe.index_node_size,
            has_z=bool(ogr.GT_HasZ(geom_type)),
            has_m=bool(ogr.GT_HasM(geom_type)),
            has_t=probe.has_t,
            has_tm=probe.has_tm,
            columns=read_columns(layer_defn, probe),
            crs=crs_from_srs(layer.GetSpatialRef(), probe),
            envelope=read_extent(layer),
            metadata=custom_metadata(items, probe),
        )
    except RuntimeError as e:
        raise HeaderReadError(f"Failed to decode the FlatGeobuf header of {path}: {e}") from e
    finally:
        ds = None

    logger.debug(f"Decoded header: {header.features_count} features, {header.column_count} columns")
    return header, get_file_size(path)
