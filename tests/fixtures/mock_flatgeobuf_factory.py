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
Mock FlatGeobuf Factory for Testing.

This module provides the MockFlatGeobuf class, a factory for writing small
FlatGeobuf files with GDAL's FlatGeobuf driver. The files are real, so the
header reader and probe are exercised exactly as they are on user data.

Example:
    >>> mock = MockFlatGeobuf(crs='EPSG:3857', geometry_type=ogr.wkbPoint)
    >>> path = mock.save_to_file(tmp_path / 'points.fgb')
"""

import json
from osgeo import gdal, ogr, osr
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

ogr.UseExceptions()
osr.UseExceptions()

# (name, OGR type, OGR subtype)
DEFAULT_FIELDS: List[Tuple[str, int, int]] = [
    ('id', ogr.OFTInteger, ogr.OFSTNone),
    ('name', ogr.OFTString, ogr.OFSTNone),
    ('height', ogr.OFTReal, ogr.OFSTNone),
]

# GDAL 3.9 added TITLE, DESCRIPTION and METADATA layer creation options
GDAL_SUPPORTS_HEADER_TEXT = int(gdal.VersionInfo()) >= 3090000


class MockFlatGeobuf:
    """
    Factory for writing mock FlatGeobuf files for testing.

    Attributes:
        layer_name: Layer (dataset) name stored in the header
        crs: Coordinate system as 'EPSG:n' or WKT, or None for no CRS
        geometry_type: OGR geometry type constant
        fields: Attribute schema as (name, type, subtype) tuples
        points: Feature coordinates; each feature is a point (or a small
            square for polygon layers) centered on one of these
        spatial_index: Whether to write the packed R-Tree
        title, description, metadata: Optional header text
    """

    def __init__(
        self,
        layer_name: str = 'mock_layer',
        crs: Optional[str] = 'EPSG:4326',
        geometry_type: int = ogr.wkbPoint,
        fields: Optional[Sequence[Tuple[str, int, int]]] = None,
        points: Optional[Sequence[Tuple[float, float]]] = None,
        spatial_index: bool = True,
        title: Optional[str] = None,
        description: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ):
        self.layer_name = layer_name
        self.crs = crs
        self.geometry_type = geometry_type
        self.fields = list(DEFAULT_FIELDS if fields is None else fields)
        self.points = list(points if points is not None else [(-10.0, -5.0), (10.0, 5.0), (2.0, 1.0)])
        self.spatial_index = spatial_index
        self.title = title
        self.description = description
        self.metadata = metadata

    def _srs(self) -> Optional[osr.SpatialReference]:
        if self.crs is None:
            return None
        srs = osr.SpatialReference()
        srs.SetFromUserInput(self.crs)
        srs.SetAxisMappingStrategy(osr.OAMS_TRADITIONAL_GIS_ORDER)
        return srs

    def _layer_options(self) -> List[str]:
        options = [f"SPATIAL_INDEX={'YES' if self.spatial_index else 'NO'}"]
        if GDAL_SUPPORTS_HEADER_TEXT:
            if self.title:
                options.append(f"TITLE={self.title}")
            if self.description:
                options.append(f"DESCRIPTION={self.description}")
            if self.metadata:
                options.append(f"METADATA={json.dumps(self.metadata)}")
        return options

    def _geometry(self, x: float, y: float) -> ogr.Geometry:
        flat = ogr.GT_Flatten(self.geometry_type)
        if flat == ogr.wkbPolygon:
            ring = ogr.Geometry(ogr.wkbLinearRing)
            for dx, dy in ((0, 0), (1, 0), (1, 1), (0, 1), (0, 0)):
                ring.AddPoint_2D(x + dx, y + dy)
            geom = ogr.Geometry(ogr.wkbPolygon)
            geom.AddGeometry(ring)
            return geom
        if ogr.GT_HasZ(self.geometry_type):
            geom = ogr.Geometry(ogr.wkbPoint25D)
            geom.AddPoint(x, y, 100.0)
            return geom
        geom = ogr.Geometry(ogr.wkbPoint)
        geom.AddPoint_2D(x, y)
        return geom

    def save_to_file(self, filepath: Union[str, Path]) -> Path:
        """
        Write the mock dataset as a FlatGeobuf file.

        Args:
            filepath: Path where to save the file

        Returns:
            Path: The written file
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        driver = ogr.GetDriverByName('FlatGeobuf')
        ds = driver.CreateDataSource(str(filepath))
        layer = ds.CreateLayer(
            self.layer_name,
            srs=self._srs(),
            geom_type=self.geometry_type,
            options=self._layer_options(),
        )
        for name, field_type, subtype in self.fields:
            field_defn = ogr.FieldDefn(name, field_type)
            field_defn.SetSubType(subtype)
            layer.CreateField(field_defn)

        layer_defn = layer.GetLayerDefn()
        for i, (x, y) in enumerate(self.points):
            feature = ogr.Feature(layer_defn)
            feature.SetGeometry(self._geometry(x, y))
            for name, field_type, _ in self.fields:
                if field_type in (ogr.OFTInteger, ogr.OFTInteger64):
                    feature.SetField(name, i)
                elif field_type == ogr.OFTReal:
                    feature.SetField(name, float(i) * 1.5)
                elif field_type == ogr.OFTString:
                    feature.SetField(name, f"feature {i}")
            layer.CreateFeature(feature)
            feature = None

        ds = None
        return filepath

    def __repr__(self) -> str:
        return (f"MockFlatGeobuf(layer_name={self.layer_name!r}, crs={self.crs!r}, "
                f"fields={len(self.fields)}, features={len(self.points)})")
