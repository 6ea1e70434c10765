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
Data Models for the FlatGeobuf Inspector.

This module defines strongly-typed data classes for representing a decoded
FlatGeobuf header. These classes are produced once by the header reader and
are read-only for the lifetime of an inspection session.

Domain model classes:
    BoundingBox: Represents an axis-aligned extent (xmin, ymin, xmax, ymax)
    CrsDescriptor: Represents the coordinate reference system of the dataset
    ColumnDescriptor: Represents one attribute column of the schema
    HeaderRecord: Represents the complete decoded header
"""

import json
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple


# ============================================================================
# Geometry classes
# ============================================================================

@dataclass(frozen=True)
class BoundingBox:
    """
    Represents an axis-aligned bounding box.

    The ordering invariant (xmin <= xmax, ymin <= ymax) is not enforced here
    since upstream data does not guarantee it; use `is_valid()` to check and
    `normalized()` to repair.

    Attributes:
        xmin: Minimum x (western) coordinate
        ymin: Minimum y (southern) coordinate
        xmax: Maximum x (eastern) coordinate
        ymax: Maximum y (northern) coordinate

    Example:
        >>> bbox = BoundingBox(-10.0, -5.0, 10.0, 5.0)
        >>> bbox.is_valid()
        True
    """
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def from_envelope(cls, envelope: Sequence[float]) -> 'BoundingBox':
        """
        Build a bounding box from a FlatGeobuf envelope.

        Args:
            envelope: Four ordered values (xmin, ymin, xmax, ymax)

        Raises:
            ValueError: If the envelope does not hold exactly four values
        """
        if len(envelope) != 4:
            raise ValueError(f"FlatGeobuf envelope must have 4 values, got {len(envelope)}")
        return cls(*(float(v) for v in envelope))

    @classmethod
    def from_ogr_extent(cls, extent: Sequence[float]) -> 'BoundingBox':
        """Build a bounding box from an OGR extent tuple (minx, maxx, miny, maxy)."""
        minx, maxx, miny, maxy = extent
        return cls(float(minx), float(miny), float(maxx), float(maxy))

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.xmin, self.ymin, self.xmax, self.ymax))

    def is_valid(self) -> bool:
        """True if all coordinates are finite and the box is ordered."""
        if not self.is_finite():
            return False
        return self.xmin <= self.xmax and self.ymin <= self.ymax

    def normalized(self) -> 'BoundingBox':
        """Return a box with min/max swapped where needed."""
        return BoundingBox(
            min(self.xmin, self.xmax), min(self.ymin, self.ymax),
            max(self.xmin, self.xmax), max(self.ymin, self.ymax)
        )

    def to_list(self) -> list:
        return [self.xmin, self.ymin, self.xmax, self.ymax]


# ============================================================================
# Header classes
# ============================================================================

@dataclass(frozen=True)
class CrsDescriptor:
    """
    Represents the coordinate reference system stored in a FlatGeobuf header.

    A descriptor either carries an organization and code (e.g. EPSG / 4326),
    or, for custom reference systems with no authority, a WKT definition.

    Attributes:
        org: Authority or organization name (e.g. 'EPSG')
        code: Numeric code within the organization
        name: Human readable name
        description: Free text description
        wkt: Well-Known Text definition
        code_string: Code as a string, for non-numeric codes
    """
    org: Optional[str] = None
    code: int = 0
    name: Optional[str] = None
    description: Optional[str] = None
    wkt: Optional[str] = None
    code_string: Optional[str] = None

    def __post_init__(self):
        if not self.org and not self.wkt:
            raise ValueError("A CRS descriptor needs an organization and code, or a WKT definition.")

    def identifier(self) -> str:
        """
        Return a string usable as a transform source.

        Returns:
            'ORG:CODE' when an organization is known, else the WKT definition
        """
        if self.org:
            return f"{self.org}:{self.code_string or self.code}"
        return self.wkt or ''


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Represents one attribute column of the schema, in schema order.

    `primary_key` is None when the decoder cannot tell.
    """
    name: str
    type: str
    description: Optional[str] = None
    nullable: bool = True
    primary_key: Optional[bool] = None
    unique: bool = False
    title: Optional[str] = None
    width: Optional[int] = None
    precision: Optional[int] = None


@dataclass(frozen=True)
class HeaderRecord:
    """
    A decoded FlatGeobuf header.

    Attributes:
        name: Dataset (layer) name.
        description: Dataset description.
        title: Dataset title.
        features_count: Number of features, as stored in the header.
        geometry_type: Geometry type name (e.g. 'MultiLineString').
        index_node_size: Packed Hilbert R-Tree node size; 0 means no index.
        has_z: True if geometries carry Z values.
        has_m: True if geometries carry M values.
        has_t: True if geometries carry T values, None if unknown.
        has_tm: True if geometries carry TM values, None if unknown.
        columns: Attribute columns, in schema order.
        crs: Coordinate reference system, or None when undefined.
        envelope: Stored extent in the native CRS, or None when absent.
        metadata: Opaque custom metadata blob (usually JSON text).
    """
    name: Optional[str] = None
    description: Optional[str] = None
    title: Optional[str] = None
    features_count: int = 0
    geometry_type: str = 'Unknown'
    index_node_size: Optional[int] = None
    has_z: bool = False
    has_m: bool = False
    has_t: Optional[bool] = None
    has_tm: Optional[bool] = None
    columns: Tuple[ColumnDescriptor, ...] = field(default_factory=tuple)
    crs: Optional[CrsDescriptor] = None
    envelope: Optional[BoundingBox] = None
    metadata: Optional[str] = None

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the header to a plain dictionary."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize the header verbatim as JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
