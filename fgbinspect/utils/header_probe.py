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
Raw FlatGeobuf Header Probe.

GDAL's FlatGeobuf driver exposes most of the header through the OGR layer API
but not all of it. This probe reads the few remaining fields straight from
the header table:

- index_node_size (0 means the file has no spatial index)
- has_t and has_tm
- the CRS description and code_string
- the dataset title, description and verbatim metadata string
- per-column title, description and primary_key

File layout: 8 magic bytes ('fgb', version, 'fgb', patch), a little-endian
uint32 header size, then the header as a flatbuffer whose first uint32 is the
offset of the root table. The table is read with the flatbuffers runtime and
the bytes come through GDAL's VSI layer, so the same code serves local paths
and /vsicurl/ URLs.
"""

import logging
import struct
from dataclasses import dataclass, field
from typing import List, Optional
from flatbuffers import encode, number_types
from flatbuffers.table import Table
from osgeo import gdal
from fgbinspect.utils.exceptions import HeaderReadError

logger = logging.getLogger(__name__)

MAGIC_LENGTH = 8
PREFIX_LENGTH = MAGIC_LENGTH + 4
# Headers are small; anything larger is a corrupt size prefix.
MAX_HEADER_SIZE = 64 * 1024 * 1024
DEFAULT_INDEX_NODE_SIZE = 16

# --- Field slots (schema order) ---
HEADER_HAS_T = 5
HEADER_HAS_TM = 6
HEADER_COLUMNS = 7
HEADER_INDEX_NODE_SIZE = 9
HEADER_CRS = 10
HEADER_TITLE = 11
HEADER_DESCRIPTION = 12
HEADER_METADATA = 13

CRS_DESCRIPTION = 3
CRS_CODE_STRING = 5

COLUMN_NAME = 0
COLUMN_TITLE = 2
COLUMN_DESCRIPTION = 3
COLUMN_PRIMARY_KEY = 9


@dataclass
class ColumnProbe:
    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    primary_key: bool = False


@dataclass
class HeaderProbe:
    """Header fields GDAL does not report; None where the header was not read."""
    index_node_size: Optional[int] = None
    has_t: Optional[bool] = None
    has_tm: Optional[bool] = None
    crs_description: Optional[str] = None
    crs_code_string: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[str] = None
    columns: List[ColumnProbe] = field(default_factory=list)


def is_flatgeobuf_magic(magic: bytes) -> bool:
    return len(magic) >= MAGIC_LENGTH and magic[0:3] == b'fgb' and magic[4:7] == b'fgb'


def _slot(tab: Table, slot: int) -> int:
    """Offset of a field relative to the table, 0 when absent."""
    return tab.Offset(4 + 2 * slot)


def _bool(tab: Table, slot: int, default: bool = False) -> bool:
    o = _slot(tab, slot)
    if not o:
        return default
    return bool(tab.Get(number_types.BoolFlags, o + tab.Pos))


def _uint16(tab: Table, slot: int, default: int = 0) -> int:
    o = _slot(tab, slot)
    if not o:
        return default
    return tab.Get(number_types.Uint16Flags, o + tab.Pos)


def _string(tab: Table, slot: int) -> Optional[str]:
    o = _slot(tab, slot)
    if not o:
        return None
    return tab.String(o + tab.Pos).decode('utf-8', errors='replace')


def _table(tab: Table, slot: int) -> Optional[Table]:
    o = _slot(tab, slot)
    if not o:
        return None
    return Table(tab.Bytes, tab.Indirect(o + tab.Pos))


def _tables(tab: Table, slot: int) -> List[Table]:
    o = _slot(tab, slot)
    if not o:
        return []
    start = tab.Vector(o)
    width = number_types.UOffsetTFlags.bytewidth
    return [Table(tab.Bytes, tab.Indirect(start + i * width)) for i in range(tab.VectorLen(o))]


def parse_header_probe(buf: bytes) -> HeaderProbe:
    """
    Parse the probe fields from a header flatbuffer.

    Args:
        buf (bytes): The header bytes that follow the size prefix.

    Returns:
        HeaderProbe: The decoded fields, with schema defaults for absent ones.

    Raises:
        HeaderReadError: If the buffer is truncated or malformed.
    """
    buf = bytearray(buf)
    try:
        root = Table(buf, encode.Get(number_types.UOffsetTFlags.packer_type, buf, 0))
        probe = HeaderProbe(
            index_node_size=_uint16(root, HEADER_INDEX_NODE_SIZE, DEFAULT_INDEX_NODE_SIZE),
            has_t=_bool(root, HEADER_HAS_T),
            has_tm=_bool(root, HEADER_HAS_TM),
            title=_string(root, HEADER_TITLE),
            description=_string(root, HEADER_DESCRIPTION),
            metadata=_string(root, HEADER_METADATA),
        )
        crs = _table(root, HEADER_CRS)
        if crs is not None:
            probe.crs_description = _string(crs, CRS_DESCRIPTION)
            probe.crs_code_string = _string(crs, CRS_CODE_STRING)
        for column in _tables(root, HEADER_COLUMNS):
            probe.columns.append(ColumnProbe(
                name=_string(column, COLUMN_NAME),
                title=_string(column, COLUMN_TITLE),
                description=_string(column, COLUMN_DESCRIPTION),
                primary_key=_bool(column, COLUMN_PRIMARY_KEY),
            ))
    except (struct.error, IndexError, TypeError) as e:
        raise HeaderReadError(f"Malformed FlatGeobuf header: {e}") from e
    return probe


def _read_bytes(handle, count: int) -> bytes:
    data = gdal.VSIFReadL(1, count, handle)
    return data or b''


def probe_header(gdal_path: str) -> HeaderProbe:
    """
    Read the header probe fields from a FlatGeobuf file.

    Args:
        gdal_path (str): Local path or /vsicurl/ path.

    Raises:
        HeaderReadError: If the file cannot be read or is not FlatGeobuf.
    """
    try:
        handle = gdal.VSIFOpenL(gdal_path, 'rb')
    except RuntimeError as e:
        raise HeaderReadError(f"Could not open {gdal_path}: {e}") from e
    if handle is None:
        raise HeaderReadError(f"Could not open {gdal_path}")
    try:
        prefix = _read_bytes(handle, PREFIX_LENGTH)
        if len(prefix) < PREFIX_LENGTH or not is_flatgeobuf_magic(prefix):
            raise HeaderReadError(f"{gdal_path} is not a FlatGeobuf file (bad magic bytes)")
        header_size = encode.Get(number_types.Uint32Flags.packer_type, prefix, MAGIC_LENGTH)
        if header_size > MAX_HEADER_SIZE:
            raise HeaderReadError(f"FlatGeobuf header size {header_size} exceeds {MAX_HEADER_SIZE} bytes")
        buf = _read_bytes(handle, header_size)
        if len(buf) < header_size:
            raise HeaderReadError(f"Truncated FlatGeobuf header: expected {header_size} bytes, got {len(buf)}")
    finally:
        gdal.VSIFCloseL(handle)

    logger.debug(f"Header probe read {header_size} header bytes (version {prefix[3]})")
    return parse_header_probe(buf)
