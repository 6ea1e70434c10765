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
File and URL Path Utilities for the Inspector.

This module provides helper functions for telling local files from remote
ones, mapping remote URLs onto GDAL's virtual file systems, and formatting
file sizes for display.
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('.fgb',)
REMOTE_PREFIXES = ('http://', 'https://')
SIZE_UNITS = ('B', 'KB', 'MB', 'GB', 'TB')


def is_remote_file(file: str) -> bool:
    """True if the path is an HTTP(S) URL."""
    return str(file).startswith(REMOTE_PREFIXES)


def to_gdal_path(file: str) -> str:
    """
    Convert a user-supplied path to a path GDAL can open.

    Remote files are read through the /vsicurl/ virtual file system, which
    issues HTTP range requests so only the header bytes are fetched.

    Args:
        file (str): Local path or HTTP(S) URL.

    Returns:
        str: The path to hand to GDAL.
    """
    file = str(file)
    if is_remote_file(file):
        return f"/vsicurl/{file}"
    return file


def has_supported_extension(file: str) -> bool:
    return str(file).lower().endswith(SUPPORTED_EXTENSIONS)


def format_file_size(size_bytes: Optional[int]) -> str:
    """
    Format a byte count for display.

    Args:
        size_bytes: Size in bytes, or None when unknown.

    Returns:
        str: e.g. '512 B', '1.5 MB', or 'Unknown'.
    """
    if size_bytes is None or size_bytes < 0:
        return "Unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in SIZE_UNITS[1:]:
        size /= 1024
        if size < 1024 or unit == SIZE_UNITS[-1]:
            return f"{size:.1f} {unit}"
    return f"{size_bytes} B"
