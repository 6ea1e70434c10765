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
Custom Exceptions Module.

A centralized module for custom exceptions used throughout the FlatGeobuf Inspector.
"""

class InspectorError(Exception):
    """Base exception for all inspector errors."""
    pass

class HeaderReadError(InspectorError):
    """Raised when a FlatGeobuf header cannot be fetched or decoded."""
    pass

class ReprojectionError(InspectorError):
    """Raised when a bounding box cannot be transformed into the display CRS."""
    pass

class MissingExtentError(InspectorError):
    """Raised when the header carries no bounding box at all."""
    pass

class TerminalSessionError(RuntimeError):
    """Raised when the terminal cannot be put into (or restored from) TUI mode."""
    pass
