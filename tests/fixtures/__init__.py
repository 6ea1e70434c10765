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
Test fixtures and mock data factories for FGBI tests.

This package contains:
- MockFlatGeobuf: Factory for writing small FlatGeobuf files with GDAL
"""

from tests.fixtures.mock_flatgeobuf_factory import MockFlatGeobuf

__all__ = ['MockFlatGeobuf']
