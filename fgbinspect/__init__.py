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
FlatGeobuf Inspector (FGBI).

An interactive terminal viewer for FlatGeobuf headers: metadata, attribute
schema and the spatial extent drawn on a world map.
"""

__version__ = '0.1.0'
