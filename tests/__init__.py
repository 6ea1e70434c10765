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
FlatGeobuf Inspector Test Suite.

This package contains tests for FGBI components including:
- Unit tests for the view state models, reprojection and helpers
- Integration tests for header decoding against real FlatGeobuf files
- End-to-end tests for the CLI
"""
