#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: FlatGeobuf Inspector (FGBI)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""Command implementations: interactive inspection and JSON dump."""
