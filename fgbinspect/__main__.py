#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: FlatGeobuf Inspector (FGBI)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""Allow `python -m fgbinspect`."""
from fgbinspect.main import main

main()
