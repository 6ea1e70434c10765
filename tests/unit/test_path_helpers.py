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
Unit tests for path and size helpers.
"""

import pytest
from fgbinspect.utils.path_helpers import (
    format_file_size,
    has_supported_extension,
    is_remote_file,
    to_gdal_path,
)


@pytest.mark.unit
class TestPathHelpers:
    """Test local and remote path handling."""

    @pytest.mark.parametrize('path,remote', [
        ('https://example.com/data/roads.fgb', True),
        ('http://example.com/roads.fgb', True),
        ('/data/roads.fgb', False),
        ('roads.fgb', False),
    ])
    def test_is_remote_file(self, path, remote):
        assert is_remote_file(path) is remote

    def test_to_gdal_path(self):
        assert to_gdal_path('https://example.com/roads.fgb') == '/vsicurl/https://example.com/roads.fgb'
        assert to_gdal_path('/data/roads.fgb') == '/data/roads.fgb'

    def test_has_supported_extension(self):
        assert has_supported_extension('roads.FGB')
        assert not has_supported_extension('roads.gpkg')


@pytest.mark.unit
class TestFormatFileSize:
    """Test format_file_size()."""

    @pytest.mark.parametrize('size,expected', [
        (None, 'Unknown'),
        (-1, 'Unknown'),
        (0, '0 B'),
        (512, '512 B'),
        (1536, '1.5 KB'),
        (1048576, '1.0 MB'),
        (5 * 1024 ** 3, '5.0 GB'),
        (2048 * 1024 ** 4, '2048.0 TB'),
    ])
    def test_sizes(self, size, expected):
        assert format_file_size(size) == expected
