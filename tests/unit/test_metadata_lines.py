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
Unit tests for Metadata tab line assembly and wrapping.
"""

import pytest
from fgbinspect.tui.metadata_lines import InfoLine, build_metadata_lines, wrap_lines
from fgbinspect.utils.data_models import HeaderRecord


def _texts(lines):
    return [line.text() for line in lines]


@pytest.mark.unit
class TestBuildMetadataLines:
    """Test build_metadata_lines()."""

    def test_line_order(self, sample_header):
        labels = [line.label for line in build_metadata_lines(sample_header, 2048)]
        assert labels[:9] == [
            'Name', 'File Size', 'Title', 'Description', 'Features',
            'Bounds', 'Geometry Type', 'Columns', 'Spatial Index R-Tree Node Size',
        ]
        assert labels[10:14] == ['Has M Dimension', 'Has Z Dimension', 'Has T Dimension', 'Has TM Dimension']

    def test_values(self, sample_header):
        texts = _texts(build_metadata_lines(sample_header, 2048))
        assert 'Name: buildings' in texts
        assert 'File Size: 2.0 KB' in texts
        assert 'Features: 1250' in texts
        assert 'Columns: 5' in texts
        assert 'Spatial Index R-Tree Node Size: 16' in texts
        assert 'Has T Dimension: Unknown' in texts
        assert 'Has Z Dimension: false' in texts

    def test_crs_block(self, sample_header):
        texts = _texts(build_metadata_lines(sample_header))
        assert 'CRS Code: 3857' in texts
        assert 'CRS Organization: EPSG' in texts
        assert 'CRS Name: WGS 84 / Pseudo-Mercator' in texts
        assert 'CRS: Undefined' not in texts

    def test_no_crs_block_without_crs(self, header_no_crs):
        texts = _texts(build_metadata_lines(header_no_crs))
        assert 'CRS: Undefined' in texts
        assert not any(t.startswith('CRS Code') for t in texts)

    def test_json_metadata_expands_per_key(self, sample_header):
        texts = _texts(build_metadata_lines(sample_header))
        assert 'Custom Metadata: 2 entries' in texts
        assert '  source: survey' in texts
        assert '  licence: CC-BY' in texts

    def test_non_json_metadata_is_shown_raw(self):
        header = HeaderRecord(name='x', metadata='free text')
        assert 'Custom Metadata: free text' in _texts(build_metadata_lines(header))

    def test_no_metadata_block_without_metadata(self, header_no_crs):
        texts = _texts(build_metadata_lines(header_no_crs))
        assert not any(t.startswith('Custom Metadata') for t in texts)

    def test_optional_blocks_change_line_count(self, sample_header, header_no_crs):
        with_blocks = build_metadata_lines(sample_header)
        without_blocks = build_metadata_lines(header_no_crs)
        assert len(with_blocks) > len(without_blocks)

    def test_undefined_bounds_and_unknown_size(self, header_no_extent):
        texts = _texts(build_metadata_lines(header_no_extent))
        assert 'Bounds: Undefined' in texts
        assert 'File Size: Unknown' in texts
        assert 'Spatial Index R-Tree Node Size: Unknown' in texts

    def test_no_spatial_index(self):
        header = HeaderRecord(name='x', index_node_size=0)
        assert 'Spatial Index R-Tree Node Size: No Spatial Index' in _texts(build_metadata_lines(header))


@pytest.mark.unit
class TestWrapLines:
    """Test wrap_lines()."""

    def test_short_lines_are_kept(self):
        rows = wrap_lines([InfoLine('Name', 'roads'), InfoLine()], 40)
        assert [r.text for r in rows] == ['Name: roads', '']
        assert rows[0].label_width == len('Name: ')

    def test_long_value_wraps(self):
        rows = wrap_lines([InfoLine('CRS WKT', 'PROJCS ' * 20)], 30)
        assert len(rows) > 1
        assert all(len(r.text) <= 30 for r in rows)
        assert rows[1].label_width == 0

    def test_minimum_width(self):
        rows = wrap_lines([InfoLine('A', 'bc')], 0)
        assert all(len(r.text) <= 1 for r in rows)
