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
Unit tests for the Metadata tab scroll state.
"""

import pytest
from fgbinspect.tui.metadata_scroll import MetadataScrollState, max_offset


@pytest.mark.unit
class TestMetadataScroll:
    """Test clamping of the metadata offset."""

    def test_max_offset(self):
        assert max_offset(0) == 0
        assert max_offset(1) == 0
        assert max_offset(20) == 19

    def test_scroll_up_from_zero_stays_at_zero(self):
        state = MetadataScrollState()
        state.scroll_up()
        state.scroll_up()
        assert state.offset == 0

    def test_reconcile_clamps_offset(self):
        state = MetadataScrollState()
        for _ in range(50):
            state.scroll_down()
        assert state.reconcile(10) == (10, 9)
        assert state.offset == 9

    @pytest.mark.parametrize('line_count', [0, 1, 5, 30])
    def test_scroll_down_never_passes_content_length(self, line_count):
        state = MetadataScrollState()
        state.reconcile(line_count)
        for _ in range(line_count + 10):
            state.scroll_down()
            assert state.offset <= max_offset(line_count)

    def test_scroll_up_after_clamp_moves_immediately(self):
        state = MetadataScrollState()
        state.reconcile(5)
        for _ in range(20):
            state.scroll_down()
        state.scroll_up()
        assert state.offset == 3

    def test_shorter_content_reclamps(self):
        state = MetadataScrollState()
        state.reconcile(30)
        for _ in range(25):
            state.scroll_down()
        assert state.reconcile(12) == (12, 11)

    def test_empty_content(self):
        state = MetadataScrollState()
        state.scroll_down()
        assert state.reconcile(0) == (1, 0)
