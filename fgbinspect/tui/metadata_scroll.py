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
Scroll state for the Metadata tab.

The number of metadata lines depends on which optional blocks the header
carries, so the offset is reconciled against the freshly assembled line list
on every redraw. The last valid offset is `line_count - 1`, the same bound
used for the Columns table scrollbar.
"""
from typing import Optional, Tuple


def max_offset(content_length: int) -> int:
    """Last valid scroll offset for `content_length` lines."""
    return max(0, content_length - 1)


class MetadataScrollState:
    """Tracks the line offset into the metadata rendering."""

    def __init__(self):
        self.offset = 0
        self._line_count: Optional[int] = None

    def scroll_down(self) -> None:
        # Unbounded until the first reconcile tells us how long the content is.
        if self._line_count is None:
            self.offset += 1
        else:
            self.offset = min(self.offset + 1, max_offset(self._line_count))

    def scroll_up(self) -> None:
        self.offset = max(0, self.offset - 1)

    def reconcile(self, line_count: int) -> Tuple[int, int]:
        """
        Clamp the offset to the current content and return the scrollbar state.

        Args:
            line_count (int): Number of lines assembled for this redraw.

        Returns:
            Tuple[int, int]: (content_length, position) for the scrollbar.
        """
        self._line_count = max(0, line_count)
        self.offset = min(self.offset, max_offset(self._line_count))
        return max_offset(self._line_count) + 1, self.offset
