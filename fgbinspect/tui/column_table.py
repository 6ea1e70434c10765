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
Selection and scrolling state for the Columns table.

The focused row is the single source of truth: the scroll offset is derived
from it on every redraw, never stored. Every accessor takes the current row
count and re-validates against it, so a stale focus can never index outside
the schema.
"""
from typing import List, Optional, Sequence, Tuple
from fgbinspect.utils.data_models import ColumnDescriptor

# Top border + header row + bottom border
TABLE_CHROME_ROWS = 3


def visible_row_count(viewport_height: int, chrome_rows: int = TABLE_CHROME_ROWS) -> int:
    """Number of data rows that fit in a table of the given height."""
    return max(0, viewport_height - chrome_rows)


class ColumnsTableState:
    """Tracks which schema row is focused."""

    def __init__(self):
        self._focus = 0

    def _clamped(self, row_count: int) -> Optional[int]:
        if row_count <= 0:
            return None
        return min(max(self._focus, 0), row_count - 1)

    def focused_index(self, row_count: int) -> Optional[int]:
        """
        Return the focused row for a schema of `row_count` rows.

        Returns:
            Optional[int]: The focused row index, or None for an empty schema.
        """
        return self._clamped(row_count)

    def advance(self, row_count: int) -> None:
        """Focus the next row, wrapping from the last row to the first."""
        current = self._clamped(row_count)
        if current is None:
            return
        self._focus = (current + 1) % row_count

    def retreat(self, row_count: int) -> None:
        """Focus the previous row, wrapping from the first row to the last."""
        current = self._clamped(row_count)
        if current is None:
            return
        self._focus = (current - 1) % row_count

    def scroll_offset(self, row_count: int, viewport_height: int, chrome_rows: int = TABLE_CHROME_ROWS) -> int:
        """
        Index of the first visible row.

        The offset is the focused row capped at the last offset that still
        fills the window, so the focused row is always visible.

        Args:
            row_count: Number of schema rows.
            viewport_height: Height of the table area in character cells.
            chrome_rows: Rows consumed by borders and the header row.
        """
        focused = self._clamped(row_count)
        if focused is None:
            return 0
        visible_rows = visible_row_count(viewport_height, chrome_rows)
        max_scroll_offset = max(0, row_count - visible_rows)
        return min(focused, max_scroll_offset)

    def scrollbar(self, row_count: int, viewport_height: int, chrome_rows: int = TABLE_CHROME_ROWS) -> Tuple[int, int]:
        """Scrollbar (content_length, position) for the table."""
        visible_rows = visible_row_count(viewport_height, chrome_rows)
        max_scroll_offset = max(0, row_count - visible_rows)
        return max_scroll_offset + 1, self.scroll_offset(row_count, viewport_height, chrome_rows)


# Table columns, in display order: header text and how to render a cell.
COLUMN_FIELDS = (
    ('Name', lambda c: c.name),
    ('Type', lambda c: c.type),
    ('Description', lambda c: c.description or '-'),
    ('Nullable', lambda c: _flag(c.nullable)),
    ('Primary Key', lambda c: _flag(c.primary_key)),
    ('Unique', lambda c: _flag(c.unique)),
)


def _flag(value: Optional[bool]) -> str:
    if value is None:
        return 'Unknown'
    return 'true' if value else 'false'


def column_headers() -> List[str]:
    return [header for header, _ in COLUMN_FIELDS]


def column_cells(column: ColumnDescriptor) -> List[str]:
    """Render one schema column as a table row."""
    return [render(column) for _, render in COLUMN_FIELDS]


def column_widths(columns: Sequence[ColumnDescriptor], padding: int = 2) -> List[int]:
    """Width of each table column: the longest of header and cells, plus padding."""
    widths = []
    for header, render in COLUMN_FIELDS:
        longest = max((len(render(c)) for c in columns), default=0)
        widths.append(max(len(header), longest) + padding)
    return widths
