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
View Orchestrator for the interactive inspector.

HeaderView owns the decoded header, the cached map overlay and the three view
models (tab selection, metadata scroll, column focus). Each key press mutates
at most one model or the active tab; the caller redraws after every event.
The renderer asks for a ViewSnapshot on each redraw, which carries everything
it needs to draw the active tab.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
from fgbinspect.tui.column_table import TABLE_CHROME_ROWS, ColumnsTableState, visible_row_count
from fgbinspect.tui.keys import Action, KeyEvent, action_for
from fgbinspect.tui.map_overlay import MapOverlay, build_map_overlay
from fgbinspect.tui.metadata_lines import DisplayLine, build_metadata_lines, wrap_lines
from fgbinspect.tui.metadata_scroll import MetadataScrollState
from fgbinspect.tui.tabs import INITIAL_TAB, SelectedTab
from fgbinspect.utils.data_models import ColumnDescriptor, HeaderRecord
from fgbinspect.utils.srs_logic import DISPLAY_CRS

logger = logging.getLogger(__name__)

# Left and right borders plus the scrollbar column
METADATA_CHROME_COLS = 3
# Top and bottom borders
METADATA_CHROME_ROWS = 2


class SessionState(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


@dataclass
class MetadataSnapshot:
    lines: List[DisplayLine]
    offset: int
    scrollbar: Tuple[int, int]


@dataclass
class ColumnsSnapshot:
    rows: List[ColumnDescriptor]
    focused_index: Optional[int]
    scroll_offset: int
    visible_rows: int
    scrollbar: Tuple[int, int]


@dataclass
class ViewSnapshot:
    """Per-redraw output for the renderer; only the active tab's part is filled."""
    active_tab: SelectedTab
    metadata: Optional[MetadataSnapshot] = None
    columns: Optional[ColumnsSnapshot] = None
    map_overlay: Optional[MapOverlay] = None
    tab_titles: List[str] = field(default_factory=SelectedTab.titles)


class HeaderView:
    """
    The interactive session over a single decoded header.

    Args:
        header: The decoded header; never mutated.
        byte_size: File size in bytes, or None when unknown.
        display_crs: CRS the world map is drawn in.
        chrome_rows: Rows of the Columns table taken by borders and the header row.
    """

    def __init__(self, header: HeaderRecord, byte_size: Optional[int] = None,
                 display_crs: str = DISPLAY_CRS, chrome_rows: int = TABLE_CHROME_ROWS):
        self.header = header
        self.byte_size = byte_size
        self.chrome_rows = chrome_rows
        self.state = SessionState.RUNNING
        self.selected_tab = INITIAL_TAB
        self.metadata_scroll = MetadataScrollState()
        self.columns_table = ColumnsTableState()
        # Computed once; the overlay does not change during the session.
        self.map_overlay = build_map_overlay(header, display_crs)
        logger.debug(f"Map overlay: {self.map_overlay.status.value} ({self.map_overlay.label})")

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def row_count(self) -> int:
        return len(self.header.columns)

    def handle_key(self, event: KeyEvent) -> bool:
        """
        Apply one key event.

        Args:
            event (KeyEvent): The key event.

        Returns:
            bool: True if a redraw should follow. Every key press while the
            session is running asks for one, even when nothing changed.
        """
        if not event.pressed or not self.running:
            return False

        action = action_for(event)
        if action is Action.QUIT:
            self.state = SessionState.TERMINATED
            logger.debug("Quit requested")
            return False
        if action is Action.NEXT_TAB:
            self.selected_tab = self.selected_tab.next()
        elif action is Action.PREVIOUS_TAB:
            self.selected_tab = self.selected_tab.previous()
        elif action is Action.SCROLL_DOWN:
            self._scroll_down()
        elif action is Action.SCROLL_UP:
            self._scroll_up()
        return True

    def terminate(self) -> None:
        self.state = SessionState.TERMINATED

    def _scroll_down(self) -> None:
        if self.selected_tab is SelectedTab.METADATA:
            self.metadata_scroll.scroll_down()
        elif self.selected_tab is SelectedTab.COLUMNS:
            self.columns_table.advance(self.row_count)

    def _scroll_up(self) -> None:
        if self.selected_tab is SelectedTab.METADATA:
            self.metadata_scroll.scroll_up()
        elif self.selected_tab is SelectedTab.COLUMNS:
            self.columns_table.retreat(self.row_count)

    def metadata_snapshot(self, viewport_width: int) -> MetadataSnapshot:
        """Assemble and wrap the metadata lines, then reconcile the scroll offset against them."""
        info_lines = build_metadata_lines(self.header, self.byte_size)
        lines = wrap_lines(info_lines, viewport_width - METADATA_CHROME_COLS)
        scrollbar = self.metadata_scroll.reconcile(len(lines))
        return MetadataSnapshot(lines=lines, offset=self.metadata_scroll.offset, scrollbar=scrollbar)

    def columns_snapshot(self, viewport_height: int) -> ColumnsSnapshot:
        n = self.row_count
        return ColumnsSnapshot(
            rows=list(self.header.columns),
            focused_index=self.columns_table.focused_index(n),
            scroll_offset=self.columns_table.scroll_offset(n, viewport_height, self.chrome_rows),
            visible_rows=visible_row_count(viewport_height, self.chrome_rows),
            scrollbar=self.columns_table.scrollbar(n, viewport_height, self.chrome_rows),
        )

    def snapshot(self, viewport_width: int, viewport_height: int) -> ViewSnapshot:
        """
        Compute the view state for one redraw.

        Args:
            viewport_width: Width of the tab content area in character cells.
            viewport_height: Height of the tab content area in character cells.

        Returns:
            ViewSnapshot: The active tab and the data needed to draw it.
        """
        snap = ViewSnapshot(active_tab=self.selected_tab)
        if self.selected_tab is SelectedTab.METADATA:
            snap.metadata = self.metadata_snapshot(viewport_width)
        elif self.selected_tab is SelectedTab.COLUMNS:
            snap.columns = self.columns_snapshot(viewport_height)
        else:
            snap.map_overlay = self.map_overlay
        return snap
