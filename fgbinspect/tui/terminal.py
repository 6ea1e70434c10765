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
Curses Terminal Session and Renderer.

TerminalSession puts the terminal into raw mode on the alternate screen and
restores it on every exit path, including exceptions and interrupts. It also
translates curses key codes into logical KeyEvents and draws a ViewSnapshot.
"""
import curses
import locale
import logging
import os
from typing import List, Optional
from fgbinspect.tui.column_table import column_cells, column_headers, column_widths
from fgbinspect.tui.keys import (
    KEY_DOWN, KEY_ESC, KEY_LEFT, KEY_RESIZE, KEY_RIGHT, KEY_UP, KeyEvent
)
from fgbinspect.tui.map_overlay import MapOverlay, MapStatus
from fgbinspect.tui.orchestrator import (
    ColumnsSnapshot, HeaderView, MetadataSnapshot, ViewSnapshot
)
from fgbinspect.tui.tabs import SelectedTab
from fgbinspect.tui.world_map import LAND_CHAR, render_world_map
from fgbinspect.utils.exceptions import TerminalSessionError

logger = logging.getLogger(__name__)

# Color pairs (initialised in TerminalSession.__enter__)
CP_BORDER = 1
CP_LABEL = 2
CP_TAB_ACTIVE = 3
CP_FOCUS = 4
CP_LAND = 5
CP_EXTENT = 6
CP_ERROR = 7
CP_STATUS = 8

TABS_HEIGHT = 3
STATUS_HEIGHT = 1
HIGHLIGHT_SYMBOL = '>> '
STATUS_TEXT = ' ←/→ switch tab   ↑/↓ or j/k scroll   q/Esc quit '

_ARROW_KEYS = {
    curses.KEY_LEFT: KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
}


def translate_key(code: int) -> Optional[KeyEvent]:
    """
    Translate a curses key code into a logical key event.

    Args:
        code (int): Value returned by getch(); -1 means no input.

    Returns:
        Optional[KeyEvent]: The event, or None for codes with no meaning here.
    """
    if code < 0:
        return None
    if code in _ARROW_KEYS:
        return KeyEvent(_ARROW_KEYS[code])
    if code == curses.KEY_RESIZE:
        return KeyEvent(KEY_RESIZE)
    if code == 27:
        return KeyEvent(KEY_ESC)
    # In raw mode Control+letter arrives as 1..26
    if 1 <= code <= 26 and code not in (9, 10, 13):
        return KeyEvent(chr(code + 96), ctrl=True)
    if 32 <= code < 127:
        return KeyEvent(chr(code))
    return None


class TerminalSession:
    """Owns the curses screen for the lifetime of an interactive session."""

    def __init__(self):
        self.stdscr = None

    def __enter__(self):
        """Enter raw mode on the alternate screen."""
        os.environ.setdefault('ESCDELAY', '25')
        locale.setlocale(locale.LC_ALL, '')
        try:
            self.stdscr = curses.initscr()
            curses.noecho()
            curses.raw()
            self.stdscr.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            if curses.has_colors():
                curses.start_color()
                curses.use_default_colors()
                curses.init_pair(CP_BORDER, curses.COLOR_WHITE, -1)
                curses.init_pair(CP_LABEL, curses.COLOR_GREEN, -1)
                curses.init_pair(CP_TAB_ACTIVE, curses.COLOR_BLUE, -1)
                curses.init_pair(CP_FOCUS, curses.COLOR_YELLOW, -1)
                curses.init_pair(CP_LAND, curses.COLOR_RED, -1)
                curses.init_pair(CP_EXTENT, curses.COLOR_GREEN, -1)
                curses.init_pair(CP_ERROR, curses.COLOR_RED, -1)
                curses.init_pair(CP_STATUS, curses.COLOR_BLACK, curses.COLOR_WHITE)
        except curses.error as e:
            try:
                self._restore()
            except TerminalSessionError as restore_error:
                logger.error(str(restore_error))
            raise TerminalSessionError(f"Could not initialise the terminal: {e}") from e
        logger.debug("Terminal session started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore the normal terminal mode without masking an exception already in flight."""
        try:
            self._restore()
        except TerminalSessionError as e:
            if exc_type is None:
                raise
            logger.error(str(e))
        logger.debug("Terminal session ended")

    def _restore(self):
        if self.stdscr is None:
            return
        try:
            self.stdscr.keypad(False)
            curses.noraw()
            curses.echo()
            curses.endwin()
        except curses.error as e:
            raise TerminalSessionError(f"Could not restore the terminal: {e}") from e
        finally:
            self.stdscr = None

    # -- input ---------------------------------------------------------------

    def read_key(self) -> Optional[KeyEvent]:
        """Block until the next key press."""
        try:
            code = self.stdscr.getch()
        except curses.error:
            return None
        return translate_key(code)

    # -- drawing helpers -----------------------------------------------------

    def _attr(self, pair: int, extra: int = 0) -> int:
        if curses.has_colors():
            return curses.color_pair(pair) | extra
        return extra

    def _addnstr(self, row: int, col: int, text: str, maxlen: int, attr: int = 0):
        """Write text clamped to the screen, ignoring curses boundary errors."""
        if row < 0 or col < 0 or maxlen <= 0:
            return
        try:
            self.stdscr.addnstr(row, col, text, maxlen, attr)
        except curses.error:
            pass

    def _draw_box(self, y: int, x: int, h: int, w: int, title: str = ''):
        if h < 2 or w < 2:
            return
        attr = self._attr(CP_BORDER)
        try:
            self.stdscr.attron(attr)
            self.stdscr.addch(y, x, curses.ACS_ULCORNER)
            self.stdscr.hline(y, x + 1, curses.ACS_HLINE, w - 2)
            self.stdscr.addch(y, x + w - 1, curses.ACS_URCORNER)
            for row in range(1, h - 1):
                self.stdscr.addch(y + row, x, curses.ACS_VLINE)
                self.stdscr.addch(y + row, x + w - 1, curses.ACS_VLINE)
            self.stdscr.addch(y + h - 1, x, curses.ACS_LLCORNER)
            self.stdscr.hline(y + h - 1, x + 1, curses.ACS_HLINE, w - 2)
            # Writing the bottom-right cell of the screen raises in curses
            try:
                self.stdscr.addch(y + h - 1, x + w - 1, curses.ACS_LRCORNER)
            except curses.error:
                pass
            self.stdscr.attroff(attr)
        except curses.error:
            pass
        if title:
            self._addnstr(y, x + 2, f" {title} ", w - 4, attr | curses.A_BOLD)

    def _draw_scrollbar(self, y: int, x: int, h: int, content_length: int, position: int):
        """Vertical scrollbar with arrows at both ends."""
        if h < 3:
            return
        track = h - 2
        self._addnstr(y, x, '↑', 1)
        self._addnstr(y + h - 1, x, '↓', 1)
        for row in range(track):
            self._addnstr(y + 1 + row, x, '│', 1)
        if content_length <= 1:
            thumb = 0
        else:
            thumb = round(position / (content_length - 1) * (track - 1))
        self._addnstr(y + 1 + thumb, x, '█', 1)

    # -- tabs ----------------------------------------------------------------

    def _draw_tabs(self, active: SelectedTab, width: int):
        self._draw_box(0, 0, TABS_HEIGHT, width, "Header Categories")
        col = 2
        for i, title in enumerate(SelectedTab.titles()):
            if i:
                self._addnstr(1, col, ' | ', width - col - 1)
                col += 3
            if title == active.value:
                attr = self._attr(CP_TAB_ACTIVE, curses.A_BOLD | curses.A_UNDERLINE)
            else:
                attr = 0
            self._addnstr(1, col, title, width - col - 1, attr)
            col += len(title)

    # -- metadata ------------------------------------------------------------

    def _draw_metadata(self, snap: MetadataSnapshot, y: int, h: int, w: int):
        self._draw_box(y, 0, h, w, "Metadata")
        inner_w = w - 3
        for i, line in enumerate(snap.lines[snap.offset:snap.offset + max(0, h - 2)]):
            row = y + 1 + i
            if line.label_width:
                self._addnstr(row, 1, line.text[:line.label_width], inner_w,
                              self._attr(CP_LABEL, curses.A_BOLD))
                self._addnstr(row, 1 + line.label_width, line.text[line.label_width:],
                              inner_w - line.label_width)
            else:
                self._addnstr(row, 1, line.text, inner_w)
        content_length, position = snap.scrollbar
        self._draw_scrollbar(y, w - 1, h, content_length, position)

    # -- columns -------------------------------------------------------------

    def _draw_columns(self, snap: ColumnsSnapshot, y: int, h: int, w: int):
        total = len(snap.rows)
        if snap.focused_index is None:
            title = "Columns (no columns defined)"
        else:
            title = f"Columns (Focused {snap.focused_index + 1} of {total})"
        self._draw_box(y, 0, h, w, title)

        inner_w = w - 3
        widths = column_widths(snap.rows)
        pad = ' ' * len(HIGHLIGHT_SYMBOL)

        def fmt(cells: List[str]) -> str:
            return ''.join(cell.ljust(width) for cell, width in zip(cells, widths))

        self._addnstr(y + 1, 1, pad + fmt(column_headers()), inner_w, curses.A_BOLD)
        visible = snap.rows[snap.scroll_offset:snap.scroll_offset + snap.visible_rows]
        for i, column in enumerate(visible):
            index = snap.scroll_offset + i
            if index == snap.focused_index:
                text = HIGHLIGHT_SYMBOL + fmt(column_cells(column))
                attr = self._attr(CP_FOCUS, curses.A_BOLD)
            else:
                text = pad + fmt(column_cells(column))
                attr = 0
            self._addnstr(y + 2 + i, 1, text, inner_w, attr)

        content_length, position = snap.scrollbar
        self._draw_scrollbar(y, w - 1, h, content_length, position)

    # -- map -----------------------------------------------------------------

    def _draw_map(self, overlay: MapOverlay, y: int, h: int, w: int):
        self._draw_box(y, 0, h, w, overlay.label)
        inner_h, inner_w = h - 2, w - 2
        canvas = render_world_map(inner_w, inner_h, overlay.bbox if overlay.drawable else None)
        for r, row in enumerate(canvas.rows):
            for c, ch in enumerate(row):
                if (r, c) in canvas.overlay:
                    attr = self._attr(CP_EXTENT, curses.A_BOLD)
                elif ch == LAND_CHAR:
                    attr = self._attr(CP_LAND)
                else:
                    continue
                self._addnstr(y + 1 + r, 1 + c, ch, 1, attr)

        if overlay.status in (MapStatus.MISSING_EXTENT, MapStatus.INVALID_EXTENT, MapStatus.REPROJECTION_FAILED):
            message = overlay.error or overlay.label
            row = y + 1 + inner_h // 2
            col = max(1, (w - len(message)) // 2)
            self._addnstr(row, col, message, inner_w, self._attr(CP_ERROR, curses.A_BOLD))

    # -- frame ---------------------------------------------------------------

    def draw(self, view: HeaderView) -> None:
        """Redraw the whole screen from the current view state."""
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        content_y = TABS_HEIGHT
        content_h = max(0, height - TABS_HEIGHT - STATUS_HEIGHT)

        snapshot: ViewSnapshot = view.snapshot(width, content_h)
        self._draw_tabs(snapshot.active_tab, width)
        if snapshot.metadata is not None:
            self._draw_metadata(snapshot.metadata, content_y, content_h, width)
        elif snapshot.columns is not None:
            self._draw_columns(snapshot.columns, content_y, content_h, width)
        elif snapshot.map_overlay is not None:
            self._draw_map(snapshot.map_overlay, content_y, content_h, width)

        self._addnstr(height - 1, 0, STATUS_TEXT.ljust(width - 1), width - 1, self._attr(CP_STATUS))
        self.stdscr.refresh()


def run_event_loop(view: HeaderView, session: TerminalSession) -> None:
    """
    Draw, block for one key, dispatch it; repeat until the view terminates.

    Events are handled one at a time in arrival order. An interrupt ends the
    session the same way the quit key does.
    """
    while view.running:
        session.draw(view)
        try:
            event = session.read_key()
        except KeyboardInterrupt:
            view.terminate()
            break
        if event is None or event.key == KEY_RESIZE:
            continue
        view.handle_key(event)
