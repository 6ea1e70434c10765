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
Logical key events.

The terminal layer translates raw input into KeyEvent objects so the view
state never depends on curses key codes.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

KEY_LEFT = 'left'
KEY_RIGHT = 'right'
KEY_UP = 'up'
KEY_DOWN = 'down'
KEY_ESC = 'esc'
KEY_RESIZE = 'resize'


@dataclass(frozen=True)
class KeyEvent:
    """
    A key event from the terminal.

    Attributes:
        key: Logical key name ('left', 'esc', ...) or a single character.
        ctrl: True when the Control modifier was held.
        pressed: False for key-release events, which are ignored.
    """
    key: str
    ctrl: bool = False
    pressed: bool = True


class Action(Enum):
    """What a key press asks the view to do."""
    NEXT_TAB = 'next_tab'
    PREVIOUS_TAB = 'previous_tab'
    SCROLL_DOWN = 'scroll_down'
    SCROLL_UP = 'scroll_up'
    QUIT = 'quit'


def action_for(event: KeyEvent) -> Optional[Action]:
    """
    Map a key event to an action.

    Returns:
        Optional[Action]: The action, or None for keys with no binding.
    """
    key = event.key
    if event.ctrl:
        return Action.QUIT if key in ('c', 'C') else None
    if key == KEY_RIGHT:
        return Action.NEXT_TAB
    if key == KEY_LEFT:
        return Action.PREVIOUS_TAB
    if key in (KEY_DOWN, 'j'):
        return Action.SCROLL_DOWN
    if key in (KEY_UP, 'k'):
        return Action.SCROLL_UP
    if key in (KEY_ESC, 'q', 'Q'):
        return Action.QUIT
    return None
