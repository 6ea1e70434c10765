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
Tab selection for the inspector.

The set of tabs is closed and ordered: Metadata, Columns, Map. Navigation
cycles through that order in both directions, so every tab always has a
successor and a predecessor.
"""
from enum import Enum
from typing import List


class SelectedTab(Enum):
    """The active view of the inspector."""
    METADATA = 'Metadata'
    COLUMNS = 'Columns'
    MAP = 'Map'

    @classmethod
    def ordered(cls) -> List['SelectedTab']:
        return [cls.METADATA, cls.COLUMNS, cls.MAP]

    @classmethod
    def titles(cls) -> List[str]:
        """Tab titles in display order."""
        return [tab.value for tab in cls.ordered()]

    @property
    def index(self) -> int:
        return SelectedTab.ordered().index(self)

    def next(self) -> 'SelectedTab':
        tabs = SelectedTab.ordered()
        return tabs[(self.index + 1) % len(tabs)]

    def previous(self) -> 'SelectedTab':
        tabs = SelectedTab.ordered()
        return tabs[(self.index - 1) % len(tabs)]


INITIAL_TAB = SelectedTab.METADATA
