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
Metadata line assembly for the Metadata tab.

The line list is rebuilt from the header on every redraw. The CRS block and
the custom metadata block contribute lines only when the header carries them,
so the total line count varies between files and, once wrapped, with the
terminal width.
"""
import json
import textwrap
from dataclasses import dataclass
from typing import List, Optional
from fgbinspect.utils.data_models import HeaderRecord
from fgbinspect.utils.path_helpers import format_file_size


@dataclass(frozen=True)
class InfoLine:
    """A 'Label: value' line; a blank separator has an empty label and value."""
    label: str = ''
    value: str = ''

    @property
    def is_blank(self) -> bool:
        return not self.label and not self.value

    def text(self) -> str:
        if self.is_blank:
            return ''
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class DisplayLine:
    """One wrapped row on screen. `label_width` chars at the start are the label."""
    text: str
    label_width: int = 0


def _opt(value: Optional[object], default: str = '') -> str:
    return default if value is None else str(value)


def _flag(value: Optional[bool]) -> str:
    if value is None:
        return 'Unknown'
    return 'true' if value else 'false'


def _index_node_size(header: HeaderRecord) -> str:
    if header.index_node_size is None:
        return 'Unknown'
    if header.index_node_size == 0:
        return 'No Spatial Index'
    return str(header.index_node_size)


def _bounds(header: HeaderRecord) -> str:
    if header.envelope is None:
        return 'Undefined'
    return '[' + ', '.join(repr(v) for v in header.envelope.to_list()) + ']'


def _custom_metadata_lines(metadata: str) -> List[InfoLine]:
    """Expand a JSON object into one line per key; anything else is shown raw."""
    try:
        parsed = json.loads(metadata)
    except (TypeError, ValueError):
        parsed = None

    if isinstance(parsed, dict) and parsed:
        lines = [InfoLine('Custom Metadata', f"{len(parsed)} entries")]
        for key, value in parsed.items():
            shown = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
            lines.append(InfoLine(f"  {key}", shown))
        return lines
    return [InfoLine('Custom Metadata', metadata)]


def build_metadata_lines(header: HeaderRecord, byte_size: Optional[int] = None) -> List[InfoLine]:
    """
    Assemble the ordered Metadata tab lines for a header.

    Args:
        header (HeaderRecord): The decoded header.
        byte_size (Optional[int]): File size in bytes, or None when unknown.

    Returns:
        List[InfoLine]: Lines in display order, blank lines separating blocks.
    """
    lines = [
        InfoLine('Name', _opt(header.name)),
        InfoLine('File Size', format_file_size(byte_size)),
        InfoLine('Title', _opt(header.title)),
        InfoLine('Description', _opt(header.description)),
        InfoLine('Features', str(header.features_count)),
        InfoLine('Bounds', _bounds(header)),
        InfoLine('Geometry Type', header.geometry_type),
        InfoLine('Columns', str(header.column_count)),
        InfoLine('Spatial Index R-Tree Node Size', _index_node_size(header)),
        InfoLine(),
        InfoLine('Has M Dimension', _flag(header.has_m)),
        InfoLine('Has Z Dimension', _flag(header.has_z)),
        InfoLine('Has T Dimension', _flag(header.has_t)),
        InfoLine('Has TM Dimension', _flag(header.has_tm)),
    ]

    crs = header.crs
    if crs is not None:
        lines.extend([
            InfoLine(),
            InfoLine('CRS Code', str(crs.code)),
            InfoLine('CRS Name', _opt(crs.name)),
            InfoLine('CRS Code String', _opt(crs.code_string)),
            InfoLine('CRS Description', _opt(crs.description)),
            InfoLine('CRS Organization', _opt(crs.org)),
            InfoLine('CRS WKT', _opt(crs.wkt)),
        ])
    else:
        lines.append(InfoLine('CRS', 'Undefined'))

    if header.metadata:
        lines.append(InfoLine())
        lines.extend(_custom_metadata_lines(header.metadata))

    return lines


def wrap_lines(lines: List[InfoLine], width: int) -> List[DisplayLine]:
    """
    Wrap info lines to the given width.

    Scrolling happens over the wrapped rows, so a long WKT definition can be
    scrolled through in full.

    Args:
        lines: Lines from build_metadata_lines().
        width: Available width in character cells.

    Returns:
        List[DisplayLine]: Display rows; only the first row of a line carries the label.
    """
    rows: List[DisplayLine] = []
    width = max(1, width)
    for line in lines:
        if line.is_blank:
            rows.append(DisplayLine(''))
            continue
        label_width = len(line.label) + 2
        wrapped = textwrap.wrap(
            line.text(), width=width,
            break_long_words=True, replace_whitespace=True, drop_whitespace=True
        ) or ['']
        rows.append(DisplayLine(wrapped[0], min(label_width, len(wrapped[0]))))
        rows.extend(DisplayLine(part) for part in wrapped[1:])
    return rows
