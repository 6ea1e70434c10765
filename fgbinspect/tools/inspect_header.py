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
Interactive FlatGeobuf Header Inspector.

This module powers the default command: it decodes the header once, builds
the view state, and runs the terminal session until the user quits.
"""

import logging
import sys
from fgbinspect.tui.orchestrator import HeaderView
from fgbinspect.tui.terminal import TerminalSession, run_event_loop
from fgbinspect.utils.config_loader import config
from fgbinspect.utils.exceptions import TerminalSessionError
from fgbinspect.utils.header_reader import read_header
from fgbinspect.utils.log_helpers import console_muted
from fgbinspect.utils.script_arguments import InspectArguments

logger = logging.getLogger('inspect_header')


def build_view(args: InspectArguments) -> HeaderView:
    """Decode the header and create the session view state."""
    header, byte_size = read_header(str(args.input_path))
    return HeaderView(
        header,
        byte_size=byte_size,
        display_crs=args.display_crs,
        chrome_rows=int(config.get("display.chrome_rows", 3)),
    )


def inspect_header(args: InspectArguments):
    """
    Run the interactive inspector.

    Raises:
        TerminalSessionError: If stdout is not a terminal, or the terminal
            cannot be set up or restored.
        HeaderReadError: If the header cannot be decoded.
    """
    if not sys.stdout.isatty():
        raise TerminalSessionError(
            "stdout is not a terminal; use --stdout to print the header as JSON instead."
        )

    view = build_view(args)
    logger.debug(f"Inspecting {args.input_path} ({view.row_count} columns)")
    with console_muted():
        with TerminalSession() as session:
            run_event_loop(view, session)
    logger.debug("Inspector closed")
