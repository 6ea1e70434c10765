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
Non-interactive header dump.

Prints the decoded header as indented JSON on stdout, for scripting and for
use when stdout is not a terminal.
"""

import logging
import sys
from typing import Optional, TextIO
from fgbinspect.utils.header_reader import read_header
from fgbinspect.utils.script_arguments import InspectArguments

logger = logging.getLogger('dump_header')


def dump_header(args: InspectArguments, stream: Optional[TextIO] = None):
    """
    Write the header of `args.input_path` as JSON.

    Args:
        args (InspectArguments): Validated arguments.
        stream (TextIO, optional): Destination; defaults to sys.stdout.
    """
    header, _ = read_header(str(args.input_path))
    stream = stream or sys.stdout
    stream.write(header.to_json())
    stream.write('\n')
    stream.flush()
    logger.debug(f"Dumped header of {args.input_path}")
