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
Command-line interface for the FlatGeobuf Inspector (FGBI).

This script provides the main entry point for the `fgbinspect` command,
parsing user arguments and dispatching them to the interactive inspector or
the JSON dump.
"""
import argparse
import logging
import sys
from pathlib import Path
from fgbinspect.utils.config_loader import config
from fgbinspect.utils.exceptions import InspectorError, TerminalSessionError
from fgbinspect.utils.log_helpers import setup_logger, shutdown_logger
from fgbinspect.utils.script_arguments import InspectArguments


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fgbinspect',
        description='Inspect the header of a FlatGeobuf file in the terminal.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('input_path', metavar='FILE', help='Local path or HTTP(S) URL of a FlatGeobuf file.')
    parser.add_argument('--stdout', action='store_true', dest='stdout', help='Print the header as JSON instead of opening the interactive view.')
    parser.add_argument('--display-crs', type=str, default=None, dest='display_crs', help='CRS the Map tab is drawn in. Default: display.crs from config.toml.')
    parser.add_argument('--log-file', type=Path, default=None, dest='log_file', help='Path to a log file for debugging.')
    parser.add_argument('-v', '--verbose', action='store_true', dest='verbose', help='Enable verbose logging.')
    return parser


def main(argv=None):
    """
    Main function to parse arguments and call the appropriate tool.
    """
    args = build_parser().parse_args(argv)

    # --- Logger Setup ---
    if args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, str(config.get("logging.level", "INFO")).upper(), logging.INFO)
    log_file = args.log_file or config.get("logging.file") or None
    logger = setup_logger(log_file=str(log_file) if log_file else None, level=log_level)

    try:
        script_args = InspectArguments(**vars(args))
    except ValueError:
        # Already logged by InspectArguments
        shutdown_logger(logger)
        sys.exit(1)

    try:
        if script_args.stdout:
            from fgbinspect.tools.dump_header import dump_header
            dump_header(script_args)
        else:
            from fgbinspect.tools.inspect_header import inspect_header
            inspect_header(script_args)
    except (InspectorError, TerminalSessionError) as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
        sys.exit(1)
    finally:
        shutdown_logger(logger)


if __name__ == '__main__':
    main()
