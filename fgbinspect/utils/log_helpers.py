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
This module provides logging helpers for the FlatGeobuf Inspector, including
muting the console while the interactive screen owns the terminal.
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Optional

CONSOLE_HANDLER_NAME = 'fgbinspect-console'


def setup_logger(log_file: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Set up and configure the root logger.

    Console output goes to stderr so that `--stdout` JSON stays clean.

    Args:
        log_file (str, optional): The full path to the log file.
        level (int): The logging level.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter('%(message)s')
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


@contextmanager
def console_muted(logger: Optional[logging.Logger] = None):
    """
    Detach the console handler for the duration of the block.

    Log records written to the terminal would corrupt the curses screen; file
    handlers keep receiving them.
    """
    logger = logger or logging.getLogger()
    muted = [h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    for handler in muted:
        logger.removeHandler(handler)
    try:
        yield logger
    finally:
        for handler in muted:
            logger.addHandler(handler)


def shutdown_logger(logger: logging.Logger):
    """
    Safely shuts down a logger by removing and closing its handlers.
    This is crucial for releasing file locks.
    """
    if not logger:
        return
    handlers = logger.handlers[:]
    for handler in handlers:
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
