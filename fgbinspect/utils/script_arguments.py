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
Dataclass-based Argument Model for the Inspector.

Validates the command-line arguments in `__post_init__` and resolves
config-backed defaults, so the tools receive clean inputs.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from fgbinspect.utils.config_loader import config
from fgbinspect.utils.path_helpers import has_supported_extension, is_remote_file

logger = logging.getLogger(__name__)


@dataclass
class InspectArguments:
    """Arguments for the inspect and dump tools."""
    input_path: Union[str, Path, None] = None
    stdout: bool = False
    display_crs: Optional[str] = None
    verbose: bool = False
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Validation and default resolution for inspect arguments."""
        try:
            self._validate_inspect()
            self._resolve_defaults()
        except ValueError as e:
            self.handle_error(str(e))

    def handle_error(self, message: str):
        """Logs an error and raises ValueError."""
        logger.error(message)
        raise ValueError(message)

    @property
    def is_remote(self) -> bool:
        return is_remote_file(str(self.input_path))

    def _validate_inspect(self):
        """Perform validation checks for inspect arguments."""
        if not self.input_path:
            raise ValueError("An input FlatGeobuf file or URL is required.")
        if is_remote_file(str(self.input_path)):
            self.input_path = str(self.input_path)
        else:
            self.input_path = Path(self.input_path)
            if not self.input_path.exists():
                raise ValueError(f"Input file not found: {self.input_path}")
            if not self.input_path.is_file():
                raise ValueError(f"Input path is not a file: {self.input_path}")
        if not has_supported_extension(str(self.input_path)):
            logger.warning(f"{self.input_path} does not have a .fgb extension; trying anyway")
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    def _resolve_defaults(self):
        """Resolve defaults that come from config.toml."""
        if not self.display_crs:
            self.display_crs = config.get("display.crs", "EPSG:4326")
        if self.log_file is None and config.get("logging.file"):
            self.log_file = Path(config.get("logging.file"))
