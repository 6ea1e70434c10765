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
Configuration Management for the FlatGeobuf Inspector.

This module provides a singleton configuration manager (`Config`) that loads,
parses, and provides access to settings from a central `config.toml` file.
It ensures that configuration values are loaded only once and are available
throughout the application.

Classes:
    Config: A singleton class for managing application-wide configuration.
"""
import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "display": {
        "crs": "EPSG:4326",
        "chrome_rows": 3,
    },
    "logging": {
        "level": "INFO",
        "file": "",
    },
}


class Config:
    """Singleton configuration manager"""
    _instance = None
    _config: Dict[str, Any] = {}
    _path: Path = CONFIG_PATH

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self, config_path: Optional[Path] = None):
        """Load configuration from config.toml, layered over the defaults"""
        if config_path is not None:
            self._path = Path(config_path)
        self._config = self._default_config()
        if not self._path.exists():
            return
        try:
            with open(self._path, "rb") as f:
                loaded = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load {self._path.name}: {e}")
            return
        for section, values in loaded.items():
            if isinstance(values, dict):
                self._config.setdefault(section, {}).update(values)
            else:
                self._config[section] = values

    def _default_config(self) -> Dict[str, Any]:
        """Default configuration if config.toml doesn't exist"""
        return copy.deepcopy(DEFAULT_CONFIG)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation

        Args:
            key: Configuration key in dot notation (e.g., "display.crs")
            default: Default value if key is not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get("display.crs")
            'EPSG:4326'
        """
        value = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set configuration value using dot notation

        Note:
            This only modifies the in-memory configuration.
            Changes are not persisted to config.toml.
        """
        keys = key.split(".")
        config = self._config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def reload(self, config_path: Optional[Path] = None):
        """Reload configuration from config.toml, or from another file"""
        self._load_config(config_path)

# Singleton instance
config = Config()
