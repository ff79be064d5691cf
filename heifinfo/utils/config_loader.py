#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: HEIF Info Toolkit (heifinfo)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""
Configuration Management for the HEIF Info Toolkit.

This module provides a singleton configuration manager (`Config`) that loads,
parses, and provides access to settings from a central `config.toml` file.
It ensures that configuration values are loaded only once and are available
throughout the application.

Classes:
    Config: A singleton class for managing application-wide configuration.
"""
import logging
import sys
from pathlib import Path
from typing import Any, Dict
from heifinfo.utils.heif_constants import HEIF_EXTENSIONS

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)


class Config:
    """Singleton configuration manager"""
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self):
        """Load configuration from config.toml"""
        config_path = Path(__file__).parent.parent / "config.toml"
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    self._config = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning(f"Could not load config.toml: {e}")
                self._config = self._default_config()
        else:
            self._config = self._default_config()

    def _default_config(self) -> Dict[str, Any]:
        """Default configuration if config.toml doesn't exist"""
        return {
            "logging": {
                "level": "INFO",
                "file": ""
            },
            "report": {
                "indent": 0,
                "extensions": list(HEIF_EXTENSIONS)
            }
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation

        Args:
            key: Configuration key in dot notation (e.g., "report.indent")
            default: Default value if key is not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get("report.indent")
            0
        """
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section"""
        return self._config.get(section, {})

    def set(self, key: str, value: Any):
        """Set configuration value using dot notation

        Note:
            This only modifies the in-memory configuration.
            Changes are not persisted to config.toml.
        """
        keys = key.split(".")
        config = self._config
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]
        config[keys[-1]] = value

    def reload(self):
        """Reload configuration from config.toml"""
        self._load_config()

# Singleton instance
config = Config()
