#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the mdxtree CLI.

This module handles discovery of configuration files, loading them from
TOML, YAML or JSON, and turning their ``parser`` and ``renderer`` tables
into option objects.

A configuration file looks like::

    [parser]
    image_width_min = 320
    image_width_max = 960

    [renderer]
    list_indent_width = 4

"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import yaml

from mdxtree.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from mdxtree.exceptions import ConfigError
from mdxtree.options.mdx import MdxParserOptions, MdxRendererOptions

logger = logging.getLogger(__name__)

CONFIG_SECTIONS = ("parser", "renderer")

OptionsT = TypeVar("OptionsT", MdxParserOptions, MdxRendererOptions)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.mdxtree] section from pyproject.toml.

    Returns an empty dict when the section is absent.
    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path)) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", config_path=str(pyproject_path)) from e

    tool = data.get("tool", {})
    section = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] in {pyproject_path} must be a table", config_path=str(pyproject_path)
        )
    return section


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path)) from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path)) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path)) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigError
        If the file does not exist, cannot be read or parsed, or has an
        unsupported extension

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml, .yml or .json",
                config_path=str(config_path),
            )
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", config_path=str(config_path)) from e

    logger.debug("Loaded configuration from %s", config_path)
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    Parameters
    ----------
    base : dict
        Base configuration dictionary
    override : dict
        Override configuration dictionary (higher priority)

    Returns
    -------
    dict
        Merged configuration dictionary

    Examples
    --------
    >>> merge_configs({"parser": {"image_width_min": 100}}, {"parser": {"image_width_max": 900}})
    {'parser': {'image_width_min': 100, 'image_width_max': 900}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` (the working directory by default).

    Dedicated ``.mdxtree.*`` files are preferred; a ``pyproject.toml`` is used
    only when it has a ``[tool.mdxtree]`` section.

    Returns
    -------
    Path or None
        The discovered file, or None

    """
    directory = start_dir or Path.cwd()

    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate

    pyproject = directory / "pyproject.toml"
    if pyproject.is_file():
        try:
            if _load_pyproject_section(pyproject):
                return pyproject
        except ConfigError:
            logger.debug("Ignoring unreadable pyproject.toml during config discovery: %s", pyproject)

    return None


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None, start_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MDXTREE_CONFIG)
    3. Auto-discovered config file in the working directory

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    ConfigError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file(start_dir)
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def _build_section(config: Dict[str, Any], section: str, options_class: Type[OptionsT]) -> OptionsT:
    values = config.get(section, {})
    if not isinstance(values, dict):
        raise ConfigError(f"Configuration section '{section}' must be a table, got {type(values).__name__}")
    try:
        return options_class.from_mapping(values)
    except (KeyError, TypeError, ValueError) as e:
        message = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
        raise ConfigError(f"Invalid [{section}] configuration: {message}", original_error=e) from e


def build_options(config: Dict[str, Any]) -> Tuple[MdxParserOptions, MdxRendererOptions]:
    """Build parser and renderer options from a configuration dictionary.

    Parameters
    ----------
    config : dict
        Configuration with optional ``parser`` and ``renderer`` tables

    Returns
    -------
    tuple of (MdxParserOptions, MdxRendererOptions)
        Options with configured values applied over the defaults

    Raises
    ------
    ConfigError
        If the configuration has unknown sections or keys, or ill-typed or
        out-of-range values

    Examples
    --------
    >>> parser_options, renderer_options = build_options({"renderer": {"list_indent_width": 4}})
    >>> renderer_options.list_indent_width
    4

    """
    unknown_sections = set(config) - set(CONFIG_SECTIONS)
    if unknown_sections:
        raise ConfigError(f"Unknown configuration section(s): {', '.join(sorted(unknown_sections))}")

    parser_options = _build_section(config, "parser", MdxParserOptions)
    renderer_options = _build_section(config, "renderer", MdxRendererOptions)
    return parser_options, renderer_options
