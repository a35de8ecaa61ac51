#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import toml
import yaml

from .exit_codes import ConfigError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("repouri")

# Presence of this variable (any value) selects the strict grammar
STRICT_MODE_ENV = "REPOURI_V4"
CONFIG_ENV = "REPOURI_CONFIG"


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. REPOURI_CONFIG environment variable
    2. ~/.repouri/config.{json,toml,yaml,yml}
    """
    if CONFIG_ENV in os.environ:
        return Path(os.environ[CONFIG_ENV])

    repouri_dir = Path.home() / '.repouri'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = repouri_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path for saving
    return repouri_dir / 'config.json'


def _read_config_file(config_path):
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    if suffix in ('.yaml', '.yml'):
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    # Default to JSON format
    with open(config_path, 'r') as f:
        return json.load(f)


def load_config():
    """
    Load configuration from file.

    Defaults are merged with the config file (if any), then with
    REPOURI_* environment overrides.

    Raises:
        ConfigError: the config file exists but cannot be read
    """
    config_path = get_config_path()
    config = get_default_config()

    if config_path.exists():
        try:
            file_config = _read_config_file(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Error loading config from {config_path}: expected a mapping")
        config = merge_configs(config, file_config)

    config = apply_env_overrides(config)
    configure_logging(config)
    return config


def save_config(config):
    """Save configuration to file in the format of its path."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    suffix = config_path.suffix.lower()
    with open(config_path, 'w') as f:
        if suffix == '.toml':
            toml.dump(config, f)
        elif suffix in ('.yaml', '.yml'):
            yaml.safe_dump(config, f, default_flow_style=False)
        else:
            json.dump(config, f, indent=2)

    logger.info(f"Configuration saved to {config_path}")
    return config_path


def get_default_config():
    """Get default configuration."""
    return {
        "parsing": {
            "mode": "legacy"
        },
        "validation": {
            "enabled": False
        },
        "logging": {
            "level": "INFO"
        }
    }


def configure_logging(config):
    """Apply the configured log level to the repouri logger."""
    level_name = str(config.get("logging", {}).get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level: {level_name}")
    logger.setLevel(level)


def parse_mode_from_env(environ=None, config=None):
    """
    Decide which grammar to parse repository strings with.

    The REPOURI_V4 toggle wins when present, whatever its value. Otherwise
    the configured parsing.mode is used, falling back to legacy.

    Args:
        environ: Mapping to read instead of os.environ
        config: Loaded configuration (optional)

    Returns:
        ParseMode

    Raises:
        ConfigError: parsing.mode is not a known grammar
    """
    from .parser import ParseMode

    environ = os.environ if environ is None else environ
    if STRICT_MODE_ENV in environ:
        return ParseMode.STRICT

    mode = (config or {}).get("parsing", {}).get("mode", ParseMode.LEGACY.value)
    try:
        return ParseMode(str(mode).lower())
    except ValueError:
        raise ConfigError(f"Unknown parsing mode: {mode}") from None


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            # Recursively merge nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            # Override or add new key
            merged[key] = value

    return merged


def apply_env_overrides(config, environ=None):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: REPOURI_SECTION_KEY
    For example: REPOURI_PARSING_MODE=strict
    """
    env_prefix = "REPOURI_"
    environ = os.environ if environ is None else environ

    for env_key, value in environ.items():
        if not env_key.startswith(env_prefix):
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        # Convert value
        if value.lower() in ('true', '1', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', '0', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i : i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if not matched_key:
                break

            # At the end of the env var: this is the key to set
            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Env var is longer but we found a non-dict value
                break

    return config
