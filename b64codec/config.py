"""CLI defaults loaded from an optional YAML file.

Example config:

    policy: strict      # permissive | strict
    terminator: true    # count the NUL terminator in `size` output
    verbose: false
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .core.decoder import DecodePolicy

CONFIG_ENV_VAR = 'B64CODEC_CONFIG'


class ConfigError(Exception):
    """Invalid or unreadable config file."""


@dataclass
class Config:
    policy: DecodePolicy = DecodePolicy.PERMISSIVE
    terminator: bool = True
    verbose: bool = False


def _parse(data: Dict[str, Any], source: str) -> Config:
    config = Config()
    for key, value in data.items():
        if key == 'policy':
            try:
                config.policy = DecodePolicy(str(value).lower())
            except ValueError:
                choices = ', '.join(p.value for p in DecodePolicy)
                raise ConfigError(f"{source}: invalid policy {value!r} (expected one of: {choices})")
        elif key in ('terminator', 'verbose'):
            if not isinstance(value, bool):
                raise ConfigError(f"{source}: '{key}' must be true or false")
            setattr(config, key, value)
        else:
            raise ConfigError(f"{source}: unknown key '{key}'")
    return config


def load_config(path: Optional[str] = None) -> Config:
    """Load CLI defaults.

    Args:
        path: Config file; falls back to $B64CODEC_CONFIG, then to defaults

    Returns:
        Parsed Config

    Raises:
        ConfigError: If the file cannot be read or has invalid content
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return Config()

    try:
        content = Path(path).read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return _parse(data, path)
