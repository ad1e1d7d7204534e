from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .core.constants import CONFIG_SECTION
from .core.exceptions import ConfigurationError


def load_yaml(file_path: Union[str, Path]) -> Any:
    with open(file_path, "r") as file:
        data = yaml.safe_load(file)
    return data


def load_settings_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Read the ``aws_mon`` section of a YAML settings file."""
    path = Path(file_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        data = load_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Can't read configuration file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping")

    section = data.get(CONFIG_SECTION, {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_SECTION}' in {path} must be a mapping")
    # YAML keys may be written the same way as the flags
    return {str(key).replace("-", "_"): value for key, value in section.items()}
