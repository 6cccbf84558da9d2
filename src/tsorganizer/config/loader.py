"""
Configuration discovery and persistence.

Load order:
1. Explicit path (absolute, or relative to the workspace root)
2. tsorganizer.json in the workspace root, then in each parent directory
3. Built-in defaults
"""

import json
from pathlib import Path
from typing import Optional, Union

from tsorganizer.config.defaults import CONFIGURATION_FILE_NAME, default_configuration
from tsorganizer.config.models import Configuration
from tsorganizer.exceptions import ConfigurationError
from tsorganizer.logging_config import logger


def load_configuration(path: Union[str, Path]) -> Configuration:
    """
    Read and validate a configuration file.

    Raises:
        ConfigurationError: if the file cannot be read or is invalid
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"cannot read configuration: {e}", str(path)) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", str(path)) from e

    configuration = Configuration.from_dict(data, source=str(path))
    logger.debug(f"Loaded configuration from {path}")
    return configuration


def find_configuration_file(start_dir: Path) -> Optional[Path]:
    """Walk from start_dir up to the filesystem root looking for tsorganizer.json."""
    directory = start_dir.resolve()
    while True:
        candidate = directory / CONFIGURATION_FILE_NAME
        if candidate.is_file():
            return candidate
        if directory.parent == directory:
            return None
        directory = directory.parent


def discover_configuration(workspace_root: Path, explicit_path: Optional[Union[str, Path]] = None) -> Configuration:
    """
    Resolve the configuration for a workspace.

    Args:
        workspace_root: Directory the search starts from
        explicit_path: Optional configuration path from settings/CLI

    Returns:
        Configuration (defaults when nothing is found)
    """
    if explicit_path:
        explicit_path = Path(explicit_path)
        if explicit_path.is_file():
            return load_configuration(explicit_path)
        relative = workspace_root / explicit_path
        if relative.is_file():
            return load_configuration(relative)
        logger.warning(f"tsorganizer configuration file {explicit_path} not found")

    found = find_configuration_file(workspace_root)
    if found is not None:
        return load_configuration(found)

    logger.info("tsorganizer using default configuration")
    return default_configuration()


def write_default_configuration(directory: Path, force: bool = False) -> Path:
    """
    Write the default configuration to <directory>/tsorganizer.json.

    Raises:
        FileExistsError: if the file exists and force is False
    """
    path = directory / CONFIGURATION_FILE_NAME
    if path.exists() and not force:
        raise FileExistsError(str(path))
    path.write_text(json.dumps(default_configuration().to_dict(), indent=4) + "\n", encoding="utf-8")
    logger.info(f"Created default configuration at {path}")
    return path
