import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from sui_dev_tools.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'project': {'root_path': '.'},
    'toolchain': {
        'sui_command': 'sui',
        'build_args': ['move', 'build', '--force'],
        'test_args': ['move', 'test'],
    },
    'formatter': {'command': 'movefmt'},
    'logging': {
        'level': 'DEBUG',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'log_file': None,
    },
    'ui': {'enhanced_logging': True},
}

# Environment variable -> config key path
ENV_OVERRIDES = {
    'PROJECT_FOLDER': ['project', 'root_path'],
    'MOVEFMT_CMD': ['formatter', 'command'],
    'SUI_CMD': ['toolchain', 'sui_command'],
    'LOG_LEVEL': ['logging', 'level'],
}


def load_and_resolve_config(
    project_root: Path,
    config_path: str = "config/application.yml",
    environ: Optional[Mapping[str, str]] = None,
) -> dict:
    """Loads YAML configuration, applies environment overrides and resolves relative paths."""
    absolute_config_path = project_root / config_path
    environ = os.environ if environ is None else environ
    logger.debug(f"Attempting to load configuration from: {absolute_config_path}")

    config_data = copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(absolute_config_path, 'r', encoding='utf-8') as f:
            file_data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning(f"Configuration file not found at {absolute_config_path}, using defaults")
        file_data = {}
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Invalid YAML in {absolute_config_path}: {err}") from err

    if file_data is None:
        file_data = {}
    if not isinstance(file_data, dict):
        raise ConfigurationError(f"Configuration in {absolute_config_path} must be a mapping")
    _deep_update(config_data, file_data)

    for env_name, keys in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            set_value(config_data, keys, value)
            logger.debug(f"Config '{'.'.join(keys)}' overridden by ${env_name}")

    for section in DEFAULT_CONFIG:
        if not isinstance(config_data.get(section), dict):
            raise ConfigurationError(f"Config section '{section}' must be a mapping")
    if not str(config_data['formatter'].get('command') or '').split():
        raise ConfigurationError("formatter.command must not be empty")

    # Resolve paths relative to project_root
    resolve_path(config_data, project_root, ['project', 'root_path'], '.')
    resolve_path(config_data, project_root, ['logging', 'log_file'])  # Optional

    logger.info(f"Configuration loaded. Project folder: {config_data['project']['root_path']}")
    return config_data


def _deep_update(target: dict, source: dict) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


def set_value(config: dict, keys: list, value: Any) -> None:
    """Set a nested config value, creating intermediate sections as needed."""
    current = config
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def resolve_path(config: dict, root: Path, keys: list, default: str | None = None):
    """Helper to get, resolve, and update a path in the config dict."""
    current = config
    for key in keys[:-1]:
        current = current.get(key, {})
        if not isinstance(current, dict):
            raise ConfigurationError(f"Config section {'->'.join(keys[:-1])} must be a mapping")

    last_key = keys[-1]
    relative_path = current.get(last_key) or default

    if relative_path is not None:
        resolved_path = str((root / os.path.expanduser(relative_path)).resolve())
        current[last_key] = resolved_path
        logger.debug(f"Resolved config path '{'.'.join(keys)}': {relative_path} -> {resolved_path}")


def ensure_app_directories(config: dict):
    """Creates the log file directory if file logging is configured."""
    log_file = config.get('logging', {}).get('log_file')
    if log_file:
        target_dir = Path(log_file).parent
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Ensured directory exists: {target_dir}")
        except OSError as e:
            logger.error(f"Failed to create directory {target_dir}: {e}", exc_info=True)
