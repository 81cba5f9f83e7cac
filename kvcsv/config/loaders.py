# kvcsv/config/loaders.py

"""
Functions for loading and merging the kvcsv tool configuration from TOML
files and environment variables.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import toml
from pydantic import ValidationError

from ..core.coercion import coerce_value
from ..errors import ConfigError
from .models import KvcsvConfig

logger = logging.getLogger(__name__)

# --- Constants ---
ENV_PREFIX = "KVCSV_"
USER_CONFIG_DIR = Path("~/.config/kvcsv").expanduser()
USER_CONFIG_FILE = USER_CONFIG_DIR / "kvcsv.toml"
PROJECT_CONFIG_FILE = Path("./kvcsv.toml")

# --- Helper Functions ---

def _load_toml_file(filepath: Path) -> Dict[str, Any]:
    """Loads a TOML file if it exists, returns empty dict otherwise."""
    if not filepath.is_file():
        return {}
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return toml.load(f)
    except toml.TomlDecodeError as e:
        raise ConfigError(f"Error decoding TOML file '{filepath}': {e}") from e


def _deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges 'update' dict into 'base' dict."""
    merged = base.copy()
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _field_annotation(section: str, key: str) -> Any:
    """Declared type of KvcsvConfig.<section>.<key>, or None if there is no such field."""
    section_field = KvcsvConfig.model_fields.get(section)
    if section_field is None:
        return None
    field = getattr(section_field.annotation, "model_fields", {}).get(key)
    return field.annotation if field is not None else None


def _get_config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Reads configuration settings from environment variables.

    KVCSV_<SECTION>_<KEY> maps to ``{section: {key: value}}``; the section is
    the first underscore-separated word, the rest is the key. Values for
    boolean fields go through the same coercion as CSV cells; all other
    values are passed to the model as plain strings.
    """
    environ = os.environ if environ is None else environ
    env_config: Dict[str, Any] = {}
    for env_var, value in environ.items():
        if not env_var.startswith(ENV_PREFIX):
            continue
        section, _, key = env_var[len(ENV_PREFIX):].lower().partition('_')
        if not section or not key:
            logger.debug(f"Ignoring environment variable without a section/key: {env_var}")
            continue
        if _field_annotation(section, key) is bool:
            value = coerce_value(value)
        env_config.setdefault(section, {})[key] = value
    return env_config

# --- Main Loading Function ---

def load_configuration(
    config_files: Optional[List[Path]] = None,
    disable_project_config: bool = False,
    disable_user_config: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> KvcsvConfig:
    """
    Loads kvcsv configuration from defaults, files, and environment variables.

    Precedence (highest first):
    1. Environment Variables (KVCSV_*)
    2. User Config File (~/.config/kvcsv/kvcsv.toml)
    3. Project Config File (./kvcsv.toml)
    4. Explicitly passed config files (later files win)
    5. Internal Defaults (from Pydantic models)

    Args:
        config_files: Additional config file paths to load.
        disable_project_config: If True, ignores ./kvcsv.toml.
        disable_user_config: If True, ignores ~/.config/kvcsv/kvcsv.toml.
        environ: Environment mapping to read instead of os.environ.

    Returns:
        A validated KvcsvConfig object. Falls back to defaults (with an error
        logged) if the merged settings fail validation.

    Raises:
        ConfigError: If a config file exists but is not valid TOML.
    """
    merged_config_dict: Dict[str, Any] = {}

    for file_path in config_files or []:
        file_cfg = _load_toml_file(Path(file_path))
        if file_cfg:
            logger.debug(f"Loaded configuration from {file_path}")
            merged_config_dict = _deep_merge_dicts(merged_config_dict, file_cfg)

    if not disable_project_config:
        logger.debug(f"Attempting to load project config: {PROJECT_CONFIG_FILE}")
        project_cfg = _load_toml_file(PROJECT_CONFIG_FILE)
        if project_cfg:
            logger.info(f"Loaded project configuration from {PROJECT_CONFIG_FILE.resolve()}")
            merged_config_dict = _deep_merge_dicts(merged_config_dict, project_cfg)

    if not disable_user_config:
        logger.debug(f"Attempting to load user config: {USER_CONFIG_FILE}")
        user_cfg = _load_toml_file(USER_CONFIG_FILE)
        if user_cfg:
            logger.info(f"Loaded user configuration from {USER_CONFIG_FILE}")
            merged_config_dict = _deep_merge_dicts(merged_config_dict, user_cfg)

    env_cfg = _get_config_from_env(environ)
    if env_cfg:
        logger.debug(f"Applying environment variable configuration: {env_cfg}")
        merged_config_dict = _deep_merge_dicts(merged_config_dict, env_cfg)

    try:
        final_config = KvcsvConfig(**merged_config_dict)
        logger.debug("Configuration loaded and validated successfully.")
        return final_config
    except ValidationError as e:
        logger.error(f"Configuration validation failed:\n{e}")
        logger.warning("Falling back to default configuration due to validation errors.")
        return KvcsvConfig()
