# shared_pages/config.py
# Description: Configuration management for the shared_pages application.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError
#
#######################################################################################################################
#
# Functions:

CONFIG_ENV_VAR = "SHARED_PAGES_CONFIG"

# --- Path to the application's configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "shared_pages" / "config.toml"

BASE_DATA_DIR = Path.home() / ".local" / "share" / "shared_pages"

CONFIG_TOML_CONTENT = """
# Configuration for shared_pages
# The user's name is never stored here; it only lives while the app runs.

[general]
title = "Provider Example"
initial_screen = "page_one"
theme = "shared-pages-light"

[form]
placeholder = "Enter anything you want"
required_message = "This is a required field"
label_prefix = "Your Data: "

[logging]
log_level = "INFO"
log_to_file = true
log_filename = "shared_pages.log"
"""

try:
    DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)
except tomllib.TOMLDecodeError as e:
    logger.critical(f"FATAL: Could not parse internal CONFIG_TOML_CONTENT: {e}")
    DEFAULT_CONFIG_FROM_TOML = {}


class GeneralSettings(BaseModel):
    title: str = "Provider Example"
    initial_screen: str = "page_one"
    theme: str = "shared-pages-light"


class FormSettings(BaseModel):
    placeholder: str = "Enter anything you want"
    required_message: str = Field(default="This is a required field", min_length=1)
    label_prefix: str = "Your Data: "


class LoggingSettings(BaseModel):
    log_level: str = "INFO"
    log_to_file: bool = True
    log_filename: str = "shared_pages.log"


class AppSettings(BaseModel):
    """Typed view over the merged TOML configuration."""
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    form: FormSettings = Field(default_factory=FormSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_config_path() -> Path:
    """Config path, honouring the SHARED_PAGES_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


# --- Helper for deep merging dictionaries ---
def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update into base."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


# --- Primary Configuration Loading Logic ---
_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_cli_config_and_ensure_existence(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads settings from the user's config.toml.
    If the file doesn't exist, it's created with default values from CONFIG_TOML_CONTENT.
    Uses programmatic defaults (from CONFIG_TOML_CONTENT) as a base.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    config_path = get_config_path()
    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if not config_path.exists():
        logger.info(f"Config file not found at {config_path}. Creating with default values.")
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(CONFIG_TOML_CONTENT)
            logger.info(f"Created default config file at {config_path}")
        except OSError as e:
            logger.error(f"Could not create default config file {config_path}: {e}. Using internal defaults.")
    else:
        logger.info(f"Attempting to load config from: {config_path}")
        try:
            with open(config_path, "rb") as f:
                user_config_from_file = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config_from_file)
            logger.info(f"Successfully loaded and merged config from {config_path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {config_path}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    logger.debug(f"Config loaded with top-level keys: {list(loaded_config.keys())}")
    return _CONFIG_CACHE


def save_setting_to_cli_config(section: str, key: str, value: Any) -> bool:
    """
    Saves a specific setting to the user's TOML configuration file.

    Args:
        section: The name of the TOML section (e.g., "general", "form").
        key: The key within the section to update.
        value: The new value for the key.

    Returns:
        True if the setting was saved successfully, False otherwise.
    """
    global _CONFIG_CACHE
    config_path = get_config_path()
    logger.info(f"Attempting to save setting: [{section}].{key} = {repr(value)}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create config directory {config_path.parent}: {e}")
        return False

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Corrupted config file at {config_path}. Cannot save. Please fix or delete it. Error: {e}")
            return False

    current_level = config_data
    try:
        for part in section.split('.'):
            current_level = current_level.setdefault(part, {})
        current_level[key] = value
    except (TypeError, AttributeError):
        logger.error(
            f"Configuration structure conflict. Could not set '{key}' in section '{section}' "
            f"because a part of the path is not a table."
        )
        return False

    try:
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
    except OSError as e:
        logger.error(f"Failed to write updated config to {config_path}: {e}")
        return False

    logger.success(f"Successfully saved setting to {config_path}")
    _CONFIG_CACHE = None
    load_cli_config_and_ensure_existence(force_reload=True)
    return True


# --- Setting Getters ---
def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def load_app_settings(force_reload: bool = False) -> AppSettings:
    """Validate the merged config into AppSettings, falling back to defaults."""
    config = load_cli_config_and_ensure_existence(force_reload=force_reload)
    try:
        return AppSettings.model_validate(config)
    except ValidationError as e:
        logger.error(f"Invalid configuration values, using defaults: {e}")
        return AppSettings()


def get_log_file_path(settings: Optional[AppSettings] = None) -> Path:
    settings = settings or load_app_settings()
    log_file_path = BASE_DATA_DIR / settings.logging.log_filename
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create log directory {log_file_path.parent}: {e}")
    return log_file_path

#
# End of config.py
#######################################################################################################################
