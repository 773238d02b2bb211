"""User-level configuration files for commitcue.

Handles files stored in ~/.commitcue/:
- config.yaml or config.json: Option overrides
- credentials: API keys for the built-in model capabilities
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from commitcue.config import ConfigError


CONFIG_ENV_VAR = "COMMITCUE_CONFIG"

_CONFIG_DIR = Path.home() / ".commitcue"


def get_global_config_dir() -> Path:
    """Get the global commitcue configuration directory.

    Returns:
        Path to ~/.commitcue/
    """
    return _CONFIG_DIR


def get_credentials_file_path() -> Path:
    """Get path to credentials file.

    Returns:
        Path to ~/.commitcue/credentials
    """
    return get_global_config_dir() / "credentials"


def find_config_file() -> Optional[Path]:
    """Locate the user configuration file.

    Lookup order: $COMMITCUE_CONFIG, ~/.commitcue/config.yaml,
    ~/.commitcue/config.json.

    Returns:
        Path to the file, or None if no override file exists.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    for name in ("config.yaml", "config.json"):
        candidate = get_global_config_dir() / name
        if candidate.exists():
            return candidate

    return None


def load_user_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """Load the user's option overrides.

    JSON is parsed by the YAML loader, so either format is accepted.

    Args:
        config_file: Explicit file to read. Defaults to find_config_file().

    Returns:
        Dictionary of top-level overrides. Empty dict if no file exists.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping.
    """
    if config_file is None:
        config_file = find_config_file()
        if config_file is None:
            return {}

    if not config_file.exists():
        raise ConfigError(f"Config file not found: {config_file}")

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file {config_file} must contain a mapping of options, "
            f"got {type(config).__name__}"
        )
    return config


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.commitcue/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    credentials = {}

    try:
        with open(credentials_file, "r") as f:
            for line in f:
                line = line.strip()
                # Skip empty lines and comments
                if not line or line.startswith("#"):
                    continue

                # Parse KEY=value format
                if "=" in line:
                    key, value = line.split("=", 1)
                    credentials[key.strip()] = value.strip()

        return credentials
    except OSError as e:
        raise ConfigError(f"Failed to load credentials from {credentials_file}: {e}") from e


def get_credential(key_name: str) -> Optional[str]:
    """Get an API key from the credentials file.

    Args:
        key_name: Environment variable name (e.g., "ANTHROPIC_API_KEY")

    Returns:
        The API key if found, None otherwise.
    """
    return load_credentials().get(key_name)
