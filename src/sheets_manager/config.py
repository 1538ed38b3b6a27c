"""Credential configuration.

The service account key is looked up in this order:
    $GOOGLE_CREDENTIALS_PATH      - explicit path to the JSON key
    ./credentials.json            - default file in the working directory

A .env file in the working directory is loaded on import, so the
environment variable can also be set there. Variables already present
in the environment take precedence over the file.
"""

import os
from pathlib import Path

CREDENTIALS_ENV_VAR = "GOOGLE_CREDENTIALS_PATH"
DEFAULT_CREDENTIALS_FILE = "credentials.json"

ENV_FILE = Path.cwd() / ".env"


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from a file.

    Args:
        env_path: Path to .env file.

    Returns:
        Dictionary of loaded variables.
    """
    loaded = {}
    if not env_path.exists():
        return loaded

    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip()

            # Remove surrounding quotes
            if (value.startswith('"') and value.endswith('"')) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]

            if key and key not in os.environ:
                os.environ[key] = value
                loaded[key] = value

    return loaded


def get_credentials_path() -> Path:
    """Resolve the service account key path.

    Returns:
        Path from GOOGLE_CREDENTIALS_PATH, or credentials.json in the
        current working directory.
    """
    override = os.environ.get(CREDENTIALS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.cwd() / DEFAULT_CREDENTIALS_FILE


def get_credential_status() -> dict:
    """Get status of the configured credentials.

    Returns:
        Dictionary with credential status.
    """
    path = get_credentials_path()
    return {
        "env_file": ENV_FILE.exists(),
        "env_override": bool(os.environ.get(CREDENTIALS_ENV_VAR)),
        "credentials_path": str(path),
        "credentials_exist": path.exists(),
    }


# Auto-load .env from the working directory on import
_loaded = _load_env_file(ENV_FILE)
