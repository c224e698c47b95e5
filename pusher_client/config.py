"""
Builds client settings from a configuration mapping or the environment.
"""

import os
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import ConfigurationError
from .models import Credentials

CONFIG_SECTION = "pusher"
CREDENTIAL_KEYS = ('app_id', 'key', 'secret')
OPTIONAL_KEYS = ('base_url', 'timeout')

ENV_VARS = {
    'app_id': "PUSHER_APP_ID",
    'key': "PUSHER_KEY",
    'secret': "PUSHER_SECRET",
    'base_url': "PUSHER_BASE_URL",
    'timeout': "PUSHER_TIMEOUT",
}


def _parse_timeout(value: Any) -> float:
    # INI and env sources hand over strings
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"timeout must be a number, got {value!r}")


def load_config(config: Mapping[str, Any]) -> Tuple[Credentials, Dict[str, Any]]:
    """
    Read the ``pusher`` section of an application config.

    Returns:
        Tuple of (credentials, client options)

    Raises:
        ConfigurationError: If the section or a credential key is missing,
            or the timeout is not a number
    """
    section = config.get(CONFIG_SECTION) if config else None
    if section is None:
        raise ConfigurationError(
            f'Configuration section "{CONFIG_SECTION}" was not found'
        )

    missing = [key for key in CREDENTIAL_KEYS if key not in section]
    if missing:
        raise ConfigurationError(
            f'Configuration section "{CONFIG_SECTION}" is missing: {", ".join(missing)}'
        )

    credentials = Credentials(*(str(section[key]) for key in CREDENTIAL_KEYS))
    options = {key: section[key] for key in OPTIONAL_KEYS if key in section}
    if 'timeout' in options:
        options['timeout'] = _parse_timeout(options['timeout'])
    return credentials, options


def load_env(environ: Optional[Mapping[str, str]] = None) -> Tuple[Credentials, Dict[str, Any]]:
    """Same as ``load_config`` but reads ``PUSHER_*`` environment variables."""
    environ = os.environ if environ is None else environ

    section: Dict[str, Any] = {
        key: environ[name] for key, name in ENV_VARS.items() if name in environ
    }
    missing = [ENV_VARS[key] for key in CREDENTIAL_KEYS if key not in section]
    if missing:
        raise ConfigurationError(f"Missing env vars: {', '.join(missing)}")

    return load_config({CONFIG_SECTION: section})
