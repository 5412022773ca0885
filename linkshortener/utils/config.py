"""Utility functions for application configuration management.

The service is configured through environment variables, optionally seeded
from a `.env` file in the working directory (see `load_env_file`). The
configuration is loaded once by the process host and split into sections:

    {
        "redis": { "host": ..., "port": ..., "db": ..., "username": ...,
                   "password": ..., "socket_timeout": ... },
        "server": { "host": ..., "port": ... },
        "link": { "ttl": ... }
    }

The `redis` section is handed to the data store client as-is (prefixed with
`redis_`), so nothing outside the DAO layer interprets connection parameters.

Typical usage inside the process host:
    >>> from linkshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['redis']['host']
    'localhost'
"""

import os
import logging

from dotenv import load_dotenv

from linkshortener.types import AppConfig
from linkshortener.constants import ENV, TTL, Defaults
from linkshortener.exceptions import BadConfigurationError
from linkshortener.utils.helpers import require_environment


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'linkshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'linkshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def load_env_file(path: str | os.PathLike = Defaults.ENV_FILE) -> bool:
    """Load variables from a .env file into the process environment.

    Variables already set in the environment take precedence over the file.
    A missing file is not an error.

    Returns:
        bool: True if at least one variable was loaded from the file.

    Example:
        >>> # .env: REDIS_HOST=localhost
        >>> load_env_file()
        True
        >>> os.environ['REDIS_HOST']
        'localhost'
    """
    loaded = load_dotenv(path, override=False)
    logger.debug('Loaded environment file.' if loaded else 'No environment file loaded.', extra={'path': str(path)})
    return loaded


def _parse_number[N: (int, float)](name: str, default: N | None, cast: type[N]) -> N | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be of type {cast.__name__} (given value: {raw!r}).") from e


def link_ttl() -> int | None:
    """Return the TTL (in seconds) attached to every new short URL.

    `LINK_TTL=none` disables expiration altogether.

    Raises:
        BadConfigurationError:
            If the value is neither 'none' nor a positive integer.
    """
    raw = os.environ.get(ENV.App.LINK_TTL, '').strip().lower()
    if raw == 'none':
        return None

    ttl = _parse_number(ENV.App.LINK_TTL, TTL.FIVE_MINUTES, int)
    if ttl <= 0:
        raise BadConfigurationError(f"Environment variable '{ENV.App.LINK_TTL}' must be a positive integer or 'none' (given value: {ttl}).")
    return ttl


@require_environment(ENV.Redis.HOST, ENV.Redis.PORT)
def load_config() -> AppConfig:
    """Load the service configuration from the environment.

    Environment variables required:
        REDIS_HOST   – Redis server hostname
        REDIS_PORT   – Redis server port

    Returns:
        dict: configuration split into 'redis', 'server' and 'link' sections.

    Raises:
        MissingEnvironmentVariableError:
            If a required environment variable is missing.
        BadConfigurationError:
            If a numeric variable can't be parsed.
    """
    timeout = _parse_number(ENV.Redis.TIMEOUT, Defaults.REDIS_TIMEOUT, float)
    config = {
        'redis': {
            'host': os.environ[ENV.Redis.HOST],
            'port': _parse_number(ENV.Redis.PORT, None, int),
            'db': _parse_number(ENV.Redis.DB, Defaults.REDIS_DB, int),
            'username': os.environ.get(ENV.Redis.USERNAME) or None,
            'password': os.environ.get(ENV.Redis.PASSWORD) or None,
            'socket_timeout': timeout,
        },
        'server': {
            'host': os.environ.get(ENV.Server.HOST) or Defaults.HOST,
            'port': _parse_number(ENV.Server.PORT, Defaults.PORT, int),
        },
        'link': {
            'ttl': link_ttl(),
        },
    }
    logger.debug(
        'Loaded configuration from environment.',
        extra={'redisHost': config['redis']['host'], 'redisPort': config['redis']['port'], 'linkTtl': config['link']['ttl']},
    )
    return config
