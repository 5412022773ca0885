import string
from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Short URL TTL duration (fixed link expiration policy) (5 minutes in seconds)
    FIVE_MINUTES = 300  # 60 * 5


# Short URL shortcode generation
SHORTCODE_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
SHORTCODE_LENGTH = 5
MAX_SHORTEN_ATTEMPTS = 5


class Defaults:
    """Default process configuration values."""

    HOST = '127.0.0.1'
    PORT = 3000
    REDIS_DB = 0
    REDIS_TIMEOUT = 2.0  # seconds, applied to both connect and socket operations
    GRACEFUL_SHUTDOWN_TIMEOUT = 10  # seconds
    ENV_FILE = '.env'  # relative to the working directory


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'LOG_LEVEL'
        LINK_TTL = 'LINK_TTL'

    class Server(StrEnum):
        HOST = 'HOST'
        PORT = 'PORT'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
        TIMEOUT = 'REDIS_TIMEOUT'


# Log event tags
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
GENERATION_EXHAUSTED = 'GENERATION_EXHAUSTED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
INVALID_REQUEST = 'INVALID_REQUEST'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'app:unknown_internal_server_error'
ENDPOINT_NOT_IMPLEMENTED = 'app:endpoint_not_implemented'
