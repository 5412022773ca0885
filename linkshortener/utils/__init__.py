from linkshortener.utils.config import app_env, app_name, app_prefix, load_config, load_env_file
from linkshortener.utils.helpers import require_environment
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'load_env_file',
    'require_environment',
    'initialize_logging',
]
