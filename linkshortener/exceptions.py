class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'


class ServiceError(LinkShortenerError):
    """Base exception for all link service errors."""

    error_code = 'service:service_error'


class InvalidInputError(ServiceError):
    """Raised when a request carries bad or missing data."""

    error_code = 'service:invalid_input_error'


class LinkNotFoundError(ServiceError):
    """Raised when no live short URL exists for a shortcode."""

    error_code = 'service:link_not_found_error'


class StoreUnavailableError(ServiceError):
    """Raised when the data store can't be reached or misbehaves."""

    error_code = 'service:store_unavailable_error'


class GenerationExhaustedError(ServiceError):
    """Raised when no free shortcode was found within the attempt limit."""

    error_code = 'service:generation_exhausted_error'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
