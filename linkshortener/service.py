"""Link service: the business logic behind shortening and resolving URLs

The service orchestrates shortcode generation and the data store:

    shorten(target_url):
    - Step 1: Reject empty target URLs (no data store round trip)
    - Step 2: Generate a random shortcode
    - Step 3: Insert the mapping, if the shortcode is still free (create-if-absent)
    - Step 4: On collision, go back to Step 2 (up to `max_attempts` times)

    resolve(shortcode):
    - A single, live data store lookup. Nothing is cached in process.

Every DAO failure is translated into exactly one service error, so callers
never need to know about the data store. Collisions are absorbed here and
never surface to the caller.

Example:
    >>> service = LinkService(dao=ShortURLRedisDAO(...))
    >>> short_url = service.shorten('https://example.com')
    >>> short_url.shortcode
    'q3ZbK'
    >>> service.resolve('q3ZbK').target
    'https://example.com'
"""

import logging
from collections.abc import Callable

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError
from linkshortener.exceptions import GenerationExhaustedError, InvalidInputError, LinkNotFoundError, StoreUnavailableError
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.constants import (
    TTL,
    MAX_SHORTEN_ATTEMPTS,
    SHORTEN_SUCCESS,
    SHORTCODE_COLLISION,
    GENERATION_EXHAUSTED,
    STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


class LinkService:
    """Shorten and resolve URLs against a ShortURL data store

    Attributes:
        dao (ShortURLBaseDAO):
            Data store holding the shortcode -> target URL mappings.
        ttl (int | None):
            Lifetime in seconds of every new mapping. None disables expiration.
        max_attempts (int):
            Maximum number of shortcodes tried per `shorten()` call.
        generate (Callable[[], str]):
            Shortcode generator.
    """

    def __init__(
        self,
        dao: ShortURLBaseDAO,
        ttl: int | None = TTL.FIVE_MINUTES,
        max_attempts: int = MAX_SHORTEN_ATTEMPTS,
        generate: Callable[[], str] = generate_shortcode,
    ):
        if ttl is not None and ttl <= 0:
            raise ValueError(f'TTL must be a positive integer or None (given value: {ttl}).')
        if max_attempts <= 0:
            raise ValueError(f'Max attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.ttl = ttl
        self.max_attempts = max_attempts
        self.generate = generate

    def shorten(self, target_url: str) -> ShortURLModel:
        """Map `target_url` to a new, unique shortcode

        Args:
            target_url (str):
                URL to shorten. Not validated beyond being a non-empty string.

        Returns:
            ShortURLModel: the newly created mapping.

        Raises:
            InvalidInputError:
                If `target_url` is not a non-empty string.
            StoreUnavailableError:
                If the data store fails. Never retried.
            GenerationExhaustedError:
                If every attempted shortcode was already taken.
        """
        if not isinstance(target_url, str) or not target_url.strip():
            raise InvalidInputError('Target URL must be a non-empty string.')

        for attempt in range(1, self.max_attempts + 1):
            short_url = ShortURLModel(target=target_url, shortcode=self.generate())
            try:
                self.dao.insert(short_url, ttl=self.ttl)
            except ShortURLAlreadyExistsError:
                logger.info(
                    'Shortcode already taken. Retrying with a new one.',
                    extra={'shortcode': short_url.shortcode, 'attempt': attempt, 'event': SHORTCODE_COLLISION},
                )
                continue
            except DataStoreError as e:
                logger.error(
                    'Failed to store short URL.',
                    extra={'shortcode': short_url.shortcode, 'reason': str(e.__cause__ or e), 'event': STORE_UNAVAILABLE},
                )
                raise StoreUnavailableError('Data store is unavailable.') from e

            logger.info(
                'Shortened target URL.',
                extra={'shortcode': short_url.shortcode, 'attempt': attempt, 'ttl': self.ttl, 'event': SHORTEN_SUCCESS},
            )
            return short_url

        # Practically unreachable with a 62**5 keyspace, unless the store is close to full
        logger.error(
            'Exhausted shortcode generation attempts.',
            extra={'attempts': self.max_attempts, 'event': GENERATION_EXHAUSTED},
        )
        raise GenerationExhaustedError(f'No free shortcode found after {self.max_attempts} attempts.')

    def resolve(self, shortcode: str) -> ShortURLModel:
        """Look up the live mapping for `shortcode`

        Raises:
            LinkNotFoundError:
                If no live mapping exists (never created or already expired).
            StoreUnavailableError:
                If the data store fails.
        """
        if not isinstance(shortcode, str) or not shortcode:
            raise LinkNotFoundError('Shortcode must be a non-empty string.')

        try:
            return self.dao.get(shortcode)
        except ShortURLNotFoundError as e:
            raise LinkNotFoundError(f"Short URL with code '{shortcode}' not found.") from e
        except DataStoreError as e:
            logger.error(
                'Failed to look up short URL.',
                extra={'shortcode': shortcode, 'reason': str(e.__cause__ or e), 'event': STORE_UNAVAILABLE},
            )
            raise StoreUnavailableError('Data store is unavailable.') from e
