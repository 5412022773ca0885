"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO for
create-if-absent insertion and retrieval of ShortURLModel instances.

Responsibilities:
    - Insert short URLs into Redis without ever overwriting an existing shortcode;
    - Attach the expiration policy (TTL) to every mapping at write time;
    - Retrieve short URLs and their remaining lifetime from Redis;
    - Translate redis-py errors into DAO exceptions.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from linkshortener.models import ShortURLModel
    >>> from linkshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="app:dev")

    >>> short_url = ShortURLModel(
    ...     target="https://example.com/page",
    ...     shortcode="abc12"
    ... )
    >>> dao.insert(short_url, ttl=300)
    <ShortURLRedisDAO>

    >>> retrieved = dao.get("abc12")
    >>> retrieved.target
    'https://example.com/page'
    >>> retrieved.expires_at
    <datetime>
"""

from datetime import datetime, timedelta, UTC

from beartype import beartype

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.redis.mixins import RedisClientMixin
from linkshortener.dao.redis.helpers import handle_redis_errors
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using Redis as a data store.
    Each mapping is a single string key (the shortcode) holding the target URL.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_url: ShortURLModel, ttl: int | None = None, **kwargs) -> ShortURLRedisDAO:
            Insert a short URL mapping only if its shortcode is free.
            Raises ShortURLAlreadyExistsError when a URL with the same shortcode exists.
            Raises DataStoreError on any Redis failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping and its expiry by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on any Redis failure.

    Example:
        >>> dao = ShortURLRedisDAO(redis_host="localhost", prefix="shortener:test")
        >>> short_url = ShortURLModel(target="https://example.com", shortcode="abc12")
        >>> dao.insert(short_url, ttl=300)
        <ShortURLRedisDAO>
        >>> dao.get("abc12").target
        'https://example.com'
    """

    @handle_redis_errors
    @beartype
    def insert(self, short_url: ShortURLModel, ttl: int | None = None, **kwargs) -> 'ShortURLRedisDAO':
        """Insert a short URL mapping into Redis, if absent

        The insertion is a single `SET <key> <target> NX [EX <ttl>]` command.
        Redis applies it atomically, so two concurrent inserts of the same
        shortcode can never both succeed, and an existing mapping is never
        overwritten.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            ttl (int | None):
                Seconds until Redis evicts the mapping. None disables expiration.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
            DataStoreError:
                If a Redis connection issue occurs.

        Example:
            >>> short_url = ShortURLModel(
            ...     target='https://example.com',
            ...     shortcode='abc12'
            ... )
            >>> dao.insert(short_url, ttl=300)
            <ShortURLRedisDAO>
        """
        link_url_key = self.keys.link_url_key(short_url.shortcode)

        # NOTE: SET NX replies with None (instead of True) when the key already exists
        created = self.redis.set(link_url_key, short_url.target, nx=True, ex=ttl)
        if not created:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
        return self

    @handle_redis_errors
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Fetches the original URL and its remaining TTL using a single Redis
        transaction (so both values describe the same key state). Calculates
        the expiry datetime from the remaining TTL value.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance if found.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis (or already expired).
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('abc12')
            ShortURLModel(target='https://example.com', shortcode='abc12', ...)
        """
        link_url_key = self.keys.link_url_key(shortcode)

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.get(link_url_key)
            pipe.ttl(link_url_key)
            original_url, ttl = pipe.execute()

        if original_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        # TTL replies -1 for keys without expiration
        expires_at = datetime.now(UTC) + timedelta(seconds=ttl) if ttl is not None and ttl >= 0 else None
        return ShortURLModel(
            target=original_url,
            shortcode=shortcode,
            expires_at=expires_at,
        )
