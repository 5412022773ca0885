"""Redis mixin providing shared client initialization and connectivity checks.

Responsibilities:
    - Initialize Redis client (standalone or backed by a shared connection pool)
    - Healthcheck Redis client

Classes:
    - RedisClientMixin: Base mixin to inject Redis key management, client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLRedisDAO(prefix="myapp:prod")
        >>> dao.healthcheck()
        True
"""

import logging
from typing import Optional

import redis

from linkshortener.constants import Defaults
from linkshortener.dao.redis.redis_key_schema import RedisKeySchema
from linkshortener.dao.redis.helpers import redis_address
from linkshortener.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)


class RedisClientMixin:
    """Mixin Redis client setup and health check for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis):
            Active Redis client instance used by subclasses.

        keys (RedisKeySchema):
            Helper class for generating namespaced Redis key names.

    Methods:
        healthcheck(raise_error: bool = True) -> bool:
            Ping Redis to verify connectivity.
            Optionally raise a DataStoreError if unreachable.
    """

    def __init__(
        self,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = Defaults.REDIS_DB,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_socket_timeout: Optional[float] = Defaults.REDIS_TIMEOUT,
        redis_connection_pool: Optional[redis.ConnectionPool] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        """Initialize a Redis-based DAO for short URL management

        The option is given to either use an existing Redis client instance,
        borrow connections from a shared connection pool, or create a client
        via the appropriate Redis connection parameters. In that order.

        Connections are established lazily, on the first Redis command.

        Args:
            redis_host (Optional[str]):
                Hostname of the Redis server. Defaults to 'localhost'.

            redis_port (Optional[int]):
                Redis server port. Defaults to 6379.

            redis_db (Optional[int]):
                Redis database index. Defaults to 0.

            redis_decode_responses (Optional[bool]):
                If True, decodes Redis responses. Defaults to True.

            redis_username (Optional[str]):
                Username for Redis authentication (if required).

            redis_password (Optional[str]):
                Password for Redis authentication (if required).

            redis_socket_timeout (Optional[float]):
                Connect and socket timeout in seconds. Defaults to 2 seconds.

            redis_connection_pool (Optional[redis.ConnectionPool]):
                Shared connection pool owned by the caller.

            redis_client (Optional[redis.Redis]):
                Pre-initialized Redis client.

            prefix (Optional[str]):
                Namespace prefix for all Redis keys, e.g. 'app:env'.
        """
        if redis_client is None and redis_connection_pool is not None:
            redis_client = redis.Redis(connection_pool=redis_connection_pool)
        elif redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_socket_timeout,
                socket_connect_timeout=redis_socket_timeout,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

    def healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if Redis is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If Redis connection cannot be established and raise_error=True.

        Example:
            >>> self.healthcheck()
            True
        """
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            if raise_error:
                raise DataStoreError(f"Can't connect to Redis at {redis_address(self.redis)}. Check the provided configuration parameters.") from e
            logger.warning('Redis healthcheck failed.', extra={'redis': redis_address(self.redis), 'reason': str(e)})
            return False
        else:
            return True
