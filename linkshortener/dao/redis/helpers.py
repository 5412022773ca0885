import functools
from typing import TypeVar, Any
from collections.abc import Callable

import redis

from linkshortener.constants import Defaults
from linkshortener.dao.exceptions import DataStoreError


__all__ = ['create_connection_pool']

F = TypeVar('F', bound=Callable[..., Any])


def redis_address(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_errors[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle data store errors

    Connection failures, timeouts and protocol errors all surface as
    DataStoreError, chained to the original redis-py exception.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_errors
        ... def get_url(self, shortcode):
        ...     return self.redis.get(shortcode)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_address(self.redis)}.") from e
        except redis.exceptions.TimeoutError as e:
            raise DataStoreError(f'Timed out waiting for Redis at {redis_address(self.redis)}.') from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {redis_address(self.redis)} responded with an error.') from e

    return wrapper


def create_connection_pool(
    redis_host: str = 'localhost',
    redis_port: int = 6379,
    redis_db: int = Defaults.REDIS_DB,
    redis_username: str | None = None,
    redis_password: str | None = None,
    redis_socket_timeout: float = Defaults.REDIS_TIMEOUT,
    **kwargs,
) -> redis.ConnectionPool:
    """Create a Redis connection pool shared by all requests of the process

    Every pooled connection carries both a connect and a socket timeout, so
    no Redis call can block longer than `redis_socket_timeout` seconds.

    Args:
        redis_host (str): Hostname of the Redis server.
        redis_port (int): Redis server port.
        redis_db (int): Redis database index.
        redis_username (str | None): Username for Redis authentication (if required).
        redis_password (str | None): Password for Redis authentication (if required).
        redis_socket_timeout (float): Deadline in seconds for every Redis call.

    Returns:
        redis.ConnectionPool: pool handing out decoded (str) connections.
    """
    return redis.ConnectionPool(
        host=redis_host,
        port=int(redis_port),
        db=int(redis_db),
        username=redis_username,
        password=redis_password,
        socket_timeout=redis_socket_timeout,
        socket_connect_timeout=redis_socket_timeout,
        decode_responses=True,
    )
