"""Process host for the link shortener service

Wires configuration, the shared Redis connection pool, the link service and
the HTTP gateway together, and runs the uvicorn server loop until SIGINT or
SIGTERM.

Shutdown sequence:
    - uvicorn stops accepting new connections on SIGINT/SIGTERM;
    - in-flight requests get up to 10 seconds to finish, after which they are abandoned;
    - the lifespan shutdown disconnects the Redis connection pool.

Usage:
    $ REDIS_HOST=localhost REDIS_PORT=6379 linkshortener
    $ REDIS_HOST=localhost REDIS_PORT=6379 python -m linkshortener
    $ linkshortener  # with REDIS_HOST and REDIS_PORT set in ./.env
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

import redis
import uvicorn
from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from linkshortener.api import create_app
from linkshortener.types import AppConfig
from linkshortener.service import LinkService
from linkshortener.constants import Defaults
from linkshortener.exceptions import ConfigurationError
from linkshortener.dao.redis import ShortURLRedisDAO, create_connection_pool
from linkshortener.utils import app_prefix, initialize_logging, load_config, load_env_file


logger = logging.getLogger(__name__)


def build_service(config: AppConfig, connection_pool: redis.ConnectionPool) -> LinkService:
    dao = ShortURLRedisDAO(redis_connection_pool=connection_pool, prefix=app_prefix())
    return LinkService(dao=dao, ttl=config['link']['ttl'])


def build_lifespan(service: LinkService, connection_pool: redis.ConnectionPool) -> Callable[[FastAPI], AbstractAsyncContextManager[Any]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # The service still starts with an unreachable store; requests then fail with 503
        if await run_in_threadpool(service.dao.healthcheck, False):
            logger.info('Connected to Redis.')
        else:
            logger.warning('Redis is unreachable at startup. Requests will fail until it becomes available.')

        yield

        logger.info('Closing Redis connection pool.')
        connection_pool.disconnect()

    return lifespan


def main() -> int:
    """Run the link shortener until a termination signal is received

    Returns:
        int: process exit code, 0 on clean shutdown.
    """
    # .env is loaded first so it can also set LOG_LEVEL
    load_env_file()
    initialize_logging()

    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error('Invalid configuration. Exiting.', extra={'reason': str(e), 'errorCode': e.error_code})
        return 1

    redis_config = {f'redis_{k}': v for k, v in config['redis'].items()}
    connection_pool = create_connection_pool(**redis_config)
    service = build_service(config, connection_pool)
    app = create_app(service, lifespan=build_lifespan(service, connection_pool))

    # log_config=None keeps uvicorn's loggers on the application's JSON handler
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config['server']['host'],
            port=config['server']['port'],
            log_config=None,
            timeout_graceful_shutdown=Defaults.GRACEFUL_SHUTDOWN_TIMEOUT,
        )
    )

    logger.info('Starting server.', extra={'host': config['server']['host'], 'port': config['server']['port']})
    server.run()
    logger.info('Server stopped.')
    return 0
