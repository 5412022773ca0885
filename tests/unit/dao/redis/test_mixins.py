from unittest.mock import MagicMock, patch

import pytest
import redis

from linkshortener.dao.exceptions import DataStoreError
from linkshortener.dao.redis.mixins import RedisClientMixin


class TestRedisClientMixin:
    redis_client: redis.Redis
    unhealthy_redis_client: redis.Redis

    @pytest.fixture
    def unhealthy_redis_client(self, redis_client: redis.Redis) -> redis.Redis:
        redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection error')
        return redis_client

    def test_initialization_does_not_contact_redis(self, redis_client: redis.Redis):
        RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
        redis_client.ping.assert_not_called()

    def test_healthcheck_passes_with_healthy_redis(self, redis_client: redis.Redis):
        mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
        assert mixin.healthcheck() is True
        redis_client.ping.assert_called_once()

    def test_healthcheck_fails_with_unhealthy_redis(self, unhealthy_redis_client: redis.Redis):
        mixin = RedisClientMixin(redis_client=unhealthy_redis_client, prefix='testapp:test')
        with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
            mixin.healthcheck()

    def test_healthcheck_returns_false_without_raising(self, unhealthy_redis_client: redis.Redis):
        mixin = RedisClientMixin(redis_client=unhealthy_redis_client, prefix='testapp:test')
        assert mixin.healthcheck(raise_error=False) is False

    def test_client_borrows_connections_from_shared_pool(self):
        pool = MagicMock(spec=redis.ConnectionPool)
        with patch('linkshortener.dao.redis.mixins.redis.Redis') as redis_cls:
            mixin = RedisClientMixin(redis_connection_pool=pool)

        redis_cls.assert_called_once_with(connection_pool=pool)
        assert mixin.redis is redis_cls.return_value

    def test_client_created_from_connection_parameters(self):
        with patch('linkshortener.dao.redis.mixins.redis.Redis') as redis_cls:
            RedisClientMixin(redis_host='redis.test', redis_port='6380', redis_db='1', redis_password='secret', redis_socket_timeout=0.5)

        redis_cls.assert_called_once_with(
            host='redis.test',
            port=6380,
            db=1,
            decode_responses=True,
            username=None,
            password='secret',  # noqa: S106
            socket_timeout=0.5,
            socket_connect_timeout=0.5,
        )
