"""Shared fixtures for the link shortener test suite.

Fixtures:
    - `fake_redis`: in-memory stand-in for the Redis commands used by ShortURLRedisDAO.
    - `dao`: ShortURLRedisDAO wired to `fake_redis`.
    - `target_url`: sample target URL.
"""

import threading
from datetime import datetime, timedelta, UTC
from unittest.mock import MagicMock

import pytest
import redis

from linkshortener.dao.redis import ShortURLRedisDAO


class FakeRedis:
    """Thread-safe, in-memory double of the Redis commands the DAO issues.

    Supports: PING, SET (NX, EX), GET, TTL and transactional pipelines.
    Expiry is evaluated against `datetime.now(UTC)`, so `freeze_time` drives it.
    """

    def __init__(self):
        self._data: dict[str, tuple[str, datetime | None]] = {}
        self._lock = threading.Lock()
        self.connection_pool = MagicMock(
            spec=redis.ConnectionPool,
            connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
        )

    def _live(self, key: str) -> tuple[str, datetime | None] | None:
        entry = self._data.get(key)
        if entry is not None and entry[1] is not None and entry[1] <= datetime.now(UTC):
            del self._data[key]
            return None
        return entry

    def ping(self) -> bool:
        return True

    def set(self, name: str, value: str, ex: int | None = None, nx: bool = False) -> bool | None:
        with self._lock:
            if nx and self._live(name) is not None:
                return None
            expires_at = datetime.now(UTC) + timedelta(seconds=ex) if ex is not None else None
            self._data[name] = (value, expires_at)
            return True

    def get(self, name: str) -> str | None:
        with self._lock:
            entry = self._live(name)
            return None if entry is None else entry[0]

    def ttl(self, name: str) -> int:
        with self._lock:
            entry = self._live(name)
            if entry is None:
                return -2
            if entry[1] is None:
                return -1
            return int((entry[1] - datetime.now(UTC)).total_seconds())

    def keys(self) -> list[str]:
        with self._lock:
            return [key for key in list(self._data) if self._live(key) is not None]

    def pipeline(self, transaction: bool = True) -> 'FakePipeline':
        return FakePipeline(self)


class FakePipeline:
    def __init__(self, client: FakeRedis):
        self._client = client
        self._commands = []

    def __enter__(self) -> 'FakePipeline':
        return self

    def __exit__(self, *exc_info) -> None:
        self._commands = []

    def get(self, name: str) -> 'FakePipeline':
        self._commands.append((self._client.get, name))
        return self

    def ttl(self, name: str) -> 'FakePipeline':
        self._commands.append((self._client.ttl, name))
        return self

    def execute(self) -> list:
        return [command(name) for command, name in self._commands]


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def dao(fake_redis: FakeRedis) -> ShortURLRedisDAO:
    return ShortURLRedisDAO(redis_client=fake_redis)


@pytest.fixture
def target_url() -> str:
    return 'https://example.com/blog/chuck-norris-is-awesome'
