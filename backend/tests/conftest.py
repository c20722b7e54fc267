import asyncio
import fnmatch

import pytest
from fastapi.testclient import TestClient

from codecraft.api.dependencies import get_executor, get_rate_limiter
from codecraft.main import app
from codecraft.models.responses import ExecutionResult
from codecraft.services.project_store import ProjectStore
from codecraft.services.rate_limiter import TokenBucketRateLimiter


class InMemoryRedis:
    """The subset of the redis.asyncio client used by ProjectStore."""

    def __init__(self):
        self.values: dict[str, str] = {}
        self.sorted_sets: dict[str, dict[str, float]] = {}

    async def ping(self):
        return True

    async def get(self, key):
        return self.values.get(key)

    async def set(self, key, value):
        self.values[key] = value
        return True

    async def mget(self, keys):
        return [self.values.get(key) for key in keys]

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            removed += int(self.values.pop(key, None) is not None)
            removed += int(self.sorted_sets.pop(key, None) is not None)
        return removed

    async def zadd(self, name, mapping):
        self.sorted_sets.setdefault(name, {}).update(mapping)
        return len(mapping)

    async def zrem(self, name, *members):
        zset = self.sorted_sets.get(name, {})
        return sum(zset.pop(m, None) is not None for m in members)

    def _ordered(self, name, reverse):
        zset = self.sorted_sets.get(name, {})
        return [m for m, _ in sorted(zset.items(), key=lambda item: (item[1], item[0]), reverse=reverse)]

    @staticmethod
    def _slice(members, start, end):
        return members[start:] if end == -1 else members[start:end + 1]

    async def zrange(self, name, start, end):
        return self._slice(self._ordered(name, reverse=False), start, end)

    async def zrevrange(self, name, start, end):
        return self._slice(self._ordered(name, reverse=True), start, end)

    def keys_matching(self, pattern):
        return [k for k in [*self.values, *self.sorted_sets] if fnmatch.fnmatch(k, pattern)]


class RecordingExecutor:
    """Stands in for the remote executor services."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def supports(self, language):
        return language in ("python", "sql", "javascript")

    def configured_languages(self):
        return ["python"]

    async def execute(self, language, code):
        self.calls.append((language, code))
        return ExecutionResult(success=True, output="ok\n")


@pytest.fixture
def redis_client():
    return InMemoryRedis()


@pytest.fixture
def store(redis_client):
    return ProjectStore(redis_client)


@pytest.fixture
def run():
    return asyncio.run


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def client(store, redis_client, executor):
    app.state.redis = redis_client
    app.state.project_store = store
    app.dependency_overrides[get_executor] = lambda: executor
    limiter = TokenBucketRateLimiter(max_tokens=2, refill_seconds=3600)
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.redis = None
    app.state.project_store = None
