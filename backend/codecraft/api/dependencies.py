"""Shared FastAPI dependencies — injected ports for storage, execution and rate limiting."""

from fastapi import HTTPException, Request

from codecraft.services.executor_client import ExecutorClient, executor_client
from codecraft.services.project_store import ProjectStore
from codecraft.services.rate_limiter import TokenBucketRateLimiter, rate_limiter


def get_project_store(request: Request) -> ProjectStore:
    """Store created at startup; absent when Redis could not be reached."""
    store = getattr(request.app.state, "project_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Project storage is unavailable")
    return store


def get_executor() -> ExecutorClient:
    return executor_client


def get_rate_limiter() -> TokenBucketRateLimiter:
    return rate_limiter
