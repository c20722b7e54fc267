"""Execution API — hand code to the remote executor for its language."""

from fastapi import APIRouter, Depends, HTTPException, Request

import structlog

from codecraft.api.dependencies import get_executor, get_rate_limiter
from codecraft.api.validation import check_code_length
from codecraft.models.requests import ExecuteRequest
from codecraft.models.responses import ExecutionResult
from codecraft.services.executor_client import ExecutorClient
from codecraft.services.rate_limiter import TokenBucketRateLimiter

logger = structlog.get_logger()

router = APIRouter()


@router.post("/execute/{language}", response_model=ExecutionResult, response_model_exclude_none=True)
async def execute_code(
    language: str,
    request_body: ExecuteRequest,
    request: Request,
    executor: ExecutorClient = Depends(get_executor),
    limiter: TokenBucketRateLimiter = Depends(get_rate_limiter),
):
    """Run code on the executor service. The validator is not consulted."""
    if not executor.supports(language):
        raise HTTPException(status_code=404, detail=f"No executor for language '{language}'")

    if not request_body.code.strip():
        raise HTTPException(status_code=400, detail="No code provided")

    check_code_length(request_body.code)

    client_ip = request.client.host if request.client else "unknown"
    if not limiter.allow_request(client_ip, language):
        raise HTTPException(
            status_code=429,
            detail={
                "error": "Rate limit exceeded",
                "message": f"Maximum {limiter.max_tokens} {language} executions per {limiter.refill_seconds}s.",
                "retry_after_seconds": int(limiter.retry_after(client_ip, language)) + 1,
            },
        )

    logger.info("execution_requested", language=language, code_length=len(request_body.code), client_ip=client_ip)
    return await executor.execute(language, request_body.code)
