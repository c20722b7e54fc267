"""Executor client — forwards code to the remote execution services.

The executors run the code; this client only passes strings through. Request
body is ``{"code": ...}`` for Python and JavaScript and ``{"query": ...}`` for
SQL; the response is ``{success, output?, results?, rows?, error?}``.
"""

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from codecraft.config import get_settings
from codecraft.models.responses import ExecutionResult

logger = structlog.get_logger()

EXECUTOR_LANGUAGES = ("python", "sql", "javascript")

# Answer given when no executor URL is configured for a language
NOT_CONFIGURED = {
    "python": ExecutionResult(
        success=False,
        error="Python execution requires a backend service.",
        output="To execute Python code, set PYTHON_EXECUTOR_URL to a Python execution service.",
    ),
    "sql": ExecutionResult(
        success=False,
        error="SQL execution requires a database execution service.",
        results=[],
        rows=0,
    ),
    "javascript": ExecutionResult(
        success=False,
        error="JavaScript execution requires a backend service.",
        output="To execute JavaScript code, set JAVASCRIPT_EXECUTOR_URL to an execution service.",
    ),
}


class ExecutorClient:
    """HTTP client for the per-language executor services."""

    def __init__(
        self,
        urls: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        if urls is None:
            urls = {
                "python": settings.PYTHON_EXECUTOR_URL,
                "sql": settings.SQL_EXECUTOR_URL,
                "javascript": settings.JAVASCRIPT_EXECUTOR_URL,
            }
        self.urls = urls
        self.timeout = timeout or settings.EXECUTOR_TIMEOUT_SECONDS
        self._transport = transport

    def supports(self, language: str) -> bool:
        return language in EXECUTOR_LANGUAGES

    def configured_languages(self) -> list[str]:
        return [lang for lang in EXECUTOR_LANGUAGES if self.urls.get(lang)]

    async def execute(self, language: str, code: str) -> ExecutionResult:
        """Run ``code`` remotely. Failures come back as ``success=False``, never raised."""
        url = self.urls.get(language)
        if not url:
            return NOT_CONFIGURED[language].model_copy(deep=True)

        payload = {"query": code} if language == "sql" else {"code": code}

        try:
            data = await self._post(url, payload)
            result = ExecutionResult.model_validate(data)
        except httpx.HTTPError as e:
            logger.error("executor_failed", language=language, url=url, error=str(e))
            return ExecutionResult(success=False, error=f"Executor unavailable: {e}")
        except (ValueError, ValidationError) as e:
            logger.error("executor_bad_response", language=language, url=url, error=str(e))
            return ExecutionResult(success=False, error="Executor returned a malformed response")

        logger.info("executor_complete", language=language, success=result.success)
        return result

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
        before_sleep=lambda retry_state: logger.warning(
            "executor_retry",
            attempt=retry_state.attempt_number,
            wait=retry_state.next_action.sleep,
        ),
    )
    async def _post(self, url: str, payload: dict) -> dict:
        """POST with retry on transport errors. Executors answer JSON even on 4xx/5xx."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(url, json=payload)

        if response.headers.get("content-type", "").startswith("application/json"):
            return response.json()

        response.raise_for_status()
        return {"success": False, "error": f"Unexpected executor response ({response.status_code})"}


# Module-level singleton
executor_client = ExecutorClient()
