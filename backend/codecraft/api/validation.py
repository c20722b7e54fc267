"""Validation API — validate a code snapshot, list supported languages."""

from fastapi import APIRouter, Depends, HTTPException

from codecraft.api.dependencies import get_executor
from codecraft.config import get_settings
from codecraft.models.requests import ValidateRequest
from codecraft.models.responses import LanguagesResponse
from codecraft.services.executor_client import ExecutorClient
from codecraft.validators import ValidationReport, supported_languages, validation_engine

router = APIRouter()


def check_code_length(code: str) -> None:
    """Reject oversized snapshots at the API boundary; the engine has no limit."""
    max_length = get_settings().MAX_CODE_LENGTH
    if len(code) > max_length:
        raise HTTPException(
            status_code=422,
            detail=f"Code is {len(code)} characters long, the limit is {max_length}",
        )


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages(executor: ExecutorClient = Depends(get_executor)):
    """Languages with a validator, and languages with a configured executor."""
    return LanguagesResponse(
        validation=supported_languages(),
        execution=executor.configured_languages(),
    )


@router.post("/validate", response_model=ValidationReport)
async def validate_code(request_body: ValidateRequest):
    """Validate one code snapshot.

    Unsupported languages are not an error: the report is empty with
    ``supported`` set to false.
    """
    check_code_length(request_body.code)
    return validation_engine.validate(request_body.code, request_body.language)
