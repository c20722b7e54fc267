"""API response models and stored record shapes."""

from pydantic import BaseModel
from typing import Any, Optional, Literal
from datetime import datetime


class Project(BaseModel):
    """A dashboard project."""

    id: str
    name: str
    description: str = ""
    language: str
    created_at: datetime
    updated_at: datetime


class ProjectFile(BaseModel):
    """One file of a project, as edited in the constructor."""

    id: str
    project_id: str
    name: str
    language: str
    file_type: str
    content: str = ""
    order_index: int = 0
    is_main: bool = False
    created_at: datetime
    updated_at: datetime


class ExecutionResult(BaseModel):
    """Outcome reported by a remote executor, passed through untouched."""

    success: bool
    output: Optional[str] = None
    results: Optional[list[dict[str, Any]]] = None
    rows: Optional[int] = None
    error: Optional[str] = None


class LanguagesResponse(BaseModel):
    """Languages with a validator and with a configured executor."""

    validation: list[str]
    execution: list[str]


class HealthDependency(BaseModel):
    """Health status of a single dependency."""

    status: Literal["healthy", "unhealthy", "degraded"]
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    dependencies: dict[str, HealthDependency]
