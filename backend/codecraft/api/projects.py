"""Projects API — dashboard projects and their editor files."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from codecraft.api.dependencies import get_project_store
from codecraft.api.validation import check_code_length
from codecraft.models.requests import (
    CreateFileRequest,
    CreateProjectRequest,
    UpdateFileRequest,
    UpdateProjectRequest,
)
from codecraft.models.responses import Project, ProjectFile
from codecraft.services.project_store import ProjectStore
from codecraft.validators import ValidationReport, validation_engine

router = APIRouter()

# File extensions whose scanner is registered under another name
EXTENSION_LANGUAGES = {"py": "python", "js": "javascript", "htm": "html"}


async def _require_project(store: ProjectStore, project_id: str) -> dict:
    project = await store.get_project(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail=f"Project {project_id} not found")
    return project


def _validation_language(project: dict, record: dict) -> str:
    """Python and SQL projects validate every file as the project language."""
    if project["language"] in ("python", "sql"):
        return project["language"]
    return EXTENSION_LANGUAGES.get(record["file_type"], record["file_type"])


async def _require_file(store: ProjectStore, project_id: str, file_id: str) -> dict:
    record = await store.get_file(project_id, file_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"File {file_id} not found in project {project_id}")
    return record


# ─── Projects ───


@router.get("/projects", response_model=list[Project])
async def list_projects(
    limit: int = Query(default=50, ge=1, le=500),
    store: ProjectStore = Depends(get_project_store),
):
    """List projects, newest first."""
    return await store.list_projects(limit)


@router.post("/projects", status_code=201, response_model=Project)
async def create_project(
    request_body: CreateProjectRequest,
    store: ProjectStore = Depends(get_project_store),
):
    return await store.create_project(
        name=request_body.name,
        language=request_body.language,
        description=request_body.description,
    )


@router.get("/projects/{project_id}", response_model=Project)
async def get_project(project_id: str, store: ProjectStore = Depends(get_project_store)):
    return await _require_project(store, project_id)


@router.patch("/projects/{project_id}", response_model=Project)
async def update_project(
    project_id: str,
    request_body: UpdateProjectRequest,
    store: ProjectStore = Depends(get_project_store),
):
    project = await store.update_project(project_id, request_body.model_dump(exclude_none=True))
    if project is None:
        raise HTTPException(status_code=404, detail=f"Project {project_id} not found")
    return project


@router.delete("/projects/{project_id}", status_code=204)
async def delete_project(project_id: str, store: ProjectStore = Depends(get_project_store)):
    if not await store.delete_project(project_id):
        raise HTTPException(status_code=404, detail=f"Project {project_id} not found")
    return Response(status_code=204)


# ─── Files ───


@router.get("/projects/{project_id}/files", response_model=list[ProjectFile])
async def list_files(project_id: str, store: ProjectStore = Depends(get_project_store)):
    """List files in ``order_index`` order.

    A project with no files yet gets the starter files for its language.
    """
    project = await _require_project(store, project_id)
    files = await store.list_files(project_id)
    if not files:
        files = await store.seed_starter_files(project)
    return files


@router.post("/projects/{project_id}/files", status_code=201, response_model=ProjectFile)
async def create_file(
    project_id: str,
    request_body: CreateFileRequest,
    store: ProjectStore = Depends(get_project_store),
):
    project = await _require_project(store, project_id)
    return await store.create_file(project, request_body.name.strip())


@router.get("/projects/{project_id}/files/{file_id}", response_model=ProjectFile)
async def get_file(project_id: str, file_id: str, store: ProjectStore = Depends(get_project_store)):
    return await _require_file(store, project_id, file_id)


@router.put("/projects/{project_id}/files/{file_id}", response_model=ProjectFile)
async def update_file(
    project_id: str,
    file_id: str,
    request_body: UpdateFileRequest,
    store: ProjectStore = Depends(get_project_store),
):
    """Save new content for a file."""
    check_code_length(request_body.content)
    record = await store.update_file_content(project_id, file_id, request_body.content)
    if record is None:
        raise HTTPException(status_code=404, detail=f"File {file_id} not found in project {project_id}")
    return record


@router.delete("/projects/{project_id}/files/{file_id}", status_code=204)
async def delete_file(project_id: str, file_id: str, store: ProjectStore = Depends(get_project_store)):
    if not await store.delete_file(project_id, file_id):
        raise HTTPException(status_code=404, detail=f"File {file_id} not found in project {project_id}")
    return Response(status_code=204)


@router.get("/projects/{project_id}/files/{file_id}/validate", response_model=ValidationReport)
async def validate_file(
    project_id: str,
    file_id: str,
    language: Optional[str] = Query(default=None, description="Override the detected language"),
    store: ProjectStore = Depends(get_project_store),
):
    """Validate the stored content of a file.

    Python and SQL projects use the project language; other projects use the
    file's ``file_type``, with common extensions mapped to scanner names.
    """
    project = await _require_project(store, project_id)
    record = await _require_file(store, project_id, file_id)
    return validation_engine.validate(record["content"], language or _validation_language(project, record))
