"""API request models."""

from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Optional, Literal

ProjectLanguage = Literal["html-css-js", "python", "sql", "typescript", "json"]


class ValidateRequest(BaseModel):
    """Code snapshot to validate."""

    code: str = ""
    language: Optional[str] = Field(
        default=None,
        description="html, css, javascript, python or sql; anything else yields no diagnostics",
        examples=["css"],
    )


class ExecuteRequest(BaseModel):
    """Code to hand to a remote executor. SQL clients may send it as ``query``."""

    code: str = Field(default="", validation_alias=AliasChoices("code", "query"))


class CreateProjectRequest(BaseModel):
    """Request to create a new project."""

    name: str = Field(..., max_length=200)
    description: str = Field(default="", max_length=2000)
    language: ProjectLanguage = "html-css-js"

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name must not be blank")
        return value


class UpdateProjectRequest(BaseModel):
    """Partial project update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)


class CreateFileRequest(BaseModel):
    """Request to add a file to a project."""

    name: str = Field(..., min_length=1, max_length=200, examples=["utils.js"])


class UpdateFileRequest(BaseModel):
    """Replace a file's content."""

    content: str
