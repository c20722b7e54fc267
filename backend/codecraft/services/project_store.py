"""Project store — Redis-backed CRUD for project and file records.

Records are JSON documents. Each project keeps a sorted set of its file ids
scored by ``order_index``; a global sorted set scored by creation time lists
projects newest first.
"""

import json
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

import structlog

from codecraft.services.starter_files import starter_files_for

logger = structlog.get_logger()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _file_type_from_name(name: str) -> str:
    """Extension of the file name, or ``txt`` when there is none."""
    _, dot, extension = name.rpartition(".")
    return extension.lower() if dot and extension else "txt"


class ProjectStore:
    """Manages project and file records in Redis."""

    def __init__(self, redis_client):
        self.redis = redis_client
        self._prefix = "codecraft:"

    def _project_key(self, project_id: str) -> str:
        return f"{self._prefix}project:{project_id}"

    def _file_key(self, file_id: str) -> str:
        return f"{self._prefix}file:{file_id}"

    def _files_index(self, project_id: str) -> str:
        return f"{self._prefix}project:{project_id}:files"

    @property
    def _projects_index(self) -> str:
        return f"{self._prefix}projects"

    async def _load(self, key: str) -> Optional[dict]:
        data = await self.redis.get(key)
        if data is None:
            return None
        return json.loads(data)

    async def _save(self, key: str, record: dict) -> None:
        await self.redis.set(key, json.dumps(record))

    # ── Projects ──

    async def create_project(self, name: str, language: str, description: str = "") -> dict:
        now = _now()
        project = {
            "id": str(uuid.uuid4()),
            "name": name,
            "description": description,
            "language": language,
            "created_at": now,
            "updated_at": now,
        }
        await self._save(self._project_key(project["id"]), project)
        await self.redis.zadd(self._projects_index, {project["id"]: time.time()})

        logger.info("project_created", project_id=project["id"], language=language)
        return project

    async def get_project(self, project_id: str) -> Optional[dict]:
        return await self._load(self._project_key(project_id))

    async def list_projects(self, limit: int = 100) -> list[dict]:
        """Projects ordered by creation time, newest first."""
        project_ids = await self.redis.zrevrange(self._projects_index, 0, limit - 1)
        if not project_ids:
            return []

        values = await self.redis.mget([self._project_key(pid) for pid in project_ids])
        return [json.loads(value) for value in values if value is not None]

    async def update_project(self, project_id: str, updates: dict) -> Optional[dict]:
        """Apply a partial update. Returns None if the project does not exist."""
        project = await self.get_project(project_id)
        if project is None:
            return None

        project.update({k: v for k, v in updates.items() if v is not None})
        project["updated_at"] = _now()
        await self._save(self._project_key(project_id), project)
        return project

    async def delete_project(self, project_id: str) -> bool:
        """Delete a project together with all of its files."""
        if await self.get_project(project_id) is None:
            return False

        file_ids = await self.redis.zrange(self._files_index(project_id), 0, -1)
        keys = [self._file_key(fid) for fid in file_ids]
        keys += [self._files_index(project_id), self._project_key(project_id)]
        await self.redis.delete(*keys)
        await self.redis.zrem(self._projects_index, project_id)

        logger.info("project_deleted", project_id=project_id, files_deleted=len(file_ids))
        return True

    # ── Files ──

    async def list_files(self, project_id: str) -> list[dict]:
        """Files of a project in ``order_index`` order."""
        file_ids = await self.redis.zrange(self._files_index(project_id), 0, -1)
        if not file_ids:
            return []

        values = await self.redis.mget([self._file_key(fid) for fid in file_ids])
        return [json.loads(value) for value in values if value is not None]

    async def get_file(self, project_id: str, file_id: str) -> Optional[dict]:
        record = await self._load(self._file_key(file_id))
        if record is None or record.get("project_id") != project_id:
            return None
        return record

    async def _insert_file(self, project_id: str, template: dict) -> dict:
        now = _now()
        record = {
            "id": str(uuid.uuid4()),
            "project_id": project_id,
            "name": template["name"],
            "language": template["language"],
            "file_type": template["file_type"],
            "content": template.get("content", ""),
            "order_index": template["order_index"],
            "is_main": template.get("is_main", False),
            "created_at": now,
            "updated_at": now,
        }
        await self._save(self._file_key(record["id"]), record)
        await self.redis.zadd(self._files_index(project_id), {record["id"]: record["order_index"]})
        return record

    async def create_file(self, project: dict, name: str) -> dict:
        """Append a new empty file to the project.

        Raises:
            ValueError: a file with the same name already exists
        """
        existing = await self.list_files(project["id"])
        if any(f["name"] == name for f in existing):
            raise ValueError(f"File '{name}' already exists in this project")

        record = await self._insert_file(project["id"], {
            "name": name,
            "language": project["language"],
            "file_type": _file_type_from_name(name),
            "order_index": len(existing),
            "is_main": False,
        })
        logger.info("file_created", project_id=project["id"], file_id=record["id"], name=name)
        return record

    async def seed_starter_files(self, project: dict) -> list[dict]:
        """Insert the starter files for the project's language."""
        records = []
        for template in starter_files_for(project["language"]):
            records.append(await self._insert_file(project["id"], template))

        logger.info("starter_files_seeded", project_id=project["id"], count=len(records))
        return records

    async def update_file_content(self, project_id: str, file_id: str, content: str) -> Optional[dict]:
        record = await self.get_file(project_id, file_id)
        if record is None:
            return None

        record["content"] = content
        record["updated_at"] = _now()
        await self._save(self._file_key(file_id), record)
        return record

    async def delete_file(self, project_id: str, file_id: str) -> bool:
        if await self.get_file(project_id, file_id) is None:
            return False

        await self.redis.delete(self._file_key(file_id))
        await self.redis.zrem(self._files_index(project_id), file_id)
        logger.info("file_deleted", project_id=project_id, file_id=file_id)
        return True
