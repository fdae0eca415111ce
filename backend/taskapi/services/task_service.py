"""Task Service — owner-scoped CRUD over tasks with weather enrichment.

Invariants:
    - Every query filters on owner_id == caller; a task owned by someone else is
      indistinguishable from a missing one (ResourceNotFoundError)
    - owner_id comes only from the authenticated identity, never from input
    - A weather lookup that fails yields WEATHER_FALLBACK; create/update never
      fail because of the provider
    - Update without a city leaves weather untouched
    - Delete is a single conditional DELETE (find-and-remove in one statement)

Design Decisions:
    - One weather policy for create and update: a failed lookup always stores
      the fallback, so a task never shows the previous city's weather
    - Update is read-modify-write without locking (last write wins)
    - The weather call never runs inside an open transaction
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.core.domain_types import (
    WEATHER_FALLBACK, TaskId, TaskStatus, UserId, parse_uuid,
)
from taskapi.core.errors import ResourceNotFoundError, WeatherAPIError
from taskapi.core.protocols import WeatherLookup
from taskapi.core.task_rules import merge_task_fields, needs_weather_lookup
from taskapi.models.task import Task

logger = logging.getLogger(__name__)


class TaskService:
    """Task store operations for a single authenticated owner."""

    def __init__(self, db: AsyncSession, weather: WeatherLookup):
        self.db = db
        self.weather = weather

    async def create(
        self, owner_id: UserId, title: str, description: str, city: str,
    ) -> Task:
        """Create a task, enriching it with the city's current weather."""
        weather = await self._lookup_weather(city)
        task = Task(
            owner_id=owner_id,
            title=title,
            description=description,
            city=city,
            weather=weather,
            status=TaskStatus.PENDING.value,
        )
        self.db.add(task)
        await self.db.commit()
        logger.info(
            "Task created",
            extra={"user_id": str(owner_id), "task_id": str(task.id)},
        )
        return task

    async def list_tasks(
        self, owner_id: UserId, status: TaskStatus | None = None,
    ) -> list[Task]:
        query = (
            select(Task)
            .where(Task.owner_id == owner_id)
            .order_by(Task.created_at, Task.id)
        )
        if status:
            query = query.where(Task.status == status.value)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, owner_id: UserId, task_id: str) -> Task:
        task_uuid = parse_uuid(task_id)
        if task_uuid is None:
            raise ResourceNotFoundError("Task")
        result = await self.db.execute(
            select(Task)
            .where(Task.id == task_uuid)
            .where(Task.owner_id == owner_id)
        )
        task = result.scalar_one_or_none()
        if not task:
            raise ResourceNotFoundError("Task")
        return task

    async def update(
        self,
        owner_id: UserId,
        task_id: str,
        title: str | None = None,
        description: str | None = None,
        city: str | None = None,
        status: TaskStatus | None = None,
    ) -> Task:
        """Apply present, non-empty fields; re-derive weather when city changes."""
        changes = merge_task_fields(
            title=title, description=description, city=city, status=status,
        )
        task = await self.get(owner_id, task_id)
        if needs_weather_lookup(changes):
            # end the read transaction; no connection held during the HTTP call
            await self.db.commit()
            changes["weather"] = await self._lookup_weather(changes["city"])

        for name, value in changes.items():
            setattr(task, name, value)
        await self.db.commit()
        logger.info(
            "Task updated",
            extra={"user_id": str(owner_id), "task_id": str(task.id)},
        )
        return task

    async def delete(self, owner_id: UserId, task_id: str) -> TaskId:
        task_uuid = parse_uuid(task_id)
        if task_uuid is None:
            raise ResourceNotFoundError("Task")
        result = await self.db.execute(
            delete(Task)
            .where(Task.id == task_uuid)
            .where(Task.owner_id == owner_id)
        )
        if result.rowcount == 0:
            raise ResourceNotFoundError("Task")
        await self.db.commit()
        logger.info(
            "Task deleted",
            extra={"user_id": str(owner_id), "task_id": str(task_uuid)},
        )
        return TaskId(task_uuid)

    async def _lookup_weather(self, city: str) -> str:
        try:
            return await self.weather.fetch_description(city)
        except WeatherAPIError as e:
            logger.warning(
                f"Weather lookup failed, using fallback: {e.message}",
                extra={"city": city, "error_code": e.code},
            )
            return WEATHER_FALLBACK
