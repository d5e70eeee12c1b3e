import logging
import uuid

from tidydesk.extensions import db
from tidydesk.tasks.models import Task, PRIORITIES
from tidydesk.common.errors import InvalidInputError, NotFoundError
from tidydesk.common.utils import is_blank

logger = logging.getLogger(__name__)


def _check(title: str, priority: str) -> None:
    if is_blank(title):
        raise InvalidInputError("Title is required.", details={"title": ["Must not be blank."]})
    if priority not in PRIORITIES:
        raise InvalidInputError(
            "Invalid priority.",
            details={"priority": [f"Must be one of: {', '.join(PRIORITIES)}."]},
        )


def create_task(owner_email: str, title: str, description: str = "",
                priority: str = "medium", completed: bool = False) -> Task:
    _check(title, priority)
    task = Task(
        title=title,
        description=description or "",
        priority=priority,
        completed=bool(completed),
        owner_email=owner_email,
    )
    db.session.add(task)
    db.session.commit()
    logger.info("task_created", extra={"task_id": str(task.id)})
    return task


def list_tasks(owner_email: str) -> list[Task]:
    return (
        Task.query.filter_by(owner_email=owner_email)
        .order_by(Task.created_at.desc())
        .all()
    )


def get_task(owner_email: str, task_id: uuid.UUID) -> Task:
    task = Task.query.filter_by(id=task_id, owner_email=owner_email).first()
    if task is None:
        raise NotFoundError("Task not found.")
    return task


def update_task(owner_email: str, task_id: uuid.UUID, title: str, description: str,
                priority: str, completed: bool) -> Task:
    # pas de patch partiel: basculer "completed" passe aussi par ici
    task = get_task(owner_email, task_id)
    _check(title, priority)
    task.title = title
    task.description = description or ""
    task.priority = priority
    task.completed = bool(completed)
    db.session.commit()
    logger.info("task_updated", extra={"task_id": str(task.id), "completed": task.completed})
    return task


def delete_task(owner_email: str, task_id: uuid.UUID) -> None:
    task = get_task(owner_email, task_id)
    db.session.delete(task)
    db.session.commit()
    logger.info("task_deleted", extra={"task_id": str(task_id)})
