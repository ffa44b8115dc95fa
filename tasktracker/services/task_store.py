from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Depends
from sqlmodel import Session, select

from tasktracker.db.session import get_session
from tasktracker.models.task import Task

log = logging.getLogger(__name__)


class TaskStore:
    """Task persistence over a single request-scoped Session.

    Reads run outside any explicit transaction. Mutations must be issued
    inside `transaction()` so that they commit or roll back together.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        try:
            yield self.session
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def list_all(self) -> list[Task]:
        stmt = select(Task).order_by(Task.id)
        return list(self.session.exec(stmt).all())

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self.session.get(Task, task_id)

    def list_by_completed(self, completed: bool) -> list[Task]:
        stmt = (
            select(Task)
            .where(Task.completed == completed)
            .order_by(Task.id)
        )
        return list(self.session.exec(stmt).all())

    def persist(self, task: Task) -> Task:
        self.session.add(task)
        self.session.flush()
        log.info("Task persisted id=%s", task.id)
        return task

    def delete(self, task_id: int) -> bool:
        task = self.find_by_id(task_id)
        if task is None:
            return False
        self.session.delete(task)
        self.session.flush()
        log.info("Task deleted id=%s", task_id)
        return True


def get_task_store(db: Session = Depends(get_session)) -> TaskStore:
    """FastAPI Depends(get_task_store): one store per request."""
    return TaskStore(db)
