# tasktracker/routers/task.py
import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from tasktracker.models.task import Task
from tasktracker.schemas.task import TaskIn, TaskOut
from tasktracker.services.task_store import TaskStore, get_task_store

router = APIRouter(prefix="/tasks", tags=["Tasks"])
log = logging.getLogger(__name__)

_ID_RE = re.compile(r"[0-9]+")
_MAX_ID = 2**63 - 1


def _parse_task_id(raw: str) -> Optional[int]:
    if not _ID_RE.fullmatch(raw):
        return None
    task_id = int(raw)
    return task_id if task_id <= _MAX_ID else None


def _not_found(raw_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Task with id {raw_id} not found")


def _serialize(task: Task) -> TaskOut:
    return TaskOut.model_validate(task, from_attributes=True)


def _serialize_tasks(rows: list[Task]) -> list[TaskOut]:
    return [_serialize(row) for row in rows]


@router.get("", response_model=list[TaskOut])
def get_all_tasks(store: TaskStore = Depends(get_task_store)):
    return _serialize_tasks(store.list_all())


@router.get("/completed", response_model=list[TaskOut])
def get_completed_tasks(store: TaskStore = Depends(get_task_store)):
    return _serialize_tasks(store.list_by_completed(True))


@router.get("/pending", response_model=list[TaskOut])
def get_pending_tasks(store: TaskStore = Depends(get_task_store)):
    return _serialize_tasks(store.list_by_completed(False))


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    # malformed ids are reported as missing rather than as bad requests
    parsed = _parse_task_id(task_id)
    task = store.find_by_id(parsed) if parsed is not None else None
    if task is None:
        raise _not_found(task_id)
    return _serialize(task)


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskIn, store: TaskStore = Depends(get_task_store)):
    with store.transaction():
        task = store.persist(
            Task(
                title=payload.title,
                description=payload.description,
                completed=payload.completed,
            )
        )
        created = _serialize(task)
    return created


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: str,
    payload: TaskIn,
    store: TaskStore = Depends(get_task_store),
):
    parsed = _parse_task_id(task_id)
    with store.transaction():
        task = store.find_by_id(parsed) if parsed is not None else None
        if task is None:
            raise _not_found(task_id)

        task.title = payload.title
        task.description = payload.description
        task.completed = payload.completed
        store.session.add(task)
        store.session.flush()
        updated = _serialize(task)

    log.info("Task updated id=%s", updated.id)
    return updated


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    parsed = _parse_task_id(task_id)
    with store.transaction():
        if parsed is None or not store.delete(parsed):
            raise _not_found(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
