# tasktracker/routers/index.py
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from tasktracker.schemas.task import TaskOut
from tasktracker.services.task_store import TaskStore, get_task_store

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["UI"])


# Plain `def`: FastAPI runs it on the threadpool, so the DB read and the
# template render may block without stalling the event loop.
@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request, store: TaskStore = Depends(get_task_store)):
    tasks = [
        TaskOut.model_validate(row, from_attributes=True)
        for row in store.list_all()
    ]
    return templates.TemplateResponse(request, "index.html", {"tasks": tasks})
