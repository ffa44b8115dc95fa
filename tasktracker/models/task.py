from typing import Optional

from sqlalchemy import CheckConstraint, false
from sqlmodel import SQLModel, Field


class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint("length(trim(title)) > 0", name="ck_tasks_title_not_blank"),
        # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is set
        {"sqlite_autoincrement": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    completed: bool = Field(default=False, sa_column_kwargs={"server_default": false()})
