"""Schemas for entities returned by the Todoist API."""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional, List


class TodoistModel(BaseModel):
    """Base model: unknown API fields are ignored and numeric ids become strings."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class Due(TodoistModel):
    """Due date information attached to a task."""
    string: Optional[str] = None  # Human-readable form, e.g. "every monday"
    date: Optional[str] = None
    datetime: Optional[str] = None
    timezone: Optional[str] = None
    is_recurring: bool = False

    @property
    def display(self) -> Optional[str]:
        return self.string or self.datetime or self.date


class Task(TodoistModel):
    """An active Todoist task."""
    id: str
    content: str
    description: str = ""
    priority: Optional[int] = None  # 1 (normal) to 4 (urgent)
    due: Optional[Due] = None
    project_id: Optional[str] = None
    section_id: Optional[str] = None
    labels: List[str] = Field(default_factory=list)
    url: Optional[str] = None


class Project(TodoistModel):
    """A Todoist project."""
    id: str
    name: str
    color: Optional[str] = None
    parent_id: Optional[str] = None
    is_favorite: bool = False


class Section(TodoistModel):
    """A section inside a project."""
    id: str
    name: str
    project_id: Optional[str] = None
    order: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("order", "section_order"),
    )
