from typing import Any, Dict, List, Optional

import pytest

from todoist_mcp.mcp_server.catalog import create_mcp_server
from todoist_mcp.schemas.todoist import Due, Project, Section, Task


class DummyTodoistClient:
    """
    In-memory stand-in for TodoistClient.

    Keeps entities in insertion order (the order the API would return them)
    and records every call as (method, kwargs).
    """

    def __init__(self):
        self.tasks: List[Task] = []
        self.projects: List[Project] = []
        self.sections: List[Section] = []
        self.calls: List[tuple] = []
        self.fail_with: Optional[Exception] = None
        self._next_id = 1000

    def _record(self, method: str, **kwargs):
        self.calls.append((method, kwargs))
        if self.fail_with is not None:
            raise self.fail_with

    def _new_id(self) -> str:
        self._next_id += 1
        return str(self._next_id)

    def called(self, method: str) -> List[Dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == method]

    # Tasks

    async def get_tasks(self, project_id=None, section_id=None, filter=None):
        self._record("get_tasks", project_id=project_id, section_id=section_id, filter=filter)
        tasks = self.tasks
        if project_id is not None:
            tasks = [t for t in tasks if t.project_id == project_id]
        return list(tasks)

    async def add_task(self, content, description=None, due_string=None, priority=None,
                       project_id=None, section_id=None):
        self._record("add_task", content=content, description=description, due_string=due_string,
                     priority=priority, project_id=project_id, section_id=section_id)
        task = Task(
            id=self._new_id(),
            content=content,
            description=description or "",
            priority=priority,
            due=Due(string=due_string) if due_string else None,
            project_id=project_id,
            section_id=section_id,
        )
        self.tasks.append(task)
        return task

    async def update_task(self, task_id, content=None, description=None, due_string=None, priority=None):
        self._record("update_task", task_id=task_id, content=content, description=description,
                     due_string=due_string, priority=priority)
        index = next(i for i, t in enumerate(self.tasks) if t.id == task_id)
        changes: Dict[str, Any] = {}
        if content is not None:
            changes["content"] = content
        if description is not None:
            changes["description"] = description
        if due_string is not None:
            changes["due"] = Due(string=due_string)
        if priority is not None:
            changes["priority"] = priority
        self.tasks[index] = self.tasks[index].model_copy(update=changes)
        return self.tasks[index]

    async def move_task(self, task_id, project_id=None, section_id=None):
        self._record("move_task", task_id=task_id, project_id=project_id, section_id=section_id)
        index = next(i for i, t in enumerate(self.tasks) if t.id == task_id)
        changes = {k: v for k, v in {"project_id": project_id, "section_id": section_id}.items() if v}
        self.tasks[index] = self.tasks[index].model_copy(update=changes)
        return self.tasks[index]

    async def close_task(self, task_id):
        self._record("close_task", task_id=task_id)
        self.tasks = [t for t in self.tasks if t.id != task_id]

    async def delete_task(self, task_id):
        self._record("delete_task", task_id=task_id)
        self.tasks = [t for t in self.tasks if t.id != task_id]

    # Projects

    async def get_projects(self):
        self._record("get_projects")
        return list(self.projects)

    async def add_project(self, name, color=None, parent_id=None):
        self._record("add_project", name=name, color=color, parent_id=parent_id)
        project = Project(id=self._new_id(), name=name, color=color, parent_id=parent_id)
        self.projects.append(project)
        return project

    async def update_project(self, project_id, name=None, color=None):
        self._record("update_project", project_id=project_id, name=name, color=color)
        index = next(i for i, p in enumerate(self.projects) if p.id == project_id)
        changes = {k: v for k, v in {"name": name, "color": color}.items() if v is not None}
        self.projects[index] = self.projects[index].model_copy(update=changes)
        return self.projects[index]

    async def delete_project(self, project_id):
        self._record("delete_project", project_id=project_id)
        self.projects = [p for p in self.projects if p.id != project_id]

    # Sections

    async def get_sections(self, project_id=None):
        self._record("get_sections", project_id=project_id)
        return [s for s in self.sections if project_id is None or s.project_id == project_id]

    async def add_section(self, name, project_id, order=None):
        self._record("add_section", name=name, project_id=project_id, order=order)
        section = Section(id=self._new_id(), name=name, project_id=project_id, order=order)
        self.sections.append(section)
        return section

    async def update_section(self, section_id, name):
        self._record("update_section", section_id=section_id, name=name)
        index = next(i for i, s in enumerate(self.sections) if s.id == section_id)
        self.sections[index] = self.sections[index].model_copy(update={"name": name})
        return self.sections[index]

    async def delete_section(self, section_id):
        self._record("delete_section", section_id=section_id)
        self.sections = [s for s in self.sections if s.id != section_id]


@pytest.fixture
def client() -> DummyTodoistClient:
    return DummyTodoistClient()


@pytest.fixture
def server(client):
    return create_mcp_server(client)


@pytest.fixture
def seeded_client(client) -> DummyTodoistClient:
    """Client pre-loaded with two projects, three sections and a few tasks."""
    client.projects = [
        Project(id="p1", name="Work", color="blue"),
        Project(id="p2", name="Home Errands", is_favorite=True),
    ]
    client.sections = [
        Section(id="s1", name="Backlog", project_id="p1", order=1),
        Section(id="s2", name="In Progress", project_id="p1", order=2),
        Section(id="s3", name="Backlog", project_id="p2", order=1),
    ]
    client.tasks = [
        Task(id="t1", content="Buy milk", priority=1, project_id="p2", section_id="s3"),
        Task(id="t2", content="Write report", description="Q3 numbers", priority=4,
             due=Due(string="tomorrow", date="2026-10-20"), project_id="p1", section_id="s2"),
        Task(id="t3", content="Buy bread", priority=4, project_id="p2"),
    ]
    return client
