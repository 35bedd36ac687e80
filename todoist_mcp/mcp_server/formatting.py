"""
Response Formatting

Renders Todoist entities as human-readable text blocks for tool results.
Optional fields that are absent are left out entirely.
"""

from typing import Iterable, List, Optional

from todoist_mcp.schemas.todoist import Project, Section, Task

NO_TASKS_FOUND = "No tasks found matching the criteria"
NO_PROJECTS_FOUND = "No projects found"


def _due(task: Task) -> Optional[str]:
    return task.due.display if task.due else None


def _line(label: str, value, indent: str = "") -> str:
    """One `\\n<indent><label>: <value>` line, or nothing when the value is empty"""
    if value is None or value == "":
        return ""
    return f"\n{indent}{label}: {value}"


def format_task_created(task: Task) -> str:
    return (
        f"Task created:\nTitle: {task.content}"
        + _line("Description", task.description)
        + _line("Due", _due(task))
        + _line("Priority", task.priority)
    )


def format_task_item(task: Task) -> str:
    return (
        f"- {task.content}"
        + _line("Description", task.description, "  ")
        + _line("Due", _due(task), "  ")
        + _line("Priority", task.priority, "  ")
    )


def format_task_list(tasks: List[Task]) -> str:
    if not tasks:
        return NO_TASKS_FOUND
    return "\n\n".join(format_task_item(task) for task in tasks)


def format_task_updated(original: Task, updated: Task) -> str:
    return (
        f'Task "{original.content}" updated:\nNew Title: {updated.content}'
        + _line("New Description", updated.description)
        + _line("New Due Date", _due(updated))
        + _line("New Priority", updated.priority)
    )


def format_project_item(project: Project) -> str:
    return (
        f"- **{project.name}** (ID: {project.id})"
        + _line("Color", project.color, "  ")
        + _line("Parent ID", project.parent_id, "  ")
        + ("\n  Favorite: Yes" if project.is_favorite else "")
    )


def format_project_list(projects: List[Project]) -> str:
    if not projects:
        return NO_PROJECTS_FOUND
    return "Projects:\n\n" + "\n\n".join(format_project_item(p) for p in projects)


def format_project_created(project: Project) -> str:
    return (
        f"Project created:\nName: {project.name}\nID: {project.id}"
        + _line("Color", project.color)
        + _line("Parent ID", project.parent_id)
    )


def format_project_updated(original: Project, updated: Project) -> str:
    return (
        f'Project "{original.name}" updated:\nNew Name: {updated.name}'
        + _line("New Color", updated.color)
    )


def format_section_item(section: Section) -> str:
    return f"- **{section.name}** (ID: {section.id})" + _line("Order", section.order, "  ")


def format_section_list(project: Project, sections: Iterable[Section]) -> str:
    sections = list(sections)
    if not sections:
        return f'No sections found in project "{project.name}"'
    return (
        f'Sections in project "{project.name}":\n\n'
        + "\n\n".join(format_section_item(s) for s in sections)
    )


def format_section_created(project: Project, section: Section) -> str:
    return (
        f"Section created:\nName: {section.name}\nID: {section.id}\nProject: {project.name}"
        + _line("Order", section.order)
    )


def format_section_updated(project: Project, original: Section, updated: Section) -> str:
    return f'Section "{original.name}" updated:\nNew Name: {updated.name}\nProject: {project.name}'
