"""Async client for the Todoist REST API."""
from typing import Any, Dict, List, Optional
import logging

import httpx

from todoist_mcp.config import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT, Settings
from todoist_mcp.schemas.todoist import Project, Section, Task

logger = logging.getLogger(__name__)

# Upper bound on pages followed for one list call
MAX_PAGES = 100


class TodoistAPIError(Exception):
    """Raised when the Todoist API answers with a non-success status."""

    def __init__(self, status_code: int, message: str, method: str = "", path: str = ""):
        self.status_code = status_code
        self.message = message
        self.method = method
        self.path = path
        super().__init__(f"Todoist API error {status_code} on {method} {path}: {message}")


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


class TodoistClient:
    """
    Thin async wrapper over the Todoist REST API

    Every method performs exactly one logical operation against the
    remote service. Errors are raised as TodoistAPIError (HTTP status)
    or httpx.HTTPError (transport); callers decide how to report them.
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {api_token}"},
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "TodoistClient":
        """Build a client from process settings."""
        return cls(
            api_token=settings.api_token,
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
        )

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TodoistClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (None when empty)."""
        logger.debug(f"Todoist request: {method} {path} params={params}")
        response = await self._http.request(method, path, params=params, json=json)

        if response.is_error:
            logger.error(f"Todoist API {method} {path} failed with {response.status_code}")
            raise TodoistAPIError(
                status_code=response.status_code,
                message=response.text.strip() or response.reason_phrase,
                method=method,
                path=path,
            )

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def _get_all(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Fetch every item of a list endpoint

        Cursor-paginated responses ({"results": [...], "next_cursor": ...})
        are followed to the last page; a bare JSON list is returned as-is.
        """
        query = _drop_none(params or {})
        items: List[Dict[str, Any]] = []

        for _ in range(MAX_PAGES):
            body = await self._request("GET", path, params=query or None)
            if body is None:
                return items
            if isinstance(body, list):
                return items + body

            items.extend(body.get("results", []))
            cursor = body.get("next_cursor")
            if not cursor:
                return items
            query = {**query, "cursor": cursor}

        logger.warning(f"Stopped paginating {path} after {MAX_PAGES} pages")
        return items

    # Tasks

    async def get_tasks(
        self,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
        filter: Optional[str] = None,
    ) -> List[Task]:
        """List active tasks, optionally narrowed by project, section or filter query."""
        if filter:
            raw = await self._get_all("/tasks/filter", {"query": filter})
        else:
            raw = await self._get_all("/tasks", {"project_id": project_id, "section_id": section_id})
        return [Task.model_validate(item) for item in raw]

    async def add_task(
        self,
        content: str,
        description: Optional[str] = None,
        due_string: Optional[str] = None,
        priority: Optional[int] = None,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
    ) -> Task:
        body = _drop_none({
            "content": content,
            "description": description,
            "due_string": due_string,
            "priority": priority,
            "project_id": project_id,
            "section_id": section_id,
        })
        return Task.model_validate(await self._request("POST", "/tasks", json=body))

    async def update_task(
        self,
        task_id: str,
        content: Optional[str] = None,
        description: Optional[str] = None,
        due_string: Optional[str] = None,
        priority: Optional[int] = None,
    ) -> Task:
        body = _drop_none({
            "content": content,
            "description": description,
            "due_string": due_string,
            "priority": priority,
        })
        return Task.model_validate(await self._request("POST", f"/tasks/{task_id}", json=body))

    async def move_task(
        self,
        task_id: str,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
    ) -> Optional[Task]:
        """Move a task to another project and/or section."""
        body = _drop_none({"project_id": project_id, "section_id": section_id})
        result = await self._request("POST", f"/tasks/{task_id}/move", json=body)
        return Task.model_validate(result) if result else None

    async def close_task(self, task_id: str) -> None:
        await self._request("POST", f"/tasks/{task_id}/close")

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")

    # Projects

    async def get_projects(self) -> List[Project]:
        return [Project.model_validate(item) for item in await self._get_all("/projects")]

    async def add_project(
        self,
        name: str,
        color: Optional[str] = None,
        parent_id: Optional[str] = None,
    ) -> Project:
        body = _drop_none({"name": name, "color": color, "parent_id": parent_id})
        return Project.model_validate(await self._request("POST", "/projects", json=body))

    async def update_project(
        self,
        project_id: str,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Project:
        body = _drop_none({"name": name, "color": color})
        return Project.model_validate(await self._request("POST", f"/projects/{project_id}", json=body))

    async def delete_project(self, project_id: str) -> None:
        await self._request("DELETE", f"/projects/{project_id}")

    # Sections

    async def get_sections(self, project_id: Optional[str] = None) -> List[Section]:
        raw = await self._get_all("/sections", {"project_id": project_id})
        return [Section.model_validate(item) for item in raw]

    async def add_section(
        self,
        name: str,
        project_id: str,
        order: Optional[int] = None,
    ) -> Section:
        body = _drop_none({"name": name, "project_id": project_id, "order": order})
        return Section.model_validate(await self._request("POST", "/sections", json=body))

    async def update_section(self, section_id: str, name: str) -> Section:
        return Section.model_validate(
            await self._request("POST", f"/sections/{section_id}", json={"name": name})
        )

    async def delete_section(self, section_id: str) -> None:
        await self._request("DELETE", f"/sections/{section_id}")
