"""
HTTP client for the Minimado task API.

LEARNING NOTES:
- We use requests.Session so every call shares headers and connections,
  and so tests can hand in a fake session instead of hitting the network
- raise_for_status() turns 4xx/5xx responses into exceptions; we re-raise
  them as TaskApiError with the status code and server payload attached
- Every call is attempted exactly once: no retries, no backoff

This module handles:
- POST /api/tasks/add (create a task)
- GET /api/tasks (list the user's tasks)
- Validating the task list into Task models at the boundary
"""

import logging
from typing import Any

import requests
from pydantic import ValidationError

from .config import Settings, get_settings
from .models import Task

logger = logging.getLogger(__name__)


class TaskApiError(Exception):
    """
    Raised when a task API call fails.

    Attributes:
        status_code: HTTP status of the response, or None for transport errors
        body: Decoded error payload from the server, if there was one
    """

    def __init__(self, message: str, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def _decode_body(response: requests.Response) -> Any:
    """Return the JSON body if there is one, otherwise the raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def parse_tasks(data: Any) -> list[Task]:
    """
    Validate a raw task list from the server.

    Malformed records are skipped (and logged) rather than failing the
    whole listing.

    Raises:
        TaskApiError: If the payload is not a list at all
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise TaskApiError(f"Unexpected response: expected a list of tasks, got {type(data).__name__}")

    tasks: list[Task] = []
    for index, record in enumerate(data):
        try:
            tasks.append(Task.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping malformed task #%d: %s", index, e)
    return tasks


class TaskClient:
    """
    Thin wrapper around the two task endpoints.

    Example:
        client = TaskClient.from_settings(get_settings())
        tasks = client.list_tasks("user_abc")
    """

    def __init__(
        self,
        base_url: str,
        user_id_header: str = "X-Clerk-User-Id",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_id_header = user_id_header
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TaskClient":
        settings = settings or get_settings()
        return cls(
            base_url=settings.api_base_url,
            user_id_header=settings.user_id_header,
            timeout=settings.request_timeout,
        )

    def _request(self, method: str, path: str, user_id: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        headers = {self.user_id_header: user_id, **kwargs.pop("headers", {})}

        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise TaskApiError(str(e)) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TaskApiError(
                str(e),
                status_code=response.status_code,
                body=_decode_body(response),
            ) from e

        return _decode_body(response)

    def add_task(self, title: str, user_id: str) -> Any:
        """
        Create a task.

        Returns:
            The server's response body, decoded from JSON when possible
        """
        return self._request(
            "POST",
            "/api/tasks/add",
            user_id,
            json={"title": title},
            headers={"Content-Type": "application/json"},
        )

    def list_tasks(self, user_id: str) -> list[Task]:
        """Fetch every task owned by user_id, in server order."""
        return parse_tasks(self._request("GET", "/api/tasks", user_id))
