"""
School API Client
=================
Thin HTTP client for the roster endpoints, used by front-ends and scripts.

Every failure (connection error, timeout, non-2xx status, malformed body) is
logged and reported as "no data": list calls return None, test_connection
returns False. Callers decide how to present that.
"""
from __future__ import annotations

import logging
from typing import Optional, List, Type, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from app.config import settings
from app.schemas.classroom import ClassroomOut
from app.schemas.student import StudentOut

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class SchoolApiClient:

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.API_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self._session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path.lstrip('/')}"

    def _get_list(self, path: str, model: Type[T]) -> Optional[List[T]]:
        try:
            resp = self._session.get(self._url(path), timeout=self.timeout)
            resp.raise_for_status()
            return TypeAdapter(List[model]).validate_python(resp.json())
        except (requests.RequestException, ValueError, ValidationError) as e:
            logger.warning(f"Error fetching {path}: {e}")
            return None

    def get_classes(self) -> Optional[List[ClassroomOut]]:
        """Classrooms with nested students, or None on failure."""
        return self._get_list("api/classes", ClassroomOut)

    def get_students(self) -> Optional[List[StudentOut]]:
        """Flat student list, or None on failure."""
        return self._get_list("api/students", StudentOut)

    def test_connection(self) -> bool:
        try:
            resp = self._session.get(self._url("health"), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Health check against {self.base_url} failed: {e}")
            return False
        return resp.ok
