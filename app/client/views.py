"""
Render-ready roster lists.

Each loader fetches through the API client, turns a failed fetch into an
empty list plus a user-facing notice, and returns a RosterView for display.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from app.client.school_api import SchoolApiClient
from app.schemas.classroom import ClassroomOut
from app.schemas.student import StudentOut

CLASSES_LOAD_FAILED  = "Failed to load classes from API"
STUDENTS_LOAD_FAILED = "Failed to load students from API"

T = TypeVar("T")


@dataclass
class RosterView(Generic[T]):
    items: List[T] = field(default_factory=list)
    notice: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.items


def filter_students(students: List[StudentOut], search_text: Optional[str]) -> List[StudentOut]:
    """Match on name (case-insensitive), or on id / classroom id as text."""
    if not search_text or not search_text.strip():
        return list(students)
    needle = search_text.lower()
    return [
        s for s in students
        if needle in s.name.lower()
        or search_text in str(s.id)
        or search_text in str(s.classroomId)
    ]


def load_classes(client: SchoolApiClient) -> RosterView[ClassroomOut]:
    classes = client.get_classes()
    if classes is None:
        return RosterView(notice=CLASSES_LOAD_FAILED)
    return RosterView(items=classes)


def load_students(client: SchoolApiClient, search_text: str = "") -> RosterView[StudentOut]:
    students = client.get_students()
    if students is None:
        return RosterView(notice=STUDENTS_LOAD_FAILED)
    return RosterView(items=filter_students(students, search_text))
