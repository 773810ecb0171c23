from pydantic import BaseModel, Field

from app.schemas.student import StudentOut


# ─── Response ─────────────────────────────────────────────────────────────────
class ClassroomOut(BaseModel):
    """Nested classroom: carries its students, who do not point back to it."""
    id:       int
    name:     str
    students: list[StudentOut] = Field(default_factory=list)
    model_config = {"from_attributes": True}
