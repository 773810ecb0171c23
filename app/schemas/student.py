from pydantic import BaseModel


# ─── Response ─────────────────────────────────────────────────────────────────
class StudentOut(BaseModel):
    """Flat student: the parent classroom is referenced by id only."""
    id:          int
    name:        str
    classroomId: int
    model_config = {"from_attributes": True}
