from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.classroom import ClassroomOut
from app.schemas.common import STORAGE_ERROR_RESPONSES
from app.services.classroom_service import classroom_service

router = APIRouter(prefix="/classes")


@router.get(
    "",
    response_model=list[ClassroomOut],
    responses=STORAGE_ERROR_RESPONSES,
    summary="List classrooms with their students",
)
def list_classes(db: Session = Depends(get_db)):
    return classroom_service.list_classrooms_with_students(db)
