from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import STORAGE_ERROR_RESPONSES
from app.schemas.student import StudentOut
from app.services.student_service import student_service

router = APIRouter(prefix="/students")


@router.get(
    "",
    response_model=list[StudentOut],
    responses=STORAGE_ERROR_RESPONSES,
    summary="List all students (flat)",
)
def list_students(db: Session = Depends(get_db)):
    return student_service.list_students(db)
