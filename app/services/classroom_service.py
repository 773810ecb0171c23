import logging

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session, selectinload

from app.models.classroom import Classroom
from app.schemas.classroom import ClassroomOut
from app.utils.exceptions import StorageUnavailableException

logger = logging.getLogger(__name__)


class ClassroomService:

    def list_classrooms_with_students(self, db: Session) -> list[ClassroomOut]:
        try:
            classrooms = (
                db.query(Classroom)
                .options(selectinload(Classroom.students))
                .order_by(Classroom.id)
                .all()
            )
        except (OperationalError, InterfaceError) as e:
            logger.warning(f"Listing classrooms failed, storage unreachable: {e.orig}")
            raise StorageUnavailableException() from e
        return [ClassroomOut.model_validate(c) for c in classrooms]


classroom_service = ClassroomService()
