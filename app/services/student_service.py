import logging

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session

from app.models.student import Student
from app.schemas.student import StudentOut
from app.utils.exceptions import StorageUnavailableException

logger = logging.getLogger(__name__)


class StudentService:

    def list_students(self, db: Session) -> list[StudentOut]:
        try:
            students = db.query(Student).order_by(Student.id).all()
        except (OperationalError, InterfaceError) as e:
            logger.warning(f"Listing students failed, storage unreachable: {e.orig}")
            raise StorageUnavailableException() from e
        return [StudentOut.model_validate(s) for s in students]


student_service = StudentService()
