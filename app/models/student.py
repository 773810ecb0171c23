from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id          = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name        = Column(String(100), nullable=False)
    classroomId = Column(Integer, ForeignKey("classrooms.id", ondelete="CASCADE"),
                         nullable=False, index=True)

    # ─── Relationships ─────────────────────────────────────────────────────────
    # Back-reference for ORM navigation only; never part of a serialized payload
    classroom = relationship("Classroom", back_populates="students")

    def __repr__(self):
        return f"<Student id={self.id} name={self.name} classroomId={self.classroomId}>"
