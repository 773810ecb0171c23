from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class Classroom(Base):
    __tablename__ = "classrooms"

    id   = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    students = relationship(
        "Student",
        back_populates="classroom",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Student.id",
    )

    def __repr__(self):
        return f"<Classroom id={self.id} name={self.name}>"
