"""initial roster schema and seed data

Revision ID: 0001_initial_roster
Revises: 
Create Date: 2025-10-28 14:06:12.000000
"""

from alembic import op
import sqlalchemy as sa


revision = "0001_initial_roster"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    classrooms = op.create_table(
        "classrooms",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
    )
    op.create_index("ix_classrooms_id", "classrooms", ["id"])

    students = op.create_table(
        "students",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column(
            "classroomId",
            sa.Integer(),
            sa.ForeignKey("classrooms.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_students_id", "students", ["id"])
    op.create_index("ix_students_classroomId", "students", ["classroomId"])

    op.bulk_insert(classrooms, [
        {"id": class_id, "name": f"Class {class_id}"} for class_id in range(1, 6)
    ])
    op.bulk_insert(students, [
        {"id": student_id, "name": f"Student {student_id}", "classroomId": (student_id - 1) // 4 + 1}
        for student_id in range(1, 21)
    ])

    if op.get_bind().dialect.name == "postgresql":
        for table in ("classrooms", "students"):
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), (SELECT MAX(id) FROM {table}))"
            )


def downgrade() -> None:
    op.drop_index("ix_students_classroomId", table_name="students")
    op.drop_index("ix_students_id", table_name="students")
    op.drop_table("students")
    op.drop_index("ix_classrooms_id", table_name="classrooms")
    op.drop_table("classrooms")
