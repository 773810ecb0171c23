from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import func, inspect, text
from sqlalchemy.orm import Session

from app.config import settings
from app.database import build_engine
from app.init_db import init_db
from app.models import Classroom, Student

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture()
def migrated_engine(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    # alembic/env.py takes the URL from settings
    monkeypatch.setattr(settings, "DATABASE_URL", url)

    # No ini file: keeps alembic from reconfiguring the app's logging
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    command.upgrade(cfg, "head")

    engine = build_engine(url)
    yield engine
    engine.dispose()


def _counts(engine):
    with Session(engine) as db:
        return (
            db.query(func.count(Classroom.id)).scalar(),
            db.query(func.count(Student.id)).scalar(),
        )


def test_upgrade_creates_seeded_roster(migrated_engine):
    assert _counts(migrated_engine) == (5, 20)
    with Session(migrated_engine) as db:
        assert [s.id for s in db.get(Classroom, 1).students] == [1, 2, 3, 4]
        assert db.get(Student, 20).classroomId == 5


def test_upgrade_creates_cascading_foreign_key(migrated_engine):
    fks = inspect(migrated_engine).get_foreign_keys("students")
    assert len(fks) == 1
    assert fks[0]["referred_table"] == "classrooms"
    assert fks[0]["constrained_columns"] == ["classroomId"]
    assert fks[0]["options"].get("ondelete") == "CASCADE"

    with migrated_engine.begin() as conn:
        conn.execute(text("DELETE FROM classrooms WHERE id = 3"))
    assert _counts(migrated_engine) == (4, 16)


def test_init_db_after_upgrade_adds_nothing(migrated_engine):
    init_db(migrated_engine)
    assert _counts(migrated_engine) == (5, 20)
