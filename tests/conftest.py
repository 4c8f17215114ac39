"""Shared fixtures: a throw-away SQLite database, a fixed clock and seed helpers."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``school_alerts`` package) is importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

NOW = datetime(2026, 3, 10, 9, 0, tzinfo=timezone.utc)


def _naive(value: datetime) -> datetime:
    from school_alerts.utils import ensure_app_naive_datetime

    return ensure_app_naive_datetime(value)


class SchoolSeeder:
    """Insert source domain rows the way the school platform would."""

    def __init__(self, session) -> None:
        self.session = session
        self._counter = 0

    def _save(self, model):
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return model

    def user(self, name: str = "Asha Rao", *, role: str = "parent", is_active: bool = True):
        from school_alerts.infrastructure.models import UserModel

        self._counter += 1
        return self._save(
            UserModel(
                name=name,
                email=f"user{self._counter}@example.com",
                role=role,
                is_active=is_active,
            )
        )

    def student(self, first_name: str = "Riya", last_name: str = "Sharma"):
        from school_alerts.infrastructure.models import StudentModel

        return self._save(StudentModel(first_name=first_name, last_name=last_name))

    def guardian(self, user, *students):
        from school_alerts.infrastructure.models import GuardianModel

        guardian = GuardianModel(user_id=user.id)
        guardian.students.extend(students)
        return self._save(guardian)

    def fee(
        self,
        student,
        *,
        due_date: datetime,
        final_amount: str = "500",
        amount_paid: str = "0",
        status: str = "PENDING",
    ):
        from school_alerts.infrastructure.models import FeePaymentModel

        return self._save(
            FeePaymentModel(
                student_id=student.id,
                final_amount=Decimal(final_amount),
                amount_paid=Decimal(amount_paid),
                status=status,
                due_date=_naive(due_date),
            )
        )

    def homework(
        self,
        student,
        *,
        due_date: datetime,
        title: str = "Algebra worksheet",
        status: str = "PENDING",
        created_at: datetime = NOW,
    ):
        from school_alerts.infrastructure.models import (
            HomeworkModel,
            HomeworkSubmissionModel,
        )

        homework = self._save(HomeworkModel(title=title, due_date=_naive(due_date)))
        return self._save(
            HomeworkSubmissionModel(
                homework_id=homework.id,
                student_id=student.id,
                status=status,
                created_at=_naive(created_at),
            )
        )

    def exam_mark(
        self,
        student,
        *,
        created_at: datetime,
        exam_name: str = "Mid-term Exam",
        subject_name: str = "Mathematics",
    ):
        from school_alerts.infrastructure.models import (
            ExamMarkModel,
            ExamModel,
            SubjectModel,
        )

        exam = self._save(ExamModel(name=exam_name))
        subject = self._save(SubjectModel(name=subject_name))
        return self._save(
            ExamMarkModel(
                exam_id=exam.id,
                subject_id=subject.id,
                student_id=student.id,
                marks_obtained=Decimal("78"),
                created_at=_naive(created_at),
            )
        )

    def attendance(self, student, *, date: datetime, status: str = "ABSENT"):
        from school_alerts.infrastructure.models import AttendanceModel

        return self._save(
            AttendanceModel(student_id=student.id, date=_naive(date), status=status)
        )


@pytest.fixture()
def database():
    """Recreate every table for the test and drop them afterwards."""

    from school_alerts.infrastructure import database, models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield database
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def session_factory(database):
    return database.SessionLocal


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seed(db_session) -> SchoolSeeder:
    return SchoolSeeder(db_session)
