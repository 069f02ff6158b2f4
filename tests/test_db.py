"""Tests for database path resolution and migrations."""

import os

from student_survey_api.app.core import db


class TestGetDatabasePath:

    def test_absolute_path_unchanged(self, tmp_path):
        path = str(tmp_path / "x.db")
        assert db.get_database_path(path) == path

    def test_relative_path_resolved_against_package(self):
        resolved = db.get_database_path("student_survey.db")
        assert os.path.isabs(resolved)
        assert os.path.basename(os.path.dirname(resolved)) == "student_survey_api"


class TestInitDb:

    def test_creates_schema(self, tmp_path):
        path = str(tmp_path / "new.db")
        assert db.init_db(path) == db.MIGRATIONS[-1][0]
        with db.get_cursor(path) as cursor:
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'student_surveys'"
            )
            assert cursor.fetchone() is not None

    def test_idempotent(self, tmp_path):
        path = str(tmp_path / "new.db")
        db.init_db(path)
        db.init_db(path)
        with db.get_cursor(path) as cursor:
            cursor.execute("SELECT COUNT(*) AS n FROM migrations")
            assert cursor.fetchone()["n"] == len(db.MIGRATIONS)

    def test_keeps_existing_rows(self, db_path):
        with db.get_cursor(db_path) as cursor:
            cursor.execute("INSERT INTO student_surveys (first_name) VALUES ('Kept')")
        db.init_db(db_path)
        with db.get_cursor(db_path) as cursor:
            cursor.execute("SELECT first_name FROM student_surveys")
            assert [row["first_name"] for row in cursor.fetchall()] == ["Kept"]
