"""
Persistence for survey records.

``SurveyStore`` is the key-indexed abstraction the service layer talks
to; ``SQLiteSurveyStore`` implements it on top of the
``student_surveys`` table created by ``core.db.init_db``.  Each
operation opens its own connection and closes it before returning.
All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from student_survey_api.app.core.db import get_connection
from student_survey_api.app.schemas.survey import Survey

logger = logging.getLogger(__name__)

# SQLite INTEGER PRIMARY KEY is a signed 64-bit value.
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def id_in_range(survey_id: int) -> bool:
    """Return ``True`` if ``survey_id`` fits in an SQLite INTEGER column."""
    return MIN_ID <= survey_id <= MAX_ID


class SurveyStore(ABC):
    """Interface for survey persistence."""

    @abstractmethod
    def save(self, survey: Survey) -> Survey:
        """Insert the survey (no id) or write it under its id; return it with the id set."""

    @abstractmethod
    def find_by_id(self, survey_id: int) -> Optional[Survey]:
        """Return the survey stored under ``survey_id`` or ``None``."""

    @abstractmethod
    def find_all(self) -> List[Survey]:
        """Return every stored survey."""

    @abstractmethod
    def delete_by_id(self, survey_id: int) -> None:
        """Remove the survey stored under ``survey_id``."""


class SQLiteSurveyStore(SurveyStore):
    """SQLite-backed ``SurveyStore``.

    ``find_all`` returns rows in ascending id order.  ``delete_by_id``
    on a missing id is a silent no-op.  Ids outside the 64-bit range
    can never be stored, so lookups and deletes treat them as missing.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def save(self, survey: Survey) -> Survey:
        if survey.id is not None and not id_in_range(survey.id):
            raise ValueError(f"Survey id {survey.id} is outside the range {MIN_ID}..{MAX_ID}")
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            if survey.id is None:
                cursor.execute(
                    """
                    INSERT INTO student_surveys (first_name, last_name, email)
                    VALUES (?, ?, ?)
                    """,
                    (survey.first_name, survey.last_name, survey.email),
                )
                survey_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO student_surveys (id, first_name, last_name, email)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        first_name = excluded.first_name,
                        last_name = excluded.last_name,
                        email = excluded.email
                    """,
                    (survey.id, survey.first_name, survey.last_name, survey.email),
                )
                survey_id = survey.id
            conn.commit()
            logger.debug("Saved survey row %s", survey_id)
            return Survey(
                id=survey_id,
                first_name=survey.first_name,
                last_name=survey.last_name,
                email=survey.email,
            )
        finally:
            conn.close()

    def find_by_id(self, survey_id: int) -> Optional[Survey]:
        if not id_in_range(survey_id):
            return None
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT * FROM student_surveys WHERE id = ?",
                (survey_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_survey(row)
        finally:
            conn.close()

    def find_all(self) -> List[Survey]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM student_surveys ORDER BY id ASC").fetchall()
            return [self._row_to_survey(row) for row in rows]
        finally:
            conn.close()

    def delete_by_id(self, survey_id: int) -> None:
        if not id_in_range(survey_id):
            logger.debug("Delete of out-of-range survey id %s ignored", survey_id)
            return
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM student_surveys WHERE id = ?", (survey_id,))
            conn.commit()
            logger.debug("Delete of survey row %s affected %s rows", survey_id, cursor.rowcount)
        finally:
            conn.close()

    @staticmethod
    def _row_to_survey(row: sqlite3.Row) -> Survey:
        return Survey(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
