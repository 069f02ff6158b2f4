"""Shared fixtures: a temp-file SQLite store, a service and an HTTP client."""

import pytest
from fastapi.testclient import TestClient

from student_survey_api.app.core.config import Settings
from student_survey_api.app.core.db import init_db
from student_survey_api.app.main import create_app
from student_survey_api.app.services.survey_service import SurveyService
from student_survey_api.app.services.survey_store import SQLiteSurveyStore


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "surveys.db")
    init_db(path)
    return path


@pytest.fixture
def store(db_path):
    return SQLiteSurveyStore(db_path)


@pytest.fixture
def service(store):
    return SurveyService(store)


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(database_url=str(tmp_path / "api.db")))
    with TestClient(app) as test_client:
        yield test_client
