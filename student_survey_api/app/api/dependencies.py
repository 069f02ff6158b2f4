"""
API dependencies.

Builds a ``SurveyService`` per request around the store that
``create_app`` placed on ``app.state``.
"""

from fastapi import Request

from student_survey_api.app.services.survey_service import SurveyService
from student_survey_api.app.services.survey_store import SurveyStore


def get_survey_store(request: Request) -> SurveyStore:
    return request.app.state.survey_store


def get_survey_service(request: Request) -> SurveyService:
    """Return a service wired to the application's store."""
    return SurveyService(get_survey_store(request))
