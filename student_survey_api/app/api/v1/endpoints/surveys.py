"""
Survey endpoints for API v1.

These routes expose the survey service over HTTP.  A missing survey
yields HTTP 404 on ``GET`` and ``PUT``.  ``DELETE`` always answers 204
because the service does not check existence before deleting.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from student_survey_api.app.api.dependencies import get_survey_service
from student_survey_api.app.core.exceptions import SurveyNotFoundError
from student_survey_api.app.schemas.survey import SurveyCreate, SurveyRead
from student_survey_api.app.services.survey_service import SurveyService

router = APIRouter()


@router.get("/", response_model=List[SurveyRead])
def list_surveys(service: SurveyService = Depends(get_survey_service)) -> List[SurveyRead]:
    """Return every stored survey."""
    return [SurveyRead.from_survey(survey) for survey in service.list()]


@router.get("/{survey_id}", response_model=SurveyRead)
def get_survey(
    survey_id: int,
    service: SurveyService = Depends(get_survey_service),
) -> SurveyRead:
    """Retrieve a single survey by ID.

    The service reports a missing record as ``None``; the API turns
    that into a 404.
    """
    survey = service.get_by_id(survey_id)
    if survey is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SurveyNotFoundError.message)
    return SurveyRead.from_survey(survey)


@router.post("/", response_model=SurveyRead, status_code=status.HTTP_201_CREATED)
def create_survey(
    survey_in: SurveyCreate,
    service: SurveyService = Depends(get_survey_service),
) -> SurveyRead:
    """Create a new survey."""
    survey = service.create(survey_in.to_survey())
    return SurveyRead.from_survey(survey)


@router.put("/{survey_id}", response_model=SurveyRead)
def update_survey(
    survey_id: int,
    survey_in: SurveyCreate,
    service: SurveyService = Depends(get_survey_service),
) -> SurveyRead:
    """Replace the name and email of an existing survey.

    ``SurveyNotFoundError`` is turned into a 404 by the handler
    registered in ``create_app``.
    """
    survey = service.update(survey_in.to_survey(), survey_id)
    return SurveyRead.from_survey(survey)


@router.delete("/{survey_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_survey(
    survey_id: int,
    service: SurveyService = Depends(get_survey_service),
) -> None:
    """Delete a survey by ID."""
    service.delete_by_id(survey_id)
    return None
