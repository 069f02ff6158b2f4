"""
Exceptions raised by the survey service layer.
"""


class SurveyApiError(Exception):
    """Base class for errors raised by this package."""


class SurveyNotFoundError(SurveyApiError):
    """Raised when an update targets a survey id that does not exist."""

    message = "Survey Not Found"

    def __init__(self, survey_id: int) -> None:
        self.survey_id = survey_id
        super().__init__(f"{self.message}: id={survey_id}")
