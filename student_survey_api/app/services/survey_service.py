"""
Service layer for student surveys.

``SurveyService`` exposes create/update/list/get/delete over survey
records and leaves persistence entirely to the ``SurveyStore`` it is
constructed with.  Store errors are not caught here; they reach the
caller unchanged.

Note the asymmetry between ``update`` and ``get_by_id``: a missing id
is an error for the former (``SurveyNotFoundError``) and a normal
``None`` result for the latter.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from student_survey_api.app.core.exceptions import SurveyNotFoundError
from student_survey_api.app.schemas.survey import Survey
from student_survey_api.app.services.survey_store import SurveyStore

logger = logging.getLogger(__name__)


class SurveyService:
    """CRUD operations for survey records."""

    def __init__(self, store: SurveyStore) -> None:
        self.store = store

    def create(self, survey: Survey) -> Survey:
        """Persist a new survey and return the stored record with its id."""
        saved = self.store.save(survey)
        logger.info("Created survey %s", saved.id)
        return saved

    def update(self, survey: Survey, survey_id: int) -> Survey:
        """Copy the name and email fields of ``survey`` onto record ``survey_id``.

        ``survey.id`` is ignored.  Raises ``SurveyNotFoundError`` if no
        record has the given id.
        """
        existing = self.store.find_by_id(survey_id)
        if existing is None:
            logger.warning("Update of missing survey %s", survey_id)
            raise SurveyNotFoundError(survey_id)

        existing.first_name = survey.first_name
        existing.last_name = survey.last_name
        existing.email = survey.email

        self.store.save(existing)
        logger.info("Updated survey %s", survey_id)
        return existing

    def list(self) -> List[Survey]:
        return self.store.find_all()

    def get_by_id(self, survey_id: int) -> Optional[Survey]:
        return self.store.find_by_id(survey_id)

    def delete_by_id(self, survey_id: int) -> None:
        # No existence check; missing ids are handled by the store.
        self.store.delete_by_id(survey_id)
        logger.info("Deleted survey %s", survey_id)
