"""
Pydantic schemas for student survey records.

``Survey`` is the record handed between the service and the store;
its ``id`` is ``None`` until the store assigns one.  ``SurveyCreate``
is the request body for create and update calls and ``SurveyRead`` is
what the API returns.  No format rules are enforced on the text
fields.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Survey(BaseModel):
    """A persisted (or about to be persisted) survey record."""

    id: Optional[int] = Field(None, description="Identifier assigned by the store")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class SurveyCreate(BaseModel):
    """Schema for creating or replacing a survey's fields."""

    first_name: Optional[str] = Field(None, description="Student's first name")
    last_name: Optional[str] = Field(None, description="Student's last name")
    email: Optional[str] = Field(None, description="Student's email address")

    def to_survey(self) -> Survey:
        return Survey(first_name=self.first_name, last_name=self.last_name, email=self.email)


class SurveyRead(BaseModel):
    """Schema for reading a survey record."""

    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]

    @classmethod
    def from_survey(cls, survey: Survey) -> "SurveyRead":
        return cls(
            id=survey.id,
            first_name=survey.first_name,
            last_name=survey.last_name,
            email=survey.email,
        )
