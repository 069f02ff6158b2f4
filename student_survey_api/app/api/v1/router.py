"""
Top-level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import surveys

router = APIRouter()

router.include_router(surveys.router, prefix="/surveys", tags=["surveys"])
