"""
Pydantic schema definitions for survey records and API payloads.
"""
