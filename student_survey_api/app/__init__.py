"""
Application package.

Holds the FastAPI entrypoint (``main``), configuration and database
helpers (``core``), payload schemas (``schemas``), the survey service
and its store (``services``) and the versioned HTTP routes (``api``).
"""
