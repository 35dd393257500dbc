"""User registry HTTP API.

This package contains a CRUD user-management service: request validation,
persistence of user records and the FastAPI application that exposes them.
"""

__version__ = "0.1.0"
