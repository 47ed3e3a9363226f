"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules, organised into ``core`` (settings, logging, errors and the
in-memory store), ``schemas`` (pydantic records), ``services``
(validation and business logic) and ``api`` (routers).
"""

from .main import app, create_app  # noqa: F401
