"""
Application package initializer.

The application is organised into small pieces: ``core`` holds
configuration, logging, errors, the MongoDB store and the seed loader;
``services`` holds business logic; ``schemas`` the request and response
models; ``api`` the HTTP routes.
"""

from .main import app  # noqa: F401
