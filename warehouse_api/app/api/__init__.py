"""
API package containing the HTTP routes.

``routes.py`` exposes a top-level ``router`` which includes the
domain-specific routers from ``endpoints``.  ``deps.py`` holds the
FastAPI dependencies that hand services their store.
"""
