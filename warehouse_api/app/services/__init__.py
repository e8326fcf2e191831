"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on
the ``ProductStore`` it is given, so API handlers stay free of query
details.
"""
