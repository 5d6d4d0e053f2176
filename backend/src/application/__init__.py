"""
Application Layer - Use cases and input validation.

This layer orchestrates domain entities and coordinates application logic.
It depends on the domain layer and reaches storage only through the
repository interfaces defined there.
"""
