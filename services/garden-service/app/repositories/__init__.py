"""
Repository layer - Data access abstractions.

This layer provides interfaces for plant persistence and retrieval,
hiding implementation details from the business logic.
"""
