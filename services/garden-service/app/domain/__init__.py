"""
Domain layer - Core business entities and domain logic.

This layer contains the plant catalog's business objects and error types,
independent of any infrastructure or framework concerns.
"""
