"""
Service layer - Business logic orchestration.

Applies catalog business rules on top of the repositories.
"""
