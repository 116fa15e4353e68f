"""Infrastructure layer — data file persistence.

This layer depends on stdlib, pydantic, and the domain layer's
serializable snapshot model. It must never import from services,
commands, or output.
"""
