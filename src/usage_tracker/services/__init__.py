"""Service layer — business logic returning ServiceResult.

Services may import from the domain layer.
They must never import from commands, output, or infrastructure.
"""
