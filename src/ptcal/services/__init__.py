"""Service layer — argument routing returning ServiceResult.

Services may import from the domain layer.
They must never import from cli, output, or config.
"""
