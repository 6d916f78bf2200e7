"""Domain layer — calendar arithmetic and month layout.

This layer depends only on stdlib and pydantic.
It must never import from services, output, cli, or config.
"""
