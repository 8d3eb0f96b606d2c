"""Domain layer — character classes, generation, and theme values.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
