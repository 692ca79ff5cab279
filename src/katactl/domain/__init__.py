"""Domain layer — exercise models and pure functions.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
