"""Domain layer — image, gallery, and tagging models and rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, or config.
"""
