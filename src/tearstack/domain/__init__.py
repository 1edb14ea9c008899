"""Domain layer — actions, entries, and failure records.

This layer depends only on stdlib and pydantic.
It must never import from services, config, plugins, or integration.
"""
