"""Domain layer — schemas, front-matter parsing, and error types.

This layer depends only on stdlib, pydantic, and ruamel.yaml.
It must never import from services, infrastructure, commands, or config.
"""
