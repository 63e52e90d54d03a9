"""Domain layer — posts, tags, the terminal grammar, and output records.

This layer depends only on stdlib, pydantic, and ruamel.yaml.
It must never import from services, infrastructure, commands, or config.
"""
