"""Service layer — query and terminal logic over the post repository.

Services may import from domain and infrastructure layers.
They must never import from commands, output, or config.
"""
