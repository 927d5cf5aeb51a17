"""Service layer — the order workflow and its ServiceResult facade.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
