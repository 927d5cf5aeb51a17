"""Domain layer — value objects, order aggregate, and error types.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
