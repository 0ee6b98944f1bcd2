"""
User Use Cases

Caller resolution for authenticated requests.
"""

from .load_actor_use_case import LoadActorUseCase

__all__ = [
    "LoadActorUseCase",
]
