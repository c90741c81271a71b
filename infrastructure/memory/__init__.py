"""
Infrastructure mémoire - Store partagé et repositories
"""

from infrastructure.memory.store import MemoryStore
from infrastructure.memory.repositories import (
    InMemoryUserRepository,
    InMemoryProjectRepository,
    InMemoryTagRepository,
    InMemoryLikeRepository
)

__all__ = [
    "MemoryStore",
    "InMemoryUserRepository",
    "InMemoryProjectRepository",
    "InMemoryTagRepository",
    "InMemoryLikeRepository"
]
