"""
Repositories - Interfaces pour l'accès aux données
"""

from domain.repositories.user_repository import UserRepository
from domain.repositories.project_repository import ProjectRepository
from domain.repositories.tag_repository import TagRepository
from domain.repositories.like_repository import LikeRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "TagRepository",
    "LikeRepository"
]
