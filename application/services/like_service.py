"""
LikeService - Likes anonymes dédupliqués par empreinte client
"""

import logging
from typing import Dict, Union
from domain.exceptions import ProjectNotFoundError
from domain.repositories.like_repository import LikeRepository
from domain.repositories.project_repository import ProjectRepository

logger = logging.getLogger(__name__)


def build_fingerprint(client_host: str, user_agent: str) -> str:
    """Empreinte approximative d'un visiteur : IP + User-Agent"""
    return f"{client_host or 'unknown'}|{user_agent or 'unknown'}"


class LikeService:
    """Service pour les likes des projets"""

    def __init__(self, like_repository: LikeRepository, project_repository: ProjectRepository):
        self.like_repository = like_repository
        self.project_repository = project_repository

    def _ensure_project(self, project_id: int) -> None:
        if self.project_repository.find_by_id(project_id) is None:
            raise ProjectNotFoundError(project_id)

    def like_project(self, project_id: int, fingerprint: str) -> bool:
        """True si le like est nouveau, False s'il existait déjà"""
        return self.like_repository.add(project_id, fingerprint)

    def unlike_project(self, project_id: int, fingerprint: str) -> bool:
        """True si un like a été retiré"""
        return self.like_repository.remove(project_id, fingerprint)

    def is_project_liked(self, project_id: int, fingerprint: str) -> bool:
        return self.like_repository.exists(project_id, fingerprint)

    def get_project_likes(self, project_id: int) -> int:
        return self.like_repository.count(project_id)

    def like(self, project_id: int, fingerprint: str) -> Dict[str, Union[bool, int]]:
        """Like d'un projet existant, idempotent pour une même empreinte"""
        self._ensure_project(project_id)
        success = self.like_project(project_id, fingerprint)
        if success:
            logger.debug(f"[project {project_id}] new like")
        return {
            "success": success,
            "liked": True,
            "likes_count": self.get_project_likes(project_id)
        }

    def unlike(self, project_id: int, fingerprint: str) -> Dict[str, Union[bool, int]]:
        self._ensure_project(project_id)
        success = self.unlike_project(project_id, fingerprint)
        return {
            "success": success,
            "liked": False,
            "likes_count": self.get_project_likes(project_id)
        }

    def status(self, project_id: int, fingerprint: str) -> Dict[str, Union[bool, int]]:
        self._ensure_project(project_id)
        return {
            "liked": self.is_project_liked(project_id, fingerprint),
            "likes_count": self.get_project_likes(project_id)
        }
