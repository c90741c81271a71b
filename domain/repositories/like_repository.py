"""
Interface LikeRepository - Registre des likes par empreinte client
"""

from abc import ABC, abstractmethod


class LikeRepository(ABC):
    """
    Registre des likes indexé par (project_id, fingerprint).

    L'empreinte est une chaîne opaque (IP + User-Agent) : ce n'est pas une
    identité, deux visiteurs derrière la même IP partagent le même like.
    """

    @abstractmethod
    def add(self, project_id: int, fingerprint: str) -> bool:
        """Enregistre un like ; False si déjà présent"""
        pass

    @abstractmethod
    def remove(self, project_id: int, fingerprint: str) -> bool:
        """Retire un like ; False s'il n'y avait rien à retirer"""
        pass

    @abstractmethod
    def exists(self, project_id: int, fingerprint: str) -> bool:
        pass

    @abstractmethod
    def count(self, project_id: int) -> int:
        """Nombre d'empreintes distinctes qui aiment le projet"""
        pass

    @abstractmethod
    def clear(self, project_id: int) -> None:
        """Oublie tous les likes d'un projet"""
        pass
