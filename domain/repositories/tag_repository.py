"""
Interface TagRepository - Tags et liaisons projet <-> tag
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from domain.entities.tag import Tag, ProjectTag


class TagRepository(ABC):
    """Interface pour le repository des tags"""

    @abstractmethod
    def find_all(self) -> List[Tag]:
        pass

    @abstractmethod
    def find_by_id(self, tag_id: int) -> Optional[Tag]:
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Tag]:
        """Recherche insensible à la casse"""
        pass

    @abstractmethod
    def create(self, tag: Tag) -> Tag:
        """Crée un tag sans vérifier les doublons de nom"""
        pass

    @abstractmethod
    def get_or_create(self, name: str) -> Tuple[Tag, bool]:
        """
        Recherche insensible à la casse puis création si absent, en une seule
        opération atomique. Retourne (tag, created).
        """
        pass

    @abstractmethod
    def add_to_project(self, project_id: int, tag_id: int) -> ProjectTag:
        """Crée une ligne de liaison (aucune contrainte d'unicité)"""
        pass

    @abstractmethod
    def remove_from_project(self, project_id: int) -> int:
        """Supprime toutes les liaisons d'un projet, retourne le nombre supprimé"""
        pass

    @abstractmethod
    def find_project_tags(self, project_id: int) -> List[ProjectTag]:
        """Lignes de liaison d'un projet"""
        pass
