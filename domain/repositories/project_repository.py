"""
Interface ProjectRepository - Définit les opérations d'accès aux données pour Project
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from domain.entities.project import Project, ProjectWithTags


class ProjectRepository(ABC):
    """Interface pour le repository des projets"""

    @abstractmethod
    def find_by_id(self, project_id: int) -> Optional[Project]:
        """Trouve un projet (sans tags) par son ID"""
        pass

    @abstractmethod
    def create(self, project: Project) -> Project:
        """Crée un projet : attribue l'ID et la date de création"""
        pass

    @abstractmethod
    def update(self, project_id: int, project: Project) -> Project:
        """
        Remplace les champs d'un projet existant.
        L'ID et la date de création de l'enregistrement existant sont conservés.
        Lève ProjectNotFoundError si l'ID est inconnu.
        """
        pass

    @abstractmethod
    def delete(self, project_id: int) -> None:
        """Supprime la ligne du projet uniquement (pas ses liaisons de tags)"""
        pass

    @abstractmethod
    def find_all_with_tags(self) -> List[ProjectWithTags]:
        """Tous les projets avec propriétaire et tags, dans l'ordre d'insertion"""
        pass

    @abstractmethod
    def find_with_tags(self, project_id: int) -> Optional[ProjectWithTags]:
        """Un projet avec propriétaire et tags"""
        pass

    @abstractmethod
    def find_by_user_id_with_tags(self, user_id: int) -> List[ProjectWithTags]:
        """Projets d'un propriétaire avec leurs tags"""
        pass
