"""
ProjectService - Service applicatif pour la gestion des projets

Opérations en plusieurs étapes sans transaction : si une étape échoue après
la création du projet, le projet reste enregistré (en brouillon par défaut).
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Union
from domain.entities.project import Project, ProjectWithTags, PublishedStatus, SectionDisplay
from domain.exceptions import ProjectNotFoundError, OwnershipViolationError
from domain.repositories.like_repository import LikeRepository
from domain.repositories.project_repository import ProjectRepository
from application.services.tag_service import TagService

logger = logging.getLogger(__name__)

# Champs qu'une mise à jour ne peut jamais modifier
PROTECTED_FIELDS = ("id", "created_at", "user_id")


class ProjectService:
    """Service pour la gestion des projets"""

    def __init__(
        self,
        project_repository: ProjectRepository,
        tag_service: TagService,
        like_repository: Optional[LikeRepository] = None
    ):
        self.project_repository = project_repository
        self.tag_service = tag_service
        self.like_repository = like_repository

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    def get_all_projects(
        self,
        status: Optional[PublishedStatus] = None,
        section: Optional[SectionDisplay] = None,
        category: Optional[str] = None,
        tag: Optional[str] = None
    ) -> List[ProjectWithTags]:
        """Récupère tous les projets (ordre d'insertion), filtres optionnels"""
        projects = self.project_repository.find_all_with_tags()

        if status is not None:
            projects = [p for p in projects if p.project.published_status == status]
        if section is not None:
            projects = [p for p in projects if p.project.section_display == section]
        if category:
            projects = [p for p in projects if p.project.category.lower() == category.lower()]
        if tag:
            projects = [p for p in projects if p.has_tag(tag)]

        return projects

    def get_project(self, project_id: int) -> Optional[ProjectWithTags]:
        """Récupère un projet avec ses tags"""
        return self.project_repository.find_with_tags(project_id)

    def get_user_projects(self, user_id: int) -> List[ProjectWithTags]:
        """Récupère les projets d'un propriétaire"""
        return self.project_repository.find_by_user_id_with_tags(user_id)

    def get_owned_project(self, project_id: int, user_id: int) -> ProjectWithTags:
        """Récupère un projet en vérifiant que l'utilisateur en est propriétaire"""
        project = self.project_repository.find_with_tags(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)

        if project.project.user_id != user_id:
            logger.warning(f"User {user_id} attempted to modify project {project_id} it does not own")
            raise OwnershipViolationError(project_id, user_id)

        return project

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_project(self, project: Project, tag_names: Iterable[str] = ()) -> ProjectWithTags:
        """Crée le projet puis associe ses tags (find-or-create par nom)"""
        created = self.project_repository.create(project)
        logger.info(f"✅ Project '{created.title}' created (id={created.id}, owner={created.user_id})")

        self.tag_service.attach_tags(created.id, tag_names)
        return self._reload(created.id)

    def update_project(
        self,
        project_id: int,
        changes: Dict[str, Any],
        tag_names: Optional[Iterable[str]] = None
    ) -> ProjectWithTags:
        """
        Met à jour les champs d'un projet.

        L'ID, la date de création et le propriétaire ne changent jamais.
        Si `tag_names` est fourni, les tags sont entièrement remplacés ;
        avec None ils restent intacts.
        """
        existing = self.project_repository.find_by_id(project_id)
        if existing is None:
            raise ProjectNotFoundError(project_id)

        allowed = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}
        self.project_repository.update(project_id, replace(existing, **allowed))

        if tag_names is not None:
            self.tag_service.replace_tags(project_id, tag_names)

        logger.info(f"Project {project_id} updated ({', '.join(sorted(allowed)) or 'no field'})")
        return self._reload(project_id)

    def update_status(
        self,
        project_id: int,
        status: Union[PublishedStatus, str]
    ) -> ProjectWithTags:
        """Change uniquement le statut de publication (tags et autres champs intacts)"""
        status = PublishedStatus(status)
        existing = self.project_repository.find_by_id(project_id)
        if existing is None:
            raise ProjectNotFoundError(project_id)

        previous = existing.published_status
        self.project_repository.update(project_id, replace(existing, published_status=status))
        logger.info(f"Project {project_id} status: {previous.value} -> {status.value}")
        return self._reload(project_id)

    def delete_project(self, project_id: int) -> None:
        """Supprime les liaisons de tags, puis le projet, puis ses likes"""
        if self.project_repository.find_by_id(project_id) is None:
            raise ProjectNotFoundError(project_id)

        self.tag_service.detach_all(project_id)
        self.project_repository.delete(project_id)
        if self.like_repository is not None:
            self.like_repository.clear(project_id)
        logger.info(f"🗑️ Project {project_id} deleted")

    def _reload(self, project_id: int) -> ProjectWithTags:
        project = self.project_repository.find_with_tags(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project
