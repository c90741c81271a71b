"""
TagService - Tags globaux partagés entre projets
"""

import logging
from typing import Iterable, List, Optional
from domain.entities.tag import Tag
from domain.repositories.tag_repository import TagRepository

logger = logging.getLogger(__name__)


def normalize_tag_names(names: Iterable[str]) -> List[str]:
    """
    Nettoie une liste de noms de tags : espaces retirés, vides ignorés,
    doublons (insensibles à la casse) supprimés en gardant la première forme.
    """
    seen = set()
    result = []
    for raw in names:
        name = raw.strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        result.append(name)
    return result


class TagService:
    """Service pour la gestion des tags"""

    def __init__(self, tag_repository: TagRepository):
        self.tag_repository = tag_repository

    def get_all_tags(self) -> List[Tag]:
        return self.tag_repository.find_all()

    def get_tag_by_name(self, name: str) -> Optional[Tag]:
        return self.tag_repository.find_by_name(name)

    def get_or_create(self, name: str) -> Tag:
        """Récupère un tag (nom insensible à la casse) ou le crée s'il n'existe pas"""
        tag, created = self.tag_repository.get_or_create(name)
        if created:
            logger.info(f"Tag '{name}' not found. Created (id={tag.id})")
        return tag

    def attach_tags(self, project_id: int, names: Iterable[str]) -> List[Tag]:
        """Associe les tags au projet, en créant ceux qui manquent"""
        tags = []
        for name in normalize_tag_names(names):
            tag = self.get_or_create(name)
            self.tag_repository.add_to_project(project_id, tag.id)
            tags.append(tag)
        return tags

    def replace_tags(self, project_id: int, names: Iterable[str]) -> List[Tag]:
        """Remplacement complet : toutes les liaisons sont supprimées puis recréées"""
        removed = self.tag_repository.remove_from_project(project_id)
        logger.debug(f"[project {project_id}] {removed} tag links removed")
        return self.attach_tags(project_id, names)

    def detach_all(self, project_id: int) -> int:
        return self.tag_repository.remove_from_project(project_id)
