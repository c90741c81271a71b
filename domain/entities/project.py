"""
Entité Project - Modèle métier pour les projets du portfolio
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from domain.entities.tag import Tag


class PublishedStatus(str, Enum):
    """Statut de publication (toute transition est permise)"""
    DRAFT = "draft"
    PUBLISHED = "published"
    HIDDEN = "hidden"


class SectionDisplay(str, Enum):
    """Section de la page d'accueil où le projet est mis en avant"""
    GENERAL = "general"
    FEATURED = "featured"
    BEST = "best"
    TOP = "top"


@dataclass
class Project:
    """Entité Project du domaine"""
    title: str
    description: str
    image_url: str
    user_id: int
    category: str
    gallery_images: List[str] = field(default_factory=list)
    figma_url: Optional[str] = None
    video_url: Optional[str] = None
    section_display: SectionDisplay = SectionDisplay.GENERAL
    published_status: PublishedStatus = PublishedStatus.DRAFT
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Normalise les énumérations passées sous forme de chaînes"""
        if isinstance(self.published_status, str):
            self.published_status = PublishedStatus(self.published_status)
        if isinstance(self.section_display, str):
            self.section_display = SectionDisplay(self.section_display)


@dataclass
class ProjectOwner:
    """Vue publique du propriétaire d'un projet (sans identifiants de connexion)"""
    id: int
    name: str
    avatar_url: Optional[str] = None


# Propriétaire introuvable : le projet reste lisible
UNKNOWN_OWNER = ProjectOwner(id=0, name="Unknown", avatar_url=None)


@dataclass
class ProjectWithTags:
    """Modèle de lecture : projet + propriétaire + tags, assemblé à la lecture"""
    project: Project
    user: ProjectOwner
    tags: List[Tag] = field(default_factory=list)

    def tag_names(self) -> List[str]:
        return [tag.name for tag in self.tags]

    def has_tag(self, name: str) -> bool:
        return any(tag.matches(name) for tag in self.tags)
