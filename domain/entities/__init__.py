"""
Entités du domaine
"""

from domain.entities.user import User
from domain.entities.tag import Tag, ProjectTag
from domain.entities.project import (
    Project,
    ProjectOwner,
    ProjectWithTags,
    PublishedStatus,
    SectionDisplay,
    UNKNOWN_OWNER
)

__all__ = [
    "User",
    "Tag",
    "ProjectTag",
    "Project",
    "ProjectOwner",
    "ProjectWithTags",
    "PublishedStatus",
    "SectionDisplay",
    "UNKNOWN_OWNER"
]
